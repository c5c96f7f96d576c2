"""
Tests for the name validator, which reports results instead of raising.
"""

import json
from io import StringIO

from hypothesis import given, settings
from hypothesis import strategies as st

from domain_addr.enums import DnsErrorCode, DomainErrorCode, LogLevel, NameKind
from domain_addr.event_logger import EventLogger
from domain_addr.name_validator import NameValidator


class TestNameValidator:
    """Validation results for domain and DNS names."""

    def test_valid_domain(self) -> None:
        result = NameValidator().validate("www.example.co.uk")

        assert result.valid
        assert result.error is None
        assert result.kind is NameKind.DOMAIN
        assert result.root == "example.co.uk"
        assert result.suffix == "co.uk"

    def test_invalid_domain(self) -> None:
        result = NameValidator().validate("com")

        assert not result.valid
        assert result.name is None
        assert result.root is None
        assert result.suffix is None
        assert result.error.code == DomainErrorCode.NOT_A_REGISTRABLE_DOMAIN.value

    def test_valid_dns_name(self) -> None:
        result = NameValidator().validate("_sip._tcp.example.com.", NameKind.DNS)

        assert result.valid
        assert result.root == "example.com."
        assert result.suffix == "com."

    def test_invalid_dns_name(self) -> None:
        result = NameValidator().validate("*.com.", NameKind.DNS)
        assert result.error.code == DnsErrorCode.NO_VALID_ROOT.value

    def test_validate_many_keeps_order(self) -> None:
        names = ["example.com", "com", "_tcp.example.com."]
        results = NameValidator().validate_many(names)

        assert [r.raw for r in results] == names
        assert [r.valid for r in results] == [True, False, False]

    def test_to_dict_is_json_serializable(self) -> None:
        validator = NameValidator()
        for result in (validator.validate("example.com"), validator.validate("exa mple.com")):
            data = json.loads(json.dumps(result.to_dict()))
            assert data["name"] == result.raw
            assert data["valid"] is result.valid
            assert data["kind"] == "domain"

    def test_rejections_are_logged_at_debug_level(self) -> None:
        stream = StringIO()
        logger = EventLogger(output_stream=stream, min_level=LogLevel.DEBUG)
        NameValidator(logger=logger).validate("example.127")

        assert len(logger.entries) == 1
        assert logger.entries[0].data["code"] == DomainErrorCode.NUMERIC_TLD.value
        assert "example.127" in stream.getvalue()

    @given(name=st.text(max_size=40))
    @settings(max_examples=200)
    def test_any_input_gives_a_result(self, name: str) -> None:
        validator = NameValidator()
        for kind in NameKind:
            result = validator.validate(name, kind)
            assert result.valid == (result.error is None)
            assert validator.is_valid(name, kind) == result.valid
