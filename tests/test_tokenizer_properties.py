"""
Property-based tests for the name tokenizer.
"""

import ipaddress

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from domain_addr.enums import TokenizeErrorCode
from domain_addr.exceptions import TokenizeError
from domain_addr.tokenizer import MAX_LABELS, MAX_NAME_LENGTH, is_ip_address, tokenize


label_strategy = st.text(alphabet="abcdefghijklmnopqrstuvwxyz0123456789-", min_size=1, max_size=10)


class TestTokenizeProperty:
    """Splitting names into labels."""

    @given(labels=st.lists(label_strategy, min_size=1, max_size=8), fqdn=st.booleans())
    @settings(max_examples=200)
    def test_labels_and_positions_reproduce_input(self, labels: list[str], fqdn: bool) -> None:
        name = ".".join(labels) + ("." if fqdn else "")
        tokens = tokenize(name)

        assert tokens.texts == labels
        assert tokens.fully_qualified is fqdn
        assert len(tokens) == len(labels)
        for label in tokens.labels:
            assert name[label.position:label.position + len(label.text)] == label.text

    def test_single_trailing_dot_marks_fully_qualified(self) -> None:
        assert tokenize("example.com.").fully_qualified
        assert not tokenize("example.com").fully_qualified

    @pytest.mark.parametrize("name,code", [
        ("", TokenizeErrorCode.EMPTY_INPUT),
        (".", TokenizeErrorCode.EMPTY_LABEL),
        ("exa..mple.com", TokenizeErrorCode.EMPTY_LABEL),
        (".example.com", TokenizeErrorCode.EMPTY_LABEL),
        ("example.com..", TokenizeErrorCode.MULTIPLE_TRAILING_DOTS),
        ("127.38.53.247", TokenizeErrorCode.IP_ADDRESS),
        ("fd79:cdcb:38cc:9dd:f686:e06d:32f3:c123", TokenizeErrorCode.IP_ADDRESS),
    ])
    def test_malformed_names_are_rejected(self, name: str, code: TokenizeErrorCode) -> None:
        with pytest.raises(TokenizeError) as exc_info:
            tokenize(name)
        assert exc_info.value.code == code.value

    def test_name_length_limit_includes_trailing_dot(self) -> None:
        # 63 + 1 + 63 + 1 + 63 + 1 + 61 = 253
        name = ".".join(["a" * 63, "b" * 63, "c" * 63, "d" * 61])
        assert len(name) == MAX_NAME_LENGTH
        assert len(tokenize(name)) == 4

        with pytest.raises(TokenizeError) as exc_info:
            tokenize(name + ".")
        assert exc_info.value.code == TokenizeErrorCode.TOO_LONG.value

    def test_label_count_limit(self) -> None:
        assert len(tokenize(".".join(["a"] * MAX_LABELS))) == MAX_LABELS

    def test_too_many_labels(self) -> None:
        name = ".".join(["a"] * (MAX_LABELS + 1))
        with pytest.raises(TokenizeError) as exc_info:
            tokenize(name)
        assert exc_info.value.code == TokenizeErrorCode.TOO_MANY_LABELS.value


class TestIpAddressDetection:
    """IP literals are recognised with and without a trailing dot."""

    @given(address=st.ip_addresses())
    @settings(max_examples=100)
    def test_any_ip_address_is_detected(self, address: ipaddress._BaseAddress) -> None:
        assert is_ip_address(str(address))

    @pytest.mark.parametrize("name", ["127.0.0.1.", "127.com", "1.2.3", "example.com"])
    def test_non_literals(self, name: str) -> None:
        expected = name == "127.0.0.1."
        assert is_ip_address(name) is expected
