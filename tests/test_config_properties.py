"""
Property-based tests for configuration module.
"""

import json
from pathlib import Path

from hypothesis import HealthCheck, given, settings
from hypothesis import strategies as st

from domain_addr.config import (
    PSL_URL,
    LoggingConfig,
    RelaxedLabelPolicy,
    RuleListConfig,
    SystemConfig,
    config_to_dict,
    create_default_config,
    load_config_from_file,
    save_config_to_file,
)


# Strategies for generating valid configuration objects

@st.composite
def rule_list_config_strategy(draw) -> RuleListConfig:
    """Generate valid RuleListConfig objects."""
    path = draw(st.one_of(
        st.none(),
        st.text(alphabet="abcdefghijklmnopqrstuvwxyz_", min_size=1, max_size=20).map(
            lambda s: Path("/var/lib") / f"{s}.dat"
        ),
    ))
    return RuleListConfig(
        path=path,
        include_private=draw(st.booleans()),
        source_url=draw(st.sampled_from([PSL_URL, "https://mirror.example/psl.dat"])),
    )


@st.composite
def relaxed_policy_strategy(draw) -> RelaxedLabelPolicy:
    """Generate RelaxedLabelPolicy objects from the usual special characters."""
    return RelaxedLabelPolicy(
        whole_label_specials=frozenset(draw(st.sets(st.sampled_from("*!@"), max_size=3))),
        prefix_specials=frozenset(draw(st.sets(st.sampled_from("_#"), max_size=2))),
        allow_inner_underscore=draw(st.booleans()),
    )


@st.composite
def system_config_strategy(draw) -> SystemConfig:
    """Generate valid SystemConfig objects."""
    return SystemConfig(
        rules=draw(rule_list_config_strategy()),
        relaxed_labels=draw(relaxed_policy_strategy()),
        logging=LoggingConfig(
            level=draw(st.sampled_from(["debug", "info", "warn", "error"])),
            output_format=draw(st.sampled_from(["json", "text", "both"])),
        ),
        language=draw(st.sampled_from(["de", "en"])),
    )


class TestConfigRoundTripProperty:
    """Saving and loading a configuration gives back an equal one."""

    @given(config=system_config_strategy())
    @settings(max_examples=100, suppress_health_check=[HealthCheck.function_scoped_fixture])
    def test_save_then_load_gives_equal_config(self, config: SystemConfig, tmp_path: Path) -> None:
        config_path = tmp_path / "config.json"

        assert save_config_to_file(config, config_path)
        loaded = load_config_from_file(config_path)

        assert loaded == config

    @given(config=system_config_strategy())
    @settings(max_examples=50)
    def test_dict_form_is_json_serializable(self, config: SystemConfig) -> None:
        data = json.loads(json.dumps(config_to_dict(config)))
        assert data["language"] == config.language
        assert set(data["relaxed_labels"]["whole_label_specials"]) == set(
            config.relaxed_labels.whole_label_specials
        )


class TestConfigLoading:
    """Defaults and error handling."""

    def test_defaults(self) -> None:
        config = create_default_config()
        assert config.language == "en"
        assert config.rules.path is None
        assert config.rules.include_private
        assert config.rules.source_url == PSL_URL
        assert config.relaxed_labels.whole_label_specials == frozenset({"*", "!"})
        assert config.relaxed_labels.prefix_specials == frozenset({"_"})
        assert config.logging.level == "info"

    def test_missing_file_gives_none(self, tmp_path: Path) -> None:
        assert load_config_from_file(tmp_path / "missing.json") is None

    def test_invalid_json_gives_none(self, tmp_path: Path, capsys) -> None:
        config_path = tmp_path / "config.json"
        config_path.write_text("{not json", encoding="utf-8")

        assert load_config_from_file(config_path) is None
        assert "Error loading config" in capsys.readouterr().err

    def test_partial_file_uses_defaults(self, tmp_path: Path) -> None:
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({"language": "de"}), encoding="utf-8")

        config = load_config_from_file(config_path)
        assert config == create_default_config(language="de")
