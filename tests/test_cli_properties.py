"""
Tests for the command-line interface.

Commands are run through main() with an argument list; output is captured
with capsys.
"""

import json
from pathlib import Path

import pytest

from domain_addr import __version__
from domain_addr.cli import create_parser, main
from domain_addr.config import create_default_config, load_config_from_file, save_config_to_file


class TestNameCommands:
    """domain and dns commands."""

    def test_valid_domain(self, capsys) -> None:
        assert main(["domain", "www.example.co.uk"]) == 0

        out = capsys.readouterr().out
        assert "Valid" in out
        assert "Root: example.co.uk" in out
        assert "Suffix: co.uk" in out
        assert "Prefix: www" in out

    def test_invalid_domain(self, capsys) -> None:
        assert main(["domain", "com"]) == 1
        assert "Invalid" in capsys.readouterr().out

    def test_german_output(self, capsys) -> None:
        assert main(["domain", "example.127", "--language", "de"]) == 1
        out = capsys.readouterr().out
        assert "Ungültig" in out
        assert "rein numerisch" in out

    def test_json_output(self, capsys) -> None:
        assert main(["dns", "_sip._tcp.example.com.", "--json"]) == 0

        data = json.loads(capsys.readouterr().out)
        assert data[0]["valid"] is True
        assert data[0]["root"] == "example.com."
        assert data[0]["kind"] == "dns"

    def test_invalid_dns_name(self, capsys) -> None:
        assert main(["dns", "_tcp.com."]) == 1
        assert "DNS name has no valid root domain" in capsys.readouterr().out

    def test_verbose_shows_section(self, capsys) -> None:
        assert main(["domain", "example.github.io", "-v"]) == 0
        assert "Section: PRIVATE" in capsys.readouterr().out

    def test_missing_config_file(self, tmp_path: Path, capsys) -> None:
        assert main(["domain", "example.com", "--config", str(tmp_path / "none.json")]) == 1
        assert "Configuration file not found" in capsys.readouterr().err


class TestCheckList:
    """check-list reads names from a file."""

    def test_results_and_summary(self, tmp_path: Path, capsys) -> None:
        names = tmp_path / "names.txt"
        names.write_text("# comment\nexample.com\n\ncom\nbücher.de\n", encoding="utf-8")
        output = tmp_path / "out" / "results.json"

        assert main(["check-list", str(names), "--output", str(output)]) == 1

        assert "2 of 3 names valid" in capsys.readouterr().out
        results = json.loads(output.read_text(encoding="utf-8"))
        assert [r["name"] for r in results] == ["example.com", "com", "bücher.de"]
        assert [r["valid"] for r in results] == [True, False, True]

    def test_all_valid_dns_names(self, tmp_path: Path) -> None:
        names = tmp_path / "names.txt"
        names.write_text("_tcp.example.com.\n*.example.com.\n", encoding="utf-8")
        assert main(["check-list", str(names), "--dns"]) == 0

    def test_missing_input_file(self, tmp_path: Path, capsys) -> None:
        assert main(["check-list", str(tmp_path / "missing.txt")]) == 1
        assert "Input file not found" in capsys.readouterr().err

    def test_empty_input_file(self, tmp_path: Path, capsys) -> None:
        names = tmp_path / "names.txt"
        names.write_text("# nothing\n", encoding="utf-8")
        assert main(["check-list", str(names)]) == 1
        assert "No names found" in capsys.readouterr().err

    def test_custom_rule_file_from_config(self, tmp_path: Path) -> None:
        rules = tmp_path / "rules.dat"
        rules.write_text("com\nexample.com\n", encoding="utf-8")
        config = create_default_config()
        config.rules.path = rules
        config_path = tmp_path / "config.json"
        save_config_to_file(config, config_path)

        # example.com is a suffix in this rule file
        assert main(["domain", "example.com", "--config", str(config_path)]) == 1
        assert main(["domain", "www.example.com", "--config", str(config_path)]) == 0


class TestConfigCommand:
    """config init, show and validate."""

    def test_init_show_validate(self, tmp_path: Path, capsys) -> None:
        config_path = tmp_path / "config.json"

        assert main(["config", "init", "--path", str(config_path), "--language", "de"]) == 0
        assert load_config_from_file(config_path).language == "de"

        assert main(["config", "show", "--path", str(config_path)]) == 0
        assert '"language": "de"' in capsys.readouterr().out

        assert main(["config", "validate", "--path", str(config_path)]) == 0
        assert "Konfiguration ist gültig" in capsys.readouterr().out

    def test_init_does_not_overwrite_without_force(self, tmp_path: Path) -> None:
        config_path = tmp_path / "config.json"
        assert main(["config", "init", "--path", str(config_path)]) == 0
        assert main(["config", "init", "--path", str(config_path)]) == 1
        assert main(["config", "init", "--path", str(config_path), "--force"]) == 0

    def test_validate_reports_errors(self, tmp_path: Path, capsys) -> None:
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({"language": "fr"}), encoding="utf-8")

        assert main(["config", "validate", "--path", str(config_path)]) == 1
        assert "Unsupported language: fr" in capsys.readouterr().out

    def test_show_missing(self, tmp_path: Path) -> None:
        assert main(["config", "show", "--path", str(tmp_path / "none.json")]) == 1


class TestOtherCommands:
    """self-test, update-rules and parser basics."""

    def test_self_test(self, capsys) -> None:
        assert main(["self-test"]) == 0
        assert "Self-test passed" in capsys.readouterr().out

    def test_update_rules_rejects_plain_http(self, tmp_path: Path, capsys) -> None:
        code = main([
            "update-rules",
            "--url", "http://publicsuffix.org/list/public_suffix_list.dat",
            "--output", str(tmp_path / "list.dat"),
        ])
        assert code == 1
        assert "HTTPS" in capsys.readouterr().err

    def test_no_command_prints_help(self, capsys) -> None:
        assert main([]) == 0
        assert "domain-addr" in capsys.readouterr().out

    def test_version(self, capsys) -> None:
        with pytest.raises(SystemExit):
            create_parser().parse_args(["--version"])
        assert __version__ in capsys.readouterr().out
