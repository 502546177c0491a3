"""Tests for TOML config loading and rule resolution."""

from __future__ import annotations

import argparse
from pathlib import Path

import pytest

from cjklint.cli import build_parser, resolve_options
from cjklint.config import load_config, parse_rule_arg, resolve_rules
from cjklint.errors import OptionsError
from cjklint.options import DEFAULT_RULES


class TestLoadConfig:
    def test_missing_config_returns_empty(self, tmp_path: Path) -> None:
        assert load_config(None, tmp_path) == {}

    def test_explicit_path(self, tmp_path: Path) -> None:
        cfg = tmp_path / "custom.toml"
        cfg.write_text("[rules]\ntrimSpace = true\n")
        result = load_config(cfg, tmp_path)
        assert result["rules"] == {"trimSpace": True}

    def test_auto_discover_cjklint_toml(self, tmp_path: Path) -> None:
        cfg = tmp_path / "cjklint.toml"
        cfg.write_text('preset = "default"\n')
        assert load_config(None, tmp_path) == {"preset": "default"}


class TestParseRuleArg:
    def test_booleans(self) -> None:
        assert parse_rule_arg("trimSpace=true") == ("trimSpace", True)
        assert parse_rule_arg("trimSpace=False") == ("trimSpace", False)

    def test_string(self) -> None:
        assert parse_rule_arg("unifiedPunctuation=traditional") == (
            "unifiedPunctuation",
            "traditional",
        )

    def test_equals_in_value(self) -> None:
        assert parse_rule_arg("halfWidthPunctuation==") == ("halfWidthPunctuation", "=")

    def test_no_equals_raises(self) -> None:
        with pytest.raises(argparse.ArgumentTypeError):
            parse_rule_arg("noequals")

    def test_empty_name_raises(self) -> None:
        with pytest.raises(argparse.ArgumentTypeError):
            parse_rule_arg("=true")


class TestResolveRules:
    def test_preset(self) -> None:
        assert resolve_rules({"preset": "default"}) == dict(DEFAULT_RULES)

    def test_file_overrides_preset(self) -> None:
        rules = resolve_rules({"preset": "default", "rules": {"trimSpace": False}})
        assert rules["trimSpace"] is False
        assert rules["noSpaceInsideMark"] is True

    def test_cli_overrides_file(self) -> None:
        rules = resolve_rules({"rules": {"trimSpace": False}}, [("trimSpace", True)])
        assert rules == {"trimSpace": True}

    def test_explicit_preset_argument(self) -> None:
        rules = resolve_rules({}, None, "default")
        assert rules == dict(DEFAULT_RULES)

    def test_unknown_preset(self) -> None:
        with pytest.raises(OptionsError, match="preset"):
            resolve_rules({"preset": "strict"})

    def test_rules_must_be_table(self) -> None:
        with pytest.raises(OptionsError):
            resolve_rules({"rules": "all"})

    def test_invalid_value(self) -> None:
        with pytest.raises(OptionsError):
            resolve_rules({"rules": {"trimSpace": "yes"}})


class TestConfigMerge:
    def test_no_config_uses_default_preset(self, tmp_path: Path) -> None:
        doc = tmp_path / "doc.md"
        doc.write_text("")
        opts = resolve_options(build_parser().parse_args([str(doc)]))
        assert opts.rules == dict(DEFAULT_RULES)

    def test_config_rules_only(self, tmp_path: Path) -> None:
        (tmp_path / "cjklint.toml").write_text("[rules]\ntrimSpace = true\n")
        doc = tmp_path / "doc.md"
        doc.write_text("")
        opts = resolve_options(build_parser().parse_args([str(doc)]))
        assert opts.rules == {"trimSpace": True}

    def test_cli_preset_and_rule(self, tmp_path: Path) -> None:
        (tmp_path / "cjklint.toml").write_text("[rules]\ntrimSpace = false\n")
        doc = tmp_path / "doc.md"
        doc.write_text("")
        ns = build_parser().parse_args(
            [str(doc), "--preset", "default", "-r", "spaceOutsideCode=false"]
        )
        opts = resolve_options(ns)
        assert opts.rules["trimSpace"] is False
        assert opts.rules["spaceOutsideCode"] is False
        assert opts.rules["noSpaceInsideMark"] is True

    def test_explicit_config_path(self, tmp_path: Path) -> None:
        cfg = tmp_path / "other.toml"
        cfg.write_text('[rules]\nunifiedPunctuation = "traditional"\n')
        doc = tmp_path / "doc.md"
        doc.write_text("")
        opts = resolve_options(build_parser().parse_args([str(doc), "--config", str(cfg)]))
        assert opts.rules == {"unifiedPunctuation": "traditional"}
