"""Config file discovery and rule option resolution."""

from __future__ import annotations

import argparse
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any

from cjklint.errors import OptionsError
from cjklint.options import PRESETS, validate_rules

CONFIG_NAME = "cjklint.toml"


def load_config(config_path: Path | None, search_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else search_dir / CONFIG_NAME

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def parse_rule_arg(s: str) -> tuple[str, Any]:
    """Parse a NAME=VALUE string into (name, value); true/false become booleans."""
    if "=" not in s:
        raise argparse.ArgumentTypeError(f"invalid rule format (expected NAME=VALUE): {s}")
    name, _, value = s.partition("=")
    if not name:
        raise argparse.ArgumentTypeError(f"invalid rule format (empty name): {s}")
    lowered = value.lower()
    if lowered == "true":
        return name, True
    if lowered == "false":
        return name, False
    return name, value


def resolve_rules(
    config: Mapping[str, Any],
    overrides: list[tuple[str, Any]] | None = None,
    preset: str | None = None,
) -> dict[str, Any]:
    """Merge preset, config file and CLI rules, then validate the result.

    Precedence: preset < config file < CLI flags.
    """
    preset_name = preset if preset is not None else config.get("preset")
    rules: dict[str, Any] = {}
    if preset_name is not None:
        if preset_name not in PRESETS:
            names = ", ".join(sorted(PRESETS))
            raise OptionsError(f"unknown preset (expected one of: {names})", "preset", preset_name)
        rules.update(PRESETS[preset_name])

    cfg_rules = config.get("rules")
    if isinstance(cfg_rules, dict):
        rules.update(cfg_rules)
    elif cfg_rules is not None:
        raise OptionsError("[rules] must be a table", "rules", cfg_rules)

    for name, value in overrides or []:
        rules[name] = value

    validate_rules(rules)
    return rules
