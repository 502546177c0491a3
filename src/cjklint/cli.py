"""Command-line interface for cjklint."""

from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from cjklint.config import CONFIG_NAME, load_config, parse_rule_arg, resolve_rules
from cjklint.errors import OptionsError
from cjklint.options import PRESETS
from cjklint.report import Result


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path
    output_file: Path | None
    rules: dict[str, Any]
    check: bool
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="cjklint",
        description="Format and lint prose mixing CJK and Latin text",
    )
    p.add_argument("input", help="Input text or markdown file")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "--config",
        metavar="FILE",
        help=f"Config file (default: auto-discover {CONFIG_NAME})",
    )
    p.add_argument(
        "-r",
        "--rule",
        action="append",
        default=[],
        metavar="NAME=VALUE",
        help="Set a rule option, true/false for switches (repeatable)",
    )
    p.add_argument(
        "--preset",
        choices=sorted(PRESETS),
        default=None,
        help="Base rule preset (default: from config, else 'default')",
    )
    p.add_argument(
        "--check",
        action="store_true",
        help="Report validations to stderr instead of writing output",
    )
    p.add_argument("--debug", action="store_true", help="Dump tokens to stderr")
    return p


def _input_dir(args: argparse.Namespace) -> Path:
    input_dir = Path(args.input).parent
    if not input_dir.parts:
        input_dir = Path(".")
    return input_dir


def _config_label(args: argparse.Namespace) -> str:
    if args.config:
        return args.config
    return str(_input_dir(args) / CONFIG_NAME)


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge preset, config file and CLI args into CliOptions.

    Precedence: preset < config file < CLI flags. A config file with neither
    a preset nor a [rules] table (or no config file at all) falls back to the
    default preset.
    """
    input_file = Path(args.input)
    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, _input_dir(args))

    overrides = [parse_rule_arg(raw) for raw in args.rule]

    preset = args.preset
    if preset is None and "preset" not in config and "rules" not in config:
        preset = "default"

    rules = resolve_rules(config, overrides, preset)
    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        rules=rules,
        check=args.check,
        debug=args.debug,
    )


def format_file(options: CliOptions) -> tuple[str, Result]:
    """Read and format a file; return the original source and the result."""
    from cjklint import format
    from cjklint.debug import dump_tokens

    source = options.input_file.read_text(encoding="utf-8")
    result = format(source, {"rules": options.rules})

    if options.debug and result.tokens is not None:
        dump_tokens(result.tokens, file=sys.stderr)

    return source, result


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    except OptionsError as exc:
        print(exc.format(_config_label(args)), file=sys.stderr)
        return 2

    source, result = format_file(options)

    if options.check:
        for validation in result.validations:
            print(validation.format(source, str(options.input_file)), file=sys.stderr)
        if result.validations:
            count = len(result.validations)
            print(f"{options.input_file}: {count} validation(s)", file=sys.stderr)
            return 1
        return 0

    if options.output_file:
        options.output_file.write_text(result.result, encoding="utf-8")
    else:
        sys.stdout.write(result.result)

    return 0
