"""Command-line interface for jsunparse."""

from __future__ import annotations

import argparse
import json
import logging
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from jsunparse.errors import OptionsError, UnhandledNodeError
from jsunparse.options import PrintOptions

logger = logging.getLogger(__name__)

CONFIG_NAME = "jsunparse.toml"


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path
    output_file: Path | None
    map_file: Path | None
    inline_map: bool
    print_options: PrintOptions
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the jsunparse argument parser; kept apart from main() so tests can inspect it."""
    p = argparse.ArgumentParser(
        prog="jsunparse",
        description="Print an ESTree JSON syntax tree as JavaScript/TypeScript source",
    )
    p.add_argument("input", help="Input ESTree .json file (a node or a list of statements)")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    maps = p.add_mutually_exclusive_group()
    maps.add_argument("--map", metavar="FILE", help="Write the source map to FILE")
    maps.add_argument(
        "--inline-map",
        action="store_true",
        help="Append the source map as a data: URI comment",
    )
    p.add_argument(
        "--indent",
        metavar="TEXT",
        help="Indentation unit: literal text, a number of spaces, or 'tab' (default: tab)",
    )
    p.add_argument("--quotes", choices=["single", "double"], help="String quote style")
    p.add_argument("--width", type=int, metavar="COLS", help="Line width budget (default: 80)")
    p.add_argument("--source-name", metavar="NAME", help="Source file name recorded in the map")
    p.add_argument(
        "--source",
        metavar="FILE",
        help="Original source file, embedded in the map and quoted in errors",
    )
    p.add_argument(
        "--raw-mappings",
        action="store_true",
        help="Emit raw mapping segments instead of the VLQ string",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help=f"Config file (default: auto-discover {CONFIG_NAME})",
    )
    p.add_argument("--debug", action="store_true", help="Dump the command tree to stderr")
    p.add_argument("-v", "--verbose", action="store_true", help="Log progress to stderr")
    return p


def parse_indent_arg(value: str | int) -> str:
    """Turn an indent setting into indentation text: ``4`` or ``"4"`` is four spaces."""
    if isinstance(value, int):
        return " " * value
    if value.isdigit():
        return " " * int(value)
    if value == "tab":
        return "\t"
    return value


def configure_logging(level: int) -> None:
    """Console logging for the CLI, timestamped with the level name."""
    logging.basicConfig(
        level=level,
        style="{",
        format="[{asctime}] {levelname}: {message}",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Read jsunparse.toml (or an explicit config path); {} when there is none."""
    path = config_path if config_path is not None else input_dir / CONFIG_NAME

    if not path.is_file():
        return {}

    logger.debug("loading config from %s", path)
    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: defaults < config file < CLI flags.
    """
    input_file = Path(args.input)
    input_dir = input_file.parent
    if not input_dir.parts:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, input_dir)

    settings: dict[str, Any] = {}

    # Layout: config < CLI
    if "indent" in config:
        settings["indent"] = parse_indent_arg(config["indent"])
    if args.indent is not None:
        settings["indent"] = parse_indent_arg(args.indent)

    if "quotes" in config:
        settings["quotes"] = config["quotes"]
    if args.quotes is not None:
        settings["quotes"] = args.quotes

    if "width" in config:
        settings["width"] = config["width"]
    if args.width is not None:
        settings["width"] = args.width

    # Source map: config < CLI
    cfg_map = config.get("source_map")
    if isinstance(cfg_map, dict):
        if "source" in cfg_map:
            settings["source_map_source"] = str(cfg_map["source"])
        if "encode" in cfg_map:
            settings["source_map_encode_mappings"] = cfg_map["encode"]

    source_file = Path(args.source) if args.source else None
    if source_file is not None:
        settings["source_map_content"] = source_file.read_text(encoding="utf-8")
        settings.setdefault("source_map_source", source_file.name)
    if args.source_name is not None:
        settings["source_map_source"] = args.source_name
    if args.raw_mappings:
        settings["source_map_encode_mappings"] = False

    return CliOptions(
        input_file=input_file,
        output_file=Path(args.output) if args.output else None,
        map_file=Path(args.map) if args.map else None,
        inline_map=args.inline_map,
        print_options=PrintOptions(**settings),
        debug=args.debug,
    )


def print_file(options: CliOptions) -> tuple[str, str | None]:
    """Read and print an ESTree JSON file.

    Returns the generated code, with a ``sourceMappingURL`` comment when a
    map is requested, and the map JSON to write alongside it (or None).
    """
    from jsunparse.debug import dump_commands
    from jsunparse.linearize import linearize
    from jsunparse.printer import as_program, build_source_map, render_commands

    with open(options.input_file, encoding="utf-8") as f:
        tree = json.load(f)
    logger.debug("loaded %s", options.input_file)

    print_options = options.print_options
    commands = render_commands(as_program(tree), print_options)

    if options.debug:
        dump_commands(commands, file=sys.stderr)

    code, mappings = linearize(commands, print_options.indent)
    source_map = build_source_map(mappings, print_options)

    if options.inline_map:
        return f"{code}\n//# sourceMappingURL={source_map.to_url()}\n", None
    if options.map_file is not None:
        return f"{code}\n//# sourceMappingURL={options.map_file.name}\n", source_map.to_json()
    return code + "\n", None


def main(argv: list[str] | None = None) -> int:
    """Run the jsunparse command. Returns the exit code rather than exiting."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        configure_logging(logging.DEBUG)

    try:
        options = resolve_options(args)
    except OptionsError as exc:
        print(str(exc), file=sys.stderr)
        return 2
    except (tomllib.TOMLDecodeError, OSError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    try:
        code, map_json = print_file(options)
    except UnhandledNodeError as exc:
        filename = options.print_options.source_map_source or str(options.input_file)
        print(exc.format(filename), file=sys.stderr)
        return 1
    except json.JSONDecodeError as exc:
        print(f"error: invalid JSON in {options.input_file}: {exc}", file=sys.stderr)
        return 1
    except OSError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if options.output_file:
        options.output_file.write_text(code, encoding="utf-8")
    else:
        sys.stdout.write(code)

    if map_json is not None and options.map_file is not None:
        options.map_file.write_text(map_json, encoding="utf-8")

    return 0
