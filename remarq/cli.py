from __future__ import annotations

import argparse
import sys
import time
from pathlib import Path
from typing import Optional, Sequence

from .config import config_paths, load_config
from .errors import RemarqError
from .generator import Generator
from .utils import parse_bool

DEFAULT_CONFIG = "remarq.toml"


def build_parser(config: dict, config_path: Path) -> argparse.ArgumentParser:
    defaults = config_paths(config, config_path)
    parser = argparse.ArgumentParser(
        prog="remarq",
        description="Render a tree of Markdown notes to HTML pages.",
    )
    parser.add_argument("--config", default=str(config_path), help="Path to config file (TOML/YAML/JSON).")
    parser.add_argument(
        "--quiet",
        action=argparse.BooleanOptionalAction,
        default=parse_bool(config.get("quiet")),
        help="Only print the summary line.",
    )
    parser.add_argument("source", nargs="?", default=defaults["source"], help="Directory containing Markdown notes.")
    parser.add_argument("target", nargs="?", default=defaults["target"], help="Output directory, rebuilt on every run.")
    parser.add_argument(
        "template",
        nargs="?",
        default=defaults["template"],
        help="HTML template containing {{TITLE}} and {{BODY}}.",
    )
    parser.add_argument("extra", nargs="*", help=argparse.SUPPRESS)
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    pre_parser = argparse.ArgumentParser(add_help=False)
    pre_parser.add_argument("--config", default=DEFAULT_CONFIG)
    pre_args, _ = pre_parser.parse_known_args(argv)
    config_path = Path(pre_args.config)
    try:
        config = load_config(config_path)
    except RemarqError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    parser = build_parser(config, config_path)
    args = parser.parse_args(argv)
    if not (args.source and args.target and args.template):
        parser.print_usage(sys.stderr)
        return 1

    start = time.perf_counter()
    try:
        generator = Generator(args.source, args.target, args.template)
        count = generator.generate()
    except RemarqError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1
    elapsed = time.perf_counter() - start
    print(f"Wrote {count} files from {args.source} to {args.target}")
    if not args.quiet:
        print(f"Build completed in {elapsed:.2f}s.")
    return 0
