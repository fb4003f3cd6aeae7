"""Command-line entry point."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .constants import FPS, SCREEN_HEIGHT, SCREEN_WIDTH
from .models.config import (
    ConfigError,
    ZodiacConfig,
    config_path,
    load_config,
    save_config,
    validate_config,
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="zodiacview",
        description="Animated star field with constellation lines.",
    )
    parser.add_argument("--config", type=Path, default=None, help=f"config file (default: {config_path()})")
    parser.add_argument("--width", type=int, default=SCREEN_WIDTH)
    parser.add_argument("--height", type=int, default=SCREEN_HEIGHT)
    parser.add_argument("--fps", type=int, default=FPS)
    parser.add_argument("--star-count", type=int, default=None)
    parser.add_argument("--distance", type=float, default=None)
    parser.add_argument("--speed", type=float, default=None)
    parser.add_argument(
        "--interactive",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="let the mouse or a finger drag a star",
    )
    parser.add_argument("--write-config", action="store_true", help="save the effective config and exit")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def resolve_config(args: argparse.Namespace) -> ZodiacConfig:
    """Load the config file and apply command-line overrides."""
    config = load_config(args.config)
    overrides = {
        "star_count": args.star_count,
        "distance": args.distance,
        "speed": args.speed,
        "interaction_enabled": args.interactive,
    }
    overrides = {k: v for k, v in overrides.items() if v is not None}
    if overrides:
        config = validate_config({**config.model_dump(), **overrides})
    return config


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = resolve_config(args)
    except ConfigError as exc:
        print(f"zodiacview: {exc}", file=sys.stderr)
        return 2

    if args.write_config:
        path = save_config(config, args.config)
        print(f"Config written to {path}")
        return 0

    from .game import ZodiacApp

    ZodiacApp(config, size=(args.width, args.height), fps=args.fps).run()
    return 0
