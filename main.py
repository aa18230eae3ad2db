"""
Entry point for Blockfall.

Usage:
    python main.py
    python main.py --config config/settings.yaml
    python main.py --seed 42 --block-size 30
"""

from __future__ import annotations

import argparse
import sys

from blockfall.config import DEFAULT_CONFIG, load_config, merge_config


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        Namespace with config, seed, block_size, and fps attributes.
    """
    parser = argparse.ArgumentParser(
        description="Blockfall: a falling-block puzzle game.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to a YAML settings file (default: built-in settings).",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the piece randomizer (default: random).",
    )
    parser.add_argument(
        "--block-size",
        type=int,
        default=None,
        help=f"Cell size in pixels (default: {DEFAULT_CONFIG['block_size']}).",
    )
    parser.add_argument(
        "--fps",
        type=int,
        default=None,
        help=f"Frames per second (default: {DEFAULT_CONFIG['fps']}).",
    )
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> dict:
    """Load the settings file (if any) and apply command-line overrides."""
    config = load_config(args.config) if args.config else merge_config(None)
    overrides = {}
    if args.block_size is not None:
        overrides["block_size"] = args.block_size
    if args.fps is not None:
        overrides["fps"] = args.fps
    if overrides:
        config = merge_config({**config, **overrides})
    return config


def main(argv: list[str] | None = None) -> None:
    """Main entry point: parse args, load config, and start the game window."""
    args = parse_args(argv)
    try:
        config = build_config(args)
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    from blockfall.play import play
    try:
        play(config, seed=args.seed)
    except ImportError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
