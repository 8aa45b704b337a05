"""
Entry point for Neontris.

Usage:
    python main.py
    python main.py --config config/settings.yaml
    python main.py --performance --no-glow --drop-interval 600
    python main.py --seed 42 --log-level DEBUG
"""

from __future__ import annotations

import argparse
import logging
import pathlib
import sys

import yaml


def load_config(config_path: str | pathlib.Path) -> dict:
    """Load configuration from a YAML file.

    Args:
        config_path: Path to the YAML config file.

    Returns:
        Dict of configuration key-value pairs.

    Raises:
        FileNotFoundError: If the config file does not exist.
    """
    config_path = pathlib.Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    with open(config_path, "r") as f:
        return yaml.safe_load(f) or {}


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        Namespace with config, seed, performance, no_glow, drop_interval and
        log_level attributes.
    """
    parser = argparse.ArgumentParser(
        description="Neontris: a neon falling-block puzzle game.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--config",
        type=str,
        default="config/settings.yaml",
        help="Path to the YAML configuration file.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for the piece sequence (default: random).",
    )
    parser.add_argument(
        "--performance",
        action="store_true",
        help="Start in performance mode (30 fps rendering, no glow).",
    )
    parser.add_argument(
        "--no-glow",
        action="store_true",
        help="Disable the neon glow effect.",
    )
    parser.add_argument(
        "--drop-interval",
        type=int,
        default=None,
        help="Milliseconds between automatic drops at level 0.",
    )
    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: from config, else INFO).",
    )
    return parser.parse_args(argv)


def apply_overrides(config: dict, args: argparse.Namespace) -> dict:
    """Return a copy of `config` with command-line flags applied."""
    config = dict(config)
    if args.performance:
        config["performance_mode"] = True
    if args.no_glow:
        config["neon_glow"] = False
    if args.drop_interval is not None:
        config["drop_interval"] = args.drop_interval
    if args.log_level is not None:
        config["log_level"] = args.log_level
    return config


def main(argv: list[str] | None = None) -> None:
    """Main entry point: parse args, load config, and start the game."""
    args = parse_args(argv)
    try:
        config = apply_overrides(load_config(args.config), args)
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    logging.basicConfig(
        level=config.get("log_level", "INFO"),
        format="[NEONTRIS] %(asctime)s - %(levelname)s - %(message)s",
    )

    from neontris.play import play_manual
    play_manual(config, seed=args.seed)


if __name__ == "__main__":
    main()
