"""Command-line interface for hex world generation."""

import argparse
import logging
import random
import sys
import time
from pathlib import Path

import structlog


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for hex world generation."""
    parser = argparse.ArgumentParser(
        description="Generate a procedural hexagonal terrain map"
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Root seed, 0 to 4294967295 (default: random)",
    )
    parser.add_argument(
        "--radius", type=int, default=None, help="World radius in tiles (default: 64)"
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Path to a TOML generator config (optional)",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Verbose logging"
    )

    args = parser.parse_args(argv)

    # Configure structlog
    level = logging.DEBUG if args.verbose else logging.INFO
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
    )
    logger = structlog.get_logger()

    # Import here to avoid slow startup for --help
    from .classification import count_terrain_classes
    from .config import GeneratorConfig, load_config
    from .generator import WorldGenerator
    from .validation import validate_world

    if args.config:
        config_path = Path(args.config)
        if not config_path.exists():
            logger.error("config_not_found", path=args.config)
            return 1
        config = load_config(config_path)
        logger.info("config_loaded", path=str(config_path))
    else:
        config = GeneratorConfig(seed=random.getrandbits(32))

    # Apply CLI overrides
    seed = args.seed if args.seed is not None else config.seed
    radius = args.radius if args.radius is not None else config.radius
    if not 0 <= seed <= 0xFFFFFFFF:
        parser.error(f"seed must be an unsigned 32-bit integer, got {seed}")
    if radius < 0:
        parser.error(f"radius must be non-negative, got {radius}")

    print(f"Generating hex world of radius {radius} with seed {seed}")

    start_time = time.time()
    world = WorldGenerator(seed, radius, config=config).generate()
    gen_time = time.time() - start_time

    result = validate_world(world)

    print()
    print(f"Generation complete in {gen_time:.1f}s: {len(world):,} tiles")
    for terrain_class, count in count_terrain_classes(world).items():
        pct = count / len(world) * 100
        print(f"  {terrain_class.value}: {count:,} ({pct:.1f}%)")

    return 0 if result.passed else 1


if __name__ == "__main__":
    sys.exit(main())
