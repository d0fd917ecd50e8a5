"""Command-line interface for map generation."""

import argparse
import logging
import sys
import time
from pathlib import Path

import structlog


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser for the ``biomegen`` command."""
    parser = argparse.ArgumentParser(
        description="Generate a procedural biome map"
    )
    parser.add_argument(
        "--config",
        "-c",
        type=str,
        default=None,
        help="Path or name of a map TOML config (overrides --preset)",
    )
    parser.add_argument(
        "--preset",
        type=str,
        default="default",
        help="Named preset (default: default)",
    )
    parser.add_argument("--width", type=int, default=None, help="Map width")
    parser.add_argument("--height", type=int, default=None, help="Map height")
    parser.add_argument(
        "--seed", type=int, default=None, help="Random seed (default: random)"
    )
    parser.add_argument(
        "--land-mass",
        type=str,
        default=None,
        help="Land-mass variant (pangaea, continents, archipelago, lakes, fractal)",
    )
    parser.add_argument(
        "--ocean-ratio", type=float, default=None, help="Water share of elevation"
    )
    parser.add_argument(
        "--output",
        "-o",
        type=str,
        default=None,
        help="Write a PNG preview to this path (optional)",
    )
    parser.add_argument(
        "--tile-size", type=int, default=4, help="Preview pixels per tile (default: 4)"
    )
    parser.add_argument(
        "--debug-images",
        type=str,
        default=None,
        help="Directory to save debug images of intermediate fields (optional)",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Verbose logging"
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    """CLI entry point for map generation."""
    args = build_parser().parse_args(argv)

    # Configure logging
    level = logging.DEBUG if args.verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    # Run-level events go through structlog, on stderr next to the stage logs
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=False),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        logger_factory=structlog.PrintLoggerFactory(sys.stderr),
    )
    logger = structlog.get_logger()

    # Import here to avoid slow startup for --help
    from ..config import find_config, load_config
    from ..exceptions import BiomegenError
    from ..presets import MAP_PRESETS
    from ..preview import save_preview
    from .config import GenerationConfig
    from .generator import generate_map

    try:
        if args.config:
            config_path = find_config(args.config)
            base = load_config(config_path)
            logger.info("config_loaded", path=str(config_path))
        else:
            if args.preset not in MAP_PRESETS:
                logger.error(
                    "unknown_preset", preset=args.preset, available=sorted(MAP_PRESETS)
                )
                return 2
            base = GenerationConfig.model_validate(
                {"width": 64, "height": 64, **MAP_PRESETS[args.preset]}
            )

        overrides = {
            "width": args.width,
            "height": args.height,
            "seed": args.seed,
            "land_mass": args.land_mass,
            "ocean_ratio": args.ocean_ratio,
            "debug_output_dir": args.debug_images,
        }
        fields = base.model_dump()
        fields.update({k: v for k, v in overrides.items() if v is not None})
        config = GenerationConfig.model_validate(fields)

        start_time = time.time()
        result = generate_map(config)
        gen_time = time.time() - start_time
    except (BiomegenError, ValueError, FileNotFoundError) as exc:
        logger.error("generation_failed", error_type=type(exc).__name__)
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    logger.info(
        "map_generated",
        width=config.width,
        height=config.height,
        seed=result.seed,
        land_mass=config.land_mass.value,
        duration_s=round(gen_time, 3),
    )

    print()
    print(f"Generated {config.width}x{config.height} map with seed {result.seed}")
    print(f"Generation complete in {gen_time:.2f}s")
    for name, pct in sorted(result.stats.items(), key=lambda item: -item[1]):
        print(f"  {name:<8} {pct:5.1f}%")

    if args.output:
        output_path = Path(args.output)
        save_preview(result.tiles, output_path, tile_size=args.tile_size)
        logger.info("preview_saved", path=str(output_path), tile_size=args.tile_size)
        print(f"Saved preview to {output_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
