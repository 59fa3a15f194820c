"""Command-line interface for timing indexed lookups against linear scans."""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
project_root_str = str(PROJECT_ROOT)
if project_root_str not in sys.path:
    sys.path.insert(0, project_root_str)

from loguru import logger

from keyindex.pipelines import run_benchmark_pipeline
from keyindex.utils import apply_overrides, load_config


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--config",
        type=Path,
        default=Path("configs/default.yaml"),
        help="Path to the YAML configuration file.",
    )
    parser.add_argument(
        "--set",
        dest="overrides",
        action="append",
        default=[],
        metavar="KEY=VALUE",
        help="Override a config value by dotted path, e.g. benchmark.lookups=500.",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        help="Minimum loguru level written to stderr (DEBUG adds per-build records).",
    )
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    logger.remove()
    logger.add(sys.stderr, level=args.log_level.upper())
    logger.enable("keyindex")

    config = apply_overrides(load_config(args.config), args.overrides)
    logger.info("Starting lookup benchmark with config at {}", args.config)
    run_benchmark_pipeline(config)


if __name__ == "__main__":
    main()
