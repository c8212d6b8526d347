# run_scatter.py
import argparse
import logging
import sys

from scatter_engine.core.preset import ScatterError
from scatter_engine.core.preset.registry import list_presets
from scatter_engine.pipeline import run_scatter
from scatter_engine.setup_logging import setup_logging

logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description="Generate grass spawn points from a scatter preset.")
    parser.add_argument("preset", nargs="?", default="grass/default", help="preset id or path to JSON")
    parser.add_argument("--out", default="artifacts/scatter", help="output directory")
    parser.add_argument("--seed", type=int, default=None, help="override placement.seed")
    parser.add_argument("--list", action="store_true", help="list known preset ids and exit")
    parser.add_argument("--log-dir", default="logs", help="directory for scatter.log")
    parser.add_argument("-v", "--verbose", action="store_true")
    args = parser.parse_args(argv)

    setup_logging(args.log_dir, level=logging.DEBUG if args.verbose else logging.INFO)

    if args.list:
        for preset_id in list_presets():
            print(preset_id)
        return 0

    overrides = {"placement": {"seed": args.seed}} if args.seed is not None else None
    try:
        result = run_scatter(args.preset, args.out, overrides)
    except ScatterError as e:
        logger.error("Scatter failed: %s", e)
        return 1

    logger.info("--- Done: %d points, files in %s ---", result["count"], args.out)
    return 0


if __name__ == "__main__":
    sys.exit(main())
