"""Report how historical street records match the map's street names.

Usage:
    python scripts/analyze_matching.py --history data/calles_buenos_aires_final.json \
        --geometry data/buenos_aires_streets.geojson
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from dotenv import load_dotenv

from calles.core.config import Settings
from calles.core.exceptions import DataLoadError
from calles.services.loader import iter_geometry_features, parse_history, read_json
from calles.services.matching_report import DEFAULT_SAMPLE_SIZE, analyze_matching

logger = logging.getLogger(__name__)


def _build_parser(defaults: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--history", type=Path, default=defaults.history_path)
    parser.add_argument("--geometry", type=Path, default=defaults.geometry_path)
    parser.add_argument("--sample", type=int, default=DEFAULT_SAMPLE_SIZE)
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    load_dotenv()
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    args = _build_parser(Settings()).parse_args(argv)

    try:
        records = parse_history(read_json(args.history))
        features = list(iter_geometry_features(read_json(args.geometry)))
    except DataLoadError as exc:
        logger.error(str(exc))
        return 1

    report = analyze_matching(records, (f.display_name for f in features))

    logger.info("=== Street Matching Analysis ===")
    logger.info(f"Historical streets: {report.historical_total}")
    logger.info(f"Map unique street names: {report.geometry_names}")
    logger.info(f"Exact matches: {report.exact_matches}")
    logger.info(f"Normalized matches: {report.normalized_matches}")
    logger.info(f"Total matched: {report.matched} ({report.match_rate * 100:.1f}%)")
    logger.info(f"No match: {len(report.unmatched)}")
    logger.info(f"Map names with history: {report.geometry_with_history}")

    if report.unmatched:
        logger.info("Sample unmatched streets:")
        for name in report.unmatched_sample(args.sample):
            logger.info(f"  - {name}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
