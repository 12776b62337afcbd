#!/usr/bin/env python3
"""Generate nests for a range of seeds and check their invariants.

Usage: python tools/nest_validate.py [--seeds 100] [--start 0] [--config PATH]
"""
import argparse
import logging
import sys
from pathlib import Path

# Ensure project root is on path when running this script directly
sys.path.append(str(Path(__file__).resolve().parent.parent))

from waspnest.level.config_loader import load_nest_config
from waspnest.level.nest_generator import generate_nest
from waspnest.level.nest_validation import summarize_nest, validate_nest

logger = logging.getLogger(__name__)


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument('--seeds', type=int, default=100)
    parser.add_argument('--start', type=int, default=0)
    parser.add_argument('--config', default=None)
    parser.add_argument('--dump', default=None, help='write the first nest to this JSON file')
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format='%(message)s')
    config = load_nest_config(args.config)

    if args.seeds <= 0:
        parser.error("--seeds must be positive")

    failures = 0
    room_counts = []
    for seed in range(args.start, args.start + args.seeds):
        nest = generate_nest(config, seed=seed)
        if args.dump and seed == args.start:
            nest.save_to_json(args.dump)
        room_counts.append(summarize_nest(nest)['rooms'])
        errors = validate_nest(nest, config)
        if errors:
            failures += 1
            logger.error('Seed %d FAILED:', seed)
            for e in errors:
                logger.error(' - %s', e)

    if failures:
        logger.error('Validation FAILED for %d of %d seeds', failures, args.seeds)
        return 2

    logger.info('Validation OK: %d seeds, rooms min=%d max=%d avg=%.1f',
                args.seeds, min(room_counts), max(room_counts), sum(room_counts) / len(room_counts))
    return 0


if __name__ == '__main__':
    sys.exit(main())
