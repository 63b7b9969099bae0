"""
Motion Control - command line launcher

Usage:
    python -m motion_control speed --distance 10 --acceleration 0.5 --max-speed 2
    python -m motion_control parse F10L45B5R90
    python -m motion_control smooth 1 2 3 4 5 --window 3
    python -m motion_control url
"""

import sys
import json
import argparse
import logging

from .config import load_config, create_planner_from_config
from .core.exceptions import MotionControlError

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='motion_control',
        description='Motion planning helpers'
    )
    parser.add_argument('--config', type=str, default=None,
                        help='JSON config file (default: bundled default_config.json)')
    parser.add_argument('--verbose', action='store_true',
                        help='Enable debug logging')

    sub = parser.add_subparsers(dest='command', required=True)

    speed = sub.add_parser('speed', help='Optimal speed for a move [m/s]')
    speed.add_argument('--distance', type=float, required=True, help='Distance [m]')
    speed.add_argument('--acceleration', type=float, required=True, help='Acceleration [m/s^2]')
    speed.add_argument('--max-speed', type=float, default=None,
                       help='Speed limit [m/s] (default: from config)')

    parse = sub.add_parser('parse', help='Split a path string into motion commands')
    parse.add_argument('path', type=str, help='Path string, e.g. F10L45B5R90')

    smooth = sub.add_parser('smooth', help='Moving average over speed samples')
    smooth.add_argument('values', type=float, nargs='*', help='Speed samples [m/s]')
    smooth.add_argument('--window', type=int, default=None,
                        help='Window size (default: from config)')

    sub.add_parser('url', help='Show premium features URL')

    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        config = load_config(args.config) if args.config else None
        planner = create_planner_from_config(config)

        if args.command == 'speed':
            print(planner.optimal_speed(args.distance, args.acceleration, args.max_speed))
        elif args.command == 'parse':
            commands = planner.parse_motion_path(args.path)
            print(json.dumps([c.to_dict() for c in commands]))
        elif args.command == 'smooth':
            print(json.dumps(planner.smooth_speeds(args.values, args.window)))
        elif args.command == 'url':
            print(planner.get_premium_url())
    except MotionControlError as e:
        logger.error(str(e))
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
