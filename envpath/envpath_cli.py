"""Command-line entry point: resolve a raw path sequence and print it."""

import argparse
import logging
import sys
from typing import List, Optional

from envpath import envpath_log
from envpath.envpath_config import ResolverConfig
from envpath.envpath_core import EnvPath
from envpath.envpath_datatypes import EnvPathError
from envpath.envpath_serialize import dumps


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="envpath",
        description="Resolve path expressions such as '$env: xdg_data_home ? home' into a path.",
    )
    parser.add_argument("raw", nargs="*", help="Path components or $env/$const/$dir/$proj/$val expressions")
    parser.add_argument("--config", help="Resolver config file (.json, .yaml, .yml or .toml)")
    parser.add_argument(
        "--format", choices=["json", "yaml", "toml", "xml"],
        help="Print the serialized raw sequence instead of resolving it",
    )
    parser.add_argument("--check", action="store_true", help="Exit with status 1 when the path does not exist")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log resolution steps to stderr")
    return parser


def run(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    envpath_log.setup(logging.DEBUG if args.verbose else None)

    try:
        config = ResolverConfig.load(args.config) if args.config else ResolverConfig()
    except (EnvPathError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if args.format:
        print(dumps(args.raw, args.format).rstrip("\n"))
        return 0

    path = EnvPath.new(args.raw, config=config)
    if path.path is None:
        print(f"Error: could not resolve {args.raw!r}", file=sys.stderr)
        return 1
    print(path.display())
    if args.check and not path.exists():
        return 1
    return 0


def main() -> None:
    try:
        raise SystemExit(run())
    except KeyboardInterrupt:
        raise SystemExit(130)


if __name__ == "__main__":
    main()
