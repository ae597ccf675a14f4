"""Command-line interface."""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from objmesh.config import LOG_LEVEL_ENV_VAR, get_log_level
from objmesh.logging_config import setup_logging
from objmesh.model.errors import ObjError
from objmesh.model.mesh import load_mesh

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")


def build_arg_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="objmesh", description="Load a Wavefront OBJ file and report its faces.")
    ap.add_argument("path", help="OBJ file to load")
    ap.add_argument(
        "--log-level",
        choices=LOG_LEVELS,
        default=None,
        help=f"Logging level (default: ${LOG_LEVEL_ENV_VAR} or WARNING)",
    )
    ap.add_argument("--log-file", default=None, help="Also write logs to this file")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)

    try:
        level = getattr(logging, args.log_level) if args.log_level else get_log_level()
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    setup_logging(level=level, log_file=args.log_file)

    try:
        mesh = load_mesh(args.path)
    except ObjError:
        # Already reported on stderr by the loader's ERROR record
        return 1

    print(f"{args.path}: {len(mesh)} faces")
    return 0


if __name__ == "__main__":
    sys.exit(main())
