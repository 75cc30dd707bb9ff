"""
CLI entrypoint for java2puml.

Usage:
  java2puml <directory> [-o OUTPUT] [-s SUB_FOLDER ...] [-v]
"""
from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

from java2puml.config import load_config
from java2puml.logging_config import configure_logging
from java2puml.pipeline import DiagramWriteError, generate_diagram, write_diagram

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="java2puml",
        description="Generate a PlantUML class diagram from a Java source tree",
    )
    parser.add_argument("directory", help="Root directory of the Java project")
    parser.add_argument("--output", "-o", help="Output .puml file path")
    parser.add_argument(
        "--sub-folder", "-s",
        dest="sub_folders",
        action="append",
        help="Sub-folder to scan, relative to the root (repeatable, keeps order)",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(logging.DEBUG if args.verbose else logging.INFO)

    cfg = load_config()
    if args.output:
        cfg.output_path = args.output
    if args.sub_folders:
        cfg.sub_folders = tuple(args.sub_folders)

    result = generate_diagram(args.directory, cfg)

    try:
        out = write_diagram(result.plantuml, cfg.output_path)
    except DiagramWriteError as e:
        logger.error("%s (%s)", e, e.__cause__)
        return 1

    print(f"PlantUML code has been written to: {out}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
