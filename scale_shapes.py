from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional, Sequence, TextIO

from figures import Shape, ShapeError, SceneError, aggregate_report, default_scene, load_scene, scale_relative_all
from reporting import (
    DriverConfig,
    EXIT_OK,
    EXIT_MALFORMED_INPUT,
    EXIT_SHAPE_ERROR,
    MalformedInput,
    format_report,
    read_scale_requests,
)


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Report shape areas and frames, then scale every shape about points read as 'x y k' from stdin."
    )
    p.add_argument("--scene", type=str, default="", help="JSON scene file with a 'shapes' list (default: built-in scene)")
    p.add_argument("--precision", type=int, default=2, help="digits after the decimal point in reports")
    p.add_argument("--verbose", action="store_true", help="log debug messages to stderr")
    args = p.parse_args(argv)
    if args.precision < 0:
        p.error("--precision must be non-negative")
    return args


def config_from_args(args: argparse.Namespace) -> DriverConfig:
    return DriverConfig(
        scene_path=args.scene or None,
        precision=args.precision,
        verbose=args.verbose,
    )


def _print_report(shapes: Sequence[Shape], cfg: DriverConfig, out: TextIO) -> None:
    for line in format_report(aggregate_report(shapes), cfg.precision):
        print(line, file=out)


def run(cfg: DriverConfig, stdin: TextIO, stdout: TextIO, stderr: TextIO) -> int:
    try:
        shapes: List[Shape] = load_scene(cfg.scene_path) if cfg.scene_path else default_scene()
    except (OSError, SceneError, ShapeError) as e:
        print(f"Invalid scene: {e}", file=stderr)
        return EXIT_SHAPE_ERROR
    try:
        _print_report(shapes, cfg, stdout)
        for req in read_scale_requests(stdin):
            scale_relative_all(shapes, req.point, req.k)
            print(f"scaled about ({req.point.x:g}, {req.point.y:g}) by {req.k:g}", file=stdout)
            _print_report(shapes, cfg, stdout)
    except MalformedInput as e:
        print(f"Malformed input: {e}", file=stderr)
        return EXIT_MALFORMED_INPUT
    except ShapeError as e:
        print(f"Error: {e}", file=stderr)
        return EXIT_SHAPE_ERROR
    return EXIT_OK


def main(argv: Optional[Sequence[str]] = None) -> int:
    cfg = config_from_args(parse_args(argv))
    if cfg.verbose:
        logging.basicConfig(level=logging.DEBUG, stream=sys.stderr, format="%(levelname)s %(name)s: %(message)s")
    return run(cfg, sys.stdin, sys.stdout, sys.stderr)


if __name__ == "__main__":
    sys.exit(main())
