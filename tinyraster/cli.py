"""Command line entry point: render a mesh to a TGA file."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from .config import DEFAULT_MODEL, DEFAULT_OUTPUT, HEIGHT, WIDTH, RenderConfig
from .errors import RenderError
from .image import FrameBuffer
from .log import configure_logging, get_logger
from .model import Model
from .pipeline import RenderMode, RenderStats, render
from .types import Colour

__all__ = ["main", "parse_args", "run"]


def run(config: RenderConfig) -> RenderStats:
    """Load the model, render it, flip the buffer and write the image."""
    model = Model.load(config.model_path)

    buffer = FrameBuffer(config.width, config.height)
    stats = render(model, buffer, config.mode, light=config.light, colour=config.colour)

    buffer.flip_vertically()
    buffer.write_tga_file(config.output_path, rle=config.rle)

    return stats


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    epilog = """\
examples:
  %(prog)s                                   Render obj/african_head.obj to output.tga
  %(prog)s model.obj -o model.tga            Flat-shaded render of model.obj
  %(prog)s model.obj --mode wireframe        Wireframe only
  %(prog)s model.obj --colour FF8800 --mode wireframe --no-rle
"""
    parser = argparse.ArgumentParser(
        prog="tinyraster",
        description="Minimal software rasteriser for OBJ meshes",
        epilog=epilog,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("model", nargs="?", type=Path, default=DEFAULT_MODEL,
                        help=f"Path to .obj file (default: {DEFAULT_MODEL})")
    parser.add_argument("-o", "--output", type=Path, default=DEFAULT_OUTPUT,
                        help=f"Output TGA file (default: {DEFAULT_OUTPUT})")
    parser.add_argument("--width", type=int, default=WIDTH,
                        help=f"Image width in pixels (default: {WIDTH})")
    parser.add_argument("--height", type=int, default=HEIGHT,
                        help=f"Image height in pixels (default: {HEIGHT})")
    parser.add_argument("--mode", choices=[m.value for m in RenderMode],
                        default=RenderMode.FLAT.value,
                        help="Rendering mode (default: flat)")
    parser.add_argument("--colour", default="FFFFFF",
                        help="Wireframe colour as RRGGBB (default: FFFFFF)")
    parser.add_argument("--no-rle", action="store_true",
                        help="Write an uncompressed TGA")
    parser.add_argument("--log-level", default="INFO",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        help="Logging level (default: INFO)")
    parser.add_argument("--log-json", action="store_true",
                        help="Emit log records as JSON lines")
    parser.add_argument("--log-file", type=Path, default=None,
                        help="Also append JSON log records to this file")
    args = parser.parse_args(argv)

    if args.width <= 0 or args.height <= 0:
        parser.error("--width and --height must be positive")
    try:
        args.colour = Colour.from_hex(args.colour)
    except ValueError as e:
        parser.error(f"--colour: {e}")

    return args


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(
        getattr(logging, args.log_level), json_format=args.log_json, log_file=args.log_file
    )

    config = RenderConfig()._replace(
        model_path=args.model,
        output_path=args.output,
        width=args.width,
        height=args.height,
        mode=RenderMode(args.mode),
        colour=args.colour,
        rle=not args.no_rle,
    )
    try:
        run(config)
    except RenderError as e:
        get_logger().error("render failed: %s", e, extra={"event": "render_failed"})
        return 1

    return 0
