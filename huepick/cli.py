# Copyright (c) 2026 Huepick
# SPDX-License-Identifier: MIT

"""Command-line interface: extract a palette from an image file."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from huepick.measure import extract_image
from huepick.runtime import SerializerFormat, to_palette_export
from huepick.runtime.serializers.palette import DEFAULT_PALETTE_NAME
from huepick.schema import (
    DEFAULT_ALPHA_THRESHOLD,
    DEFAULT_MAX_DIMENSION,
    DEFAULT_PIXEL_STRIDE,
    DEFAULT_QUANT_STEP,
    DEFAULT_TOP_K,
)

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="huepick",
        description="Extract the dominant colors of an image",
    )
    parser.add_argument("image", type=Path)
    parser.add_argument("--top-k", type=int, default=DEFAULT_TOP_K)
    parser.add_argument("--max-dimension", type=int, default=DEFAULT_MAX_DIMENSION)
    parser.add_argument("--stride", type=int, default=DEFAULT_PIXEL_STRIDE)
    parser.add_argument("--alpha-threshold", type=int, default=DEFAULT_ALPHA_THRESHOLD)
    parser.add_argument("--step", type=int, default=DEFAULT_QUANT_STEP)
    parser.add_argument("--name", default=DEFAULT_PALETTE_NAME, help="Palette name in the export")
    parser.add_argument("--text", action="store_true", help="One hex color per line instead of JSON")
    parser.add_argument("--out", type=Path, help="Write to this file instead of stdout")
    parser.add_argument("-v", "--verbose", action="store_true")
    parser.add_argument("-q", "--quiet", action="store_true")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.ERROR if args.quiet else logging.WARNING,
        format="%(levelname)s:%(name)s:%(message)s",
    )

    try:
        result = extract_image(
            args.image,
            max_dimension=args.max_dimension,
            pixel_stride=args.stride,
            alpha_threshold=args.alpha_threshold,
            quant_step=args.step,
            top_k=args.top_k,
        )
    except OSError as exc:
        print(f"huepick: cannot read {args.image}: {exc}", file=sys.stderr)
        return 1
    except ValueError as exc:
        print(f"huepick: {exc}", file=sys.stderr)
        return 2

    logger.info("Extracted %d colors from %s", len(result), args.image)

    output = to_palette_export(
        result,
        name=args.name,
        format=SerializerFormat.TEXT if args.text else SerializerFormat.JSON_PRETTY,
    )

    if args.out is not None:
        args.out.parent.mkdir(parents=True, exist_ok=True)
        args.out.write_text(output + "\n", encoding="utf-8")
    else:
        print(output)
    return 0
