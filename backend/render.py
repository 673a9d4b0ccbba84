#!/usr/bin/env python3
"""
render.py — CLI entry point for the floor-plan drawing compiler.

Usage:
    python render.py layout.json -o plan.svg
    python render.py layout.json --config drawing.json --title "Unit 4B"
    python render.py layout.json > plan.svg
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from pydantic import ValidationError

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s  %(name)-30s  %(levelname)-7s  %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
)
logger = logging.getLogger("render")


def parse_args(argv=None):
    p = argparse.ArgumentParser(
        description="Render a room layout JSON file to an architectural SVG floor plan"
    )
    p.add_argument("layout", type=str,
                    help="Layout JSON (bare layout or {\"layout\": ...})")
    p.add_argument("-o", "--output", type=str, default=None,
                    help="Output SVG path (stdout when omitted)")
    p.add_argument("--config", type=str, default=None,
                    help="Saved DrawingConfig JSON")
    p.add_argument("--title", type=str, default=None,
                    help="Override the sheet title")
    p.add_argument("--scale-factor", type=float, default=None,
                    help="Drawing units per foot (default 6.35, 1:48)")
    return p.parse_args(argv)


def load_layout(path: str) -> dict:
    with open(path) as f:
        data = json.load(f)
    if isinstance(data, dict) and isinstance(data.get("layout"), dict):
        data = data["layout"]
    return data


def main(argv=None) -> int:
    args = parse_args(argv)

    from schemas import Layout
    from services.drawing import DrawingConfig, diagnose, render_svg

    data = load_layout(args.layout)
    if not isinstance(data, dict) or data.get("rooms") is None:
        logger.error("Layout with rooms array required")
        return 1

    try:
        layout = Layout.model_validate(data)
    except ValidationError as e:
        logger.error(f"Invalid layout: {e}")
        return 1
    if args.title:
        layout.title = args.title

    cfg = DrawingConfig.load(Path(args.config)) if args.config else DrawingConfig()
    if args.scale_factor:
        cfg.scale_factor = args.scale_factor

    logger.info("Rendering %d rooms, %d openings",
                len(layout.rooms), len(layout.openings or []))
    diagnose(layout)
    svg = render_svg(layout, cfg)

    if args.output:
        Path(args.output).write_text(svg)
        logger.info("Wrote %s (%d chars)", args.output, len(svg))
    else:
        sys.stdout.write(svg + "\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
