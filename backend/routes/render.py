"""
Floor-plan SVG rendering route.

Endpoints:
  POST /api/render-floor-plan-svg      — JSON {"svg", "warnings"}
  POST /api/render-floor-plan-svg/raw  — the SVG document itself
"""

import logging
from fastapi import APIRouter, HTTPException, Depends
from fastapi.responses import Response

from config import DRAWING_CONFIG, GENERATOR_CREDIT
from schemas import Layout, RenderRequest, RenderResponse
from services.drawing import DrawingConfig, diagnose, render_svg

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api", tags=["render"])


def get_drawing_config() -> DrawingConfig:
    """Drawing constants for this process: saved JSON if configured, else 1:48 defaults."""
    cfg = DrawingConfig.load(DRAWING_CONFIG) if DRAWING_CONFIG else DrawingConfig()
    cfg.generator_credit = GENERATOR_CREDIT
    return cfg


def _require_layout(req: RenderRequest) -> Layout:
    if req.layout is None or req.layout.rooms is None:
        raise HTTPException(status_code=400, detail="Layout with rooms array required")
    return req.layout


def _render(layout: Layout, cfg: DrawingConfig) -> str:
    logger.info(f"Rendering {len(layout.rooms)} rooms")
    try:
        svg = render_svg(layout, cfg)
    except Exception as e:
        logger.exception(f"Render failed: {e}")
        raise HTTPException(status_code=500, detail=str(e))
    logger.info(f"SVG generated: {len(svg)} chars")
    return svg


@router.post("/render-floor-plan-svg", response_model=RenderResponse)
async def render_floor_plan(req: RenderRequest, cfg: DrawingConfig = Depends(get_drawing_config)):
    """
    Render a room layout to a dimensioned architectural SVG.

    The document is returned whole or not at all.  Layout diagnostics
    (overlaps, rooms past the envelope, stray openings) never block a
    render; they come back as ``warnings``.
    """
    layout = _require_layout(req)
    svg = _render(layout, cfg)
    return RenderResponse(svg=svg, warnings=diagnose(layout))


@router.post("/render-floor-plan-svg/raw")
async def render_floor_plan_raw(req: RenderRequest, cfg: DrawingConfig = Depends(get_drawing_config)):
    """Same drawing, served as ``image/svg+xml``."""
    layout = _require_layout(req)
    svg = _render(layout, cfg)
    return Response(content=svg, media_type="image/svg+xml")
