"""POST /api/sigils/* — sigil generation for a validated intention."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse, Response

from sigilforge.config import Settings
from sigilforge.dependencies import get_engine, get_settings
from sigilforge.engine.analysis import optimize_paths, validate_paths
from sigilforge.engine.bounds import UnitSquareViolation
from sigilforge.engine.pipeline import SigilEngine
from sigilforge.engine.preprocess import trim
from sigilforge.models.requests import GenerateRequest, SvgExportRequest
from sigilforge.models.responses import ErrorResponse, GenerateResponse
from sigilforge.svg.serializer import serialize_sigil, validate_style

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/sigils", tags=["sigils"])

_ERROR_RESPONSES = {400: {"model": ErrorResponse}, 422: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}


def _error(status_code: int, error: str, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": error, "message": message})


def _intention_error(intention: Any, settings: Settings) -> str | None:
    if not isinstance(intention, str):
        return "Intention must be a string"
    length = len(trim(intention))
    if length < settings.intention_min_length:
        return f"Intention must be at least {settings.intention_min_length} characters long"
    if length > settings.intention_max_length:
        return f"Intention cannot exceed {settings.intention_max_length} characters"
    return None


def _run(req: GenerateRequest, engine: SigilEngine, settings: Settings):
    """Validate, generate, and map failures. Returns a result or an error response."""
    problem = _intention_error(req.intention, settings)
    if problem:
        return _error(400, "Invalid intention", problem)

    try:
        result = engine.generate(req.intention, req.category)
    except UnitSquareViolation as e:
        return _error(422, "Out of bounds", str(e))

    if not result.succeeded:
        return _error(500, "Generation failed", "Unable to generate sigil paths")
    return result


@router.post("/generate", response_model=GenerateResponse, responses=_ERROR_RESPONSES)
async def generate(
    req: GenerateRequest,
    engine: SigilEngine = Depends(get_engine),
    settings: Settings = Depends(get_settings),
):
    outcome = _run(req, engine, settings)
    if isinstance(outcome, JSONResponse):
        return outcome
    return GenerateResponse.from_result(outcome)


@router.post("/svg", responses=_ERROR_RESPONSES)
async def export_svg(
    req: SvgExportRequest,
    engine: SigilEngine = Depends(get_engine),
    settings: Settings = Depends(get_settings),
):
    try:
        validate_style(req.stroke_color, req.stroke_width, req.background_color)
    except ValueError as e:
        return _error(400, "Invalid style", str(e))

    outcome = _run(req, engine, settings)
    if isinstance(outcome, JSONResponse):
        return outcome

    paths = optimize_paths(outcome.paths) if req.optimize else outcome.paths
    if not validate_paths(paths):
        logger.warning("Refusing SVG export of invalid path data for %r", outcome.intention)
        return _error(422, "Invalid sigil data", "Paths must be non-empty with points inside the unit square")

    svg = serialize_sigil(
        paths,
        size=req.size,
        stroke_color=req.stroke_color,
        stroke_width=req.stroke_width,
        background_color=req.background_color,
        title=outcome.intention,
    )
    return Response(content=svg, media_type="image/svg+xml")
