"""API request models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class GenerateRequest(BaseModel):
    # Loosely typed: the route answers 400 for a bad intention and resolves
    # any category it does not recognize to general.
    intention: Any = Field(default=None, description="Intention phrase (trimmed length 3-200)")
    category: Any = Field(
        default="general",
        description="general, love, prosperity, protection or wisdom; anything else is general",
    )


class SvgExportRequest(GenerateRequest):
    model_config = ConfigDict(populate_by_name=True)

    stroke_color: str = Field(default="#6366f1", alias="strokeColor")
    stroke_width: float = Field(default=3, alias="strokeWidth")
    background_color: str = Field(default="#0f172a", alias="backgroundColor")
    size: int = Field(default=512, ge=16, le=4096, description="Canvas width/height in px")
    optimize: bool = Field(default=False, description="Drop near-duplicate points before export")
