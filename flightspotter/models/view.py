"""API response models for the observer view."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, Field

from .air_traffic import Location, ViewConfig


class ViewStatusResponse(BaseModel):
    """Current polling state plus what a map needs to draw the view cone."""

    state: str = Field(..., description="Controller state: idle, polling or terminated")
    epoch: int = Field(..., description="Current start generation")
    config: Optional[ViewConfig] = Field(
        default=None, description="Active view configuration, if polling"
    )
    cone: list[Location] = Field(
        default_factory=list, description="Closed outline of the view cone"
    )
    left_compass: Optional[str] = Field(
        default=None, description="Compass label of the left edge"
    )
    right_compass: Optional[str] = Field(
        default=None, description="Compass label of the right edge"
    )


__all__ = ["ViewStatusResponse"]
