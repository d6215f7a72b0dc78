"""Outline and render output models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class OutlineItem(BaseModel):
    """A heading recorded during rendering."""

    model_config = ConfigDict(frozen=True)

    title: str
    level: int = Field(..., ge=1, le=6)
    anchor_id: str


class RenderedMarkdown(BaseModel):
    """HTML fragment and raw outline produced by one render call."""

    model_config = ConfigDict(frozen=True)

    html: str
    outline: tuple[OutlineItem, ...] = ()
