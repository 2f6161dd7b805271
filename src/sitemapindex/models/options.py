from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator


class RenderOptions(BaseModel):
    """Per-render knobs. Only consulted when the cached document is stale."""

    model_config = ConfigDict(frozen=True)

    stylesheet_url: str | None = None
    pretty_print: bool = False

    @field_validator("stylesheet_url")
    @classmethod
    def validate_stylesheet_url(cls, v: str | None) -> str | None:
        if v is None:
            return None
        v = v.strip()
        if not v:
            return None
        if '"' in v or "?>" in v:
            raise ValueError(f"Stylesheet URL cannot be embedded in a processing instruction: {v!r}")
        return v
