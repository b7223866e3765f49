"""Records exchanged between the renderer and the filesystem writer."""

from __future__ import annotations

from pathlib import PurePosixPath

from pydantic import BaseModel, ConfigDict, Field, field_validator


class RenderedFile(BaseModel):
    """A rendered template waiting to be written below the project root."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    path: str = Field(..., description="POSIX path relative to the project root.")
    content: str = Field(..., description="Final text of the file.")

    @field_validator("path")
    @classmethod
    def _check_relative(cls, value: str) -> str:
        candidate = PurePosixPath(value)
        if not value or candidate.is_absolute() or ".." in candidate.parts:
            raise ValueError(f"path must be relative to the project root, got {value!r}")
        return value


__all__ = ["RenderedFile"]
