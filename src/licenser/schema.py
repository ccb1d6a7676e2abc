# Copyright (C) 2025 Francesca Falcone and Mattia Tagliente
# All Rights Reserved

# licenser/schema.py
from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class Copyright(BaseModel):
    """Year and project name used to render every notice in one run."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    year: int = Field(..., description="Calendar year printed in the notice.")
    project_name: str = Field(
        ...,
        description="Project name, taken verbatim from the command line (no validation).",
    )


class CommentStyle(BaseModel):
    """Prefix/suffix pair wrapping the inserted copyright line."""
    model_config = ConfigDict(frozen=True, extra="forbid")

    prefix: str
    suffix: str
