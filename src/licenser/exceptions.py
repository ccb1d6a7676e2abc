# Copyright (C) 2025 Francesca Falcone and Mattia Tagliente
# All Rights Reserved

# licenser/exceptions.py
from __future__ import annotations

from pathlib import Path


class LicenserError(RuntimeError):
    """Fatal error; aborts the run. Carries the path that failed, if any."""

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path


class WalkError(LicenserError): ...


class StampError(LicenserError): ...


class OrchestratorError(LicenserError): ...
