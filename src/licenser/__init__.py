# Copyright (C) 2025 Francesca Falcone and Mattia Tagliente
# All Rights Reserved

# licenser/__init__.py
"""
licenser: stamp a source tree with MIT licensing metadata.

A single run:
- writes LICENSE (MIT text, skipped if the file already exists)
- writes AUTHORS (one author per line, skipped if the file already exists)
- prepends a one-line copyright comment to every recognized source file

Versioning policy: semantic (MAJOR.MINOR.PATCH)
"""

__all__ = ["__version__"]

# Keep in sync with pyproject.toml [project].version
__version__ = "0.1.0"
