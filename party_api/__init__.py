"""
Top‑level package for the Party API.

The package provides no public exports besides the version string;
all functionality lives in submodules under ``app``.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
