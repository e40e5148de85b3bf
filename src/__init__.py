# src/__init__.py

"""
PUI application support package.

This package contains:
- core: application error types (BusinessError)

Configuration bootstrap lives in the top-level config package.
"""

__all__ = ["__version__"]

__version__ = "1.0.0"
