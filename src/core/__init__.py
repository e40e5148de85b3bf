"""
================================================================================
FILE: src/core/__init__.py
================================================================================

PURPOSE:
    Package initialization for core layer. Exports the application error
    types for easy imports: from src.core import BusinessError

KEY FACTS:
    - Minimal file (just re-exports)
    - No imports from config/ (the two layers are independent)
"""

from src.core.exceptions import BusinessError, ErrorKind

__all__ = [
    "BusinessError",
    "ErrorKind",
]
