"""
Top-level package for the Book API.

All functionality lives in submodules under ``app``; run the service
with ``uvicorn book_api.app.main:app`` or ``python run.py``.
"""

__all__ = []
