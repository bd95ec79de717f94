"""
Top-level router for version 1 of the API.

Domain routers from ``endpoints`` are included here under their own
prefix; ``main`` mounts this router under ``/api/v1``.
"""

from fastapi import APIRouter

from .endpoints import books

router = APIRouter()

router.include_router(books.router, prefix="/books", tags=["Books"])
