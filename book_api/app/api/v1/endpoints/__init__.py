"""
Endpoint subpackage for API v1.

Each module defines an ``APIRouter`` for one resource; the routers are
aggregated in ``router.py``.
"""
