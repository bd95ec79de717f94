"""
Application package initializer.

The application is split into ``api`` (HTTP routes), ``services``
(business rules), ``repositories`` (SQL) and ``schemas`` (payloads),
with shared plumbing in ``core``.
"""

from .main import app  # noqa: F401
