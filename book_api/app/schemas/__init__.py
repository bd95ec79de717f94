"""
Pydantic schema definitions for API payloads.

Schemas are kept apart from the SQL in ``repositories`` so that the API
representation does not depend on the table layout.
"""
