"""
Pydantic schemas for books.

A book has a title, an author and a publication year.  None of these
fields carry constraints: empty or duplicate titles are accepted and the
year is not range checked.  The ``id`` is assigned by the database; an
``id`` sent in a request body is ignored because the request schemas do
not declare it.
"""

from typing import Optional

from pydantic import BaseModel, Field

# A year is stored as a 32-bit integer; larger values are rejected when
# the request is parsed.
YEAR_MIN = -(2**31)
YEAR_MAX = 2**31 - 1


class BookCreate(BaseModel):
    """Schema for creating a new book."""

    title: Optional[str] = Field(None, description="Title of the book")
    author: Optional[str] = Field(None, description="Author of the book")
    year: Optional[int] = Field(None, ge=YEAR_MIN, le=YEAR_MAX, description="Publication year")


class BookUpdate(BaseModel):
    """Schema for replacing the fields of an existing book.

    All three fields are overwritten; omitted fields are stored as null.
    """

    title: Optional[str] = None
    author: Optional[str] = None
    year: Optional[int] = Field(None, ge=YEAR_MIN, le=YEAR_MAX)


class BookRead(BaseModel):
    """Schema for a stored book."""

    id: int
    title: Optional[str] = None
    author: Optional[str] = None
    year: Optional[int] = None

    model_config = {
        "from_attributes": True,
    }
