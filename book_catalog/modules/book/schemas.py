"""Pydantic schemas for book records."""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class Book(BaseModel):
    """A book record exchanged with the remote catalog API.

    Fields the catalog sends that are not declared here are kept as-is, so a
    record read from the API can be sent back without losing data.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True, coerce_numbers_to_str=True)

    id: Optional[str] = Field(default=None, description="Catalog identifier, assigned by the remote API")
    title: Optional[str] = Field(default=None, description="Book title")
    author: Optional[str] = Field(default=None, description="Author name")
    description: Optional[str] = Field(default=None, description="Free-text description")
    published_year: Optional[Union[int, str]] = Field(
        default=None, alias="publishedYear", description="Year of publication, free text when the catalog has no number"
    )
    isbn: Optional[str] = Field(default=None, description="ISBN as recorded by the catalog")
