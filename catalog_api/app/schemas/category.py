"""
Pydantic models for category data.

``CategoryCreate`` validates a full payload, ``CategoryUpdate`` carries
a partial one (every field optional) and ``CategoryRead`` is the
response shape.  JSON keys are camelCase (``idCategory``) while Python
attributes stay snake_case.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .rules import check_description, check_name

ENTITY = "Category"


class CategoryBase(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CategoryCreate(CategoryBase):
    """Schema for creating a category."""

    name: Optional[str] = Field(None, validate_default=True, examples=["Fruits"])
    description: Optional[str] = Field(
        None, validate_default=True, examples=["Fresh fruits and citrus"]
    )

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        return check_name(v, ENTITY)

    @field_validator("description")
    @classmethod
    def validate_description(cls, v):
        return check_description(v, ENTITY)


class CategoryUpdate(CategoryBase):
    """Schema for updating a category.

    All fields are optional; only provided, non-null values are
    considered for change.
    """

    name: Optional[str] = None
    description: Optional[str] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        return v if v is None else check_name(v, ENTITY)

    @field_validator("description")
    @classmethod
    def validate_description(cls, v):
        return v if v is None else check_description(v, ENTITY)


class CategoryRead(CategoryBase):
    """Schema for reading a category from the API."""

    id_category: int
    name: str
    description: str
