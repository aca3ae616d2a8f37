"""
Pydantic models for product data.

A product references its category by id only (``idCategory``).  The
read schema additionally exposes the resolved ``categoryName`` so
clients do not need a second request; it is ``null`` when the
referenced category no longer exists.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from .rules import (
    check_category_id,
    check_description,
    check_name,
    check_price,
    check_quantity,
)

ENTITY = "Product"


class ProductBase(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProductCreate(ProductBase):
    """Schema for creating a product.

    Fields are declared in the order they are validated so that the
    first reported error is the first offending field.
    """

    name: Optional[str] = Field(None, validate_default=True, examples=["Banana Box"])
    description: Optional[str] = Field(
        None, validate_default=True, examples=["A box of bananas"]
    )
    total_quantity: Optional[int] = Field(None, validate_default=True, examples=[10])
    price: Optional[float] = Field(None, validate_default=True, examples=[5.5])
    id_category: Optional[int] = Field(None, validate_default=True, examples=[1])

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        return check_name(v, ENTITY)

    @field_validator("description")
    @classmethod
    def validate_description(cls, v):
        return check_description(v, ENTITY)

    @field_validator("total_quantity")
    @classmethod
    def validate_total_quantity(cls, v):
        return check_quantity(v)

    @field_validator("price")
    @classmethod
    def validate_price(cls, v):
        return check_price(v)

    @field_validator("id_category")
    @classmethod
    def validate_id_category(cls, v):
        return check_category_id(v)


class ProductUpdate(ProductBase):
    """Schema for updating a product.

    All fields are optional; only provided, non-null values are
    validated and considered for change.
    """

    name: Optional[str] = None
    description: Optional[str] = None
    total_quantity: Optional[int] = None
    price: Optional[float] = None
    id_category: Optional[int] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v):
        return v if v is None else check_name(v, ENTITY)

    @field_validator("description")
    @classmethod
    def validate_description(cls, v):
        return v if v is None else check_description(v, ENTITY)

    @field_validator("total_quantity")
    @classmethod
    def validate_total_quantity(cls, v):
        return v if v is None else check_quantity(v)

    @field_validator("price")
    @classmethod
    def validate_price(cls, v):
        return v if v is None else check_price(v)


class ProductRead(ProductBase):
    """Schema for reading a product from the API."""

    id_product: int
    name: str
    description: str
    total_quantity: int
    price: float
    id_category: int
    category_name: Optional[str] = None
