"""
Field rules shared by request schemas and services.

Each ``check_*`` function returns the value unchanged or raises
``ValueError`` with the client-facing message for the first rule the
value breaks.  Pydantic validators call them during request parsing;
``CategoryService`` calls them again before applying a partial update.
"""

import math
from typing import Any, Dict, Iterable, Optional

NAME_MIN_LENGTH = 4
NAME_MAX_LENGTH = 50
DESCRIPTION_MIN_LENGTH = 10
QUANTITY_MIN = 0
QUANTITY_MAX = 2**31 - 1
PRICE_MIN = 1

UNKNOWN_VALIDATION_ERROR = "Unknown validation error"

# Wording of the "required" message per entity.
REQUIRED_TEMPLATES = {
    "Category": "The category {field} is required",
    "Product": "Product {field} is required",
}


def _is_blank(value: Optional[str]) -> bool:
    return value is None or not value.strip()


def _required(entity: str, field: str) -> str:
    return REQUIRED_TEMPLATES[entity].format(field=field)


def check_name(value: Optional[str], entity: str) -> str:
    if _is_blank(value):
        raise ValueError(_required(entity, "name"))
    if not NAME_MIN_LENGTH <= len(value) <= NAME_MAX_LENGTH:
        raise ValueError(
            f"{entity} name must be between {NAME_MIN_LENGTH} and {NAME_MAX_LENGTH} characters"
        )
    return value


def check_description(value: Optional[str], entity: str) -> str:
    if _is_blank(value):
        raise ValueError(_required(entity, "description"))
    if len(value) < DESCRIPTION_MIN_LENGTH:
        raise ValueError(
            f"{entity} description must be at least {DESCRIPTION_MIN_LENGTH} characters"
        )
    return value


def check_quantity(value: Optional[int]) -> int:
    if value is None:
        raise ValueError("Product quantity is required")
    if value < QUANTITY_MIN:
        raise ValueError("Total quantity cannot be negative")
    if value > QUANTITY_MAX:
        raise ValueError(f"Total quantity cannot exceed {QUANTITY_MAX}")
    return value


def check_price(value: Optional[float]) -> float:
    if value is None:
        raise ValueError("Price cannot be null")
    # NaN and infinity compare false against PRICE_MIN.
    if not math.isfinite(value) or value < PRICE_MIN:
        raise ValueError("Price must be a positive value")
    return value


def check_category_id(value: Optional[int]) -> int:
    if value is None:
        raise ValueError("Category cannot be null")
    return value


def first_error_message(errors: Iterable[Dict[str, Any]]) -> str:
    """Reduce a list of pydantic error dicts to the first message.

    Messages raised by the ``check_*`` rules are returned verbatim;
    other pydantic errors (wrong types, malformed JSON) keep pydantic's
    own wording.  Returning every message instead only requires
    changing this function.
    """
    for error in errors:
        ctx = error.get("ctx") or {}
        if isinstance(ctx.get("error"), ValueError):
            return str(ctx["error"])
        msg = error.get("msg")
        if msg:
            return msg.removeprefix("Value error, ")
    return UNKNOWN_VALIDATION_ERROR
