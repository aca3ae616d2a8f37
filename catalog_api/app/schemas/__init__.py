"""
Pydantic schema definitions for API payloads.

Each entity (categories, products) defines its own request and
response models.  Schemas are separated from the stores' row format to
decouple the API representation from persistence.
"""
