"""
Shared Pydantic building blocks.

Every wire model uses camelCase aliases while the Python attributes (and the
ORM columns behind them) stay snake_case.
"""
from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base schema: camelCase on the wire, snake_case attributes, ORM loading enabled."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True


class MessageResponse(BaseModel):
    """Plain acknowledgment returned by delete endpoints."""
    message: str
