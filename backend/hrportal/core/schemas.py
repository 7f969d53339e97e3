"""Base Pydantic schemas with camelCase conversion."""

from pydantic import BaseModel, ConfigDict
from humps import camelize


def to_camel(string: str) -> str:
    """Convert snake_case to camelCase."""
    return camelize(string)


class CamelModel(BaseModel):
    """
    Base model that reads and writes camelCase JSON.

    Usage:
        class DemandResponse(CamelModel):
            client_name: str   # JSON: clientName
            job_priority: str  # JSON: jobPriority
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class MessageResponse(CamelModel):
    """Plain acknowledgement body"""

    success: bool = True
    message: str
