"""
Service - request bodies for the catalog endpoints
"""

from typing import Optional
from pydantic import Field

from .base import CamelModel


class ServiceCreate(CamelModel):
    """
    New catalog entry. Prices are whole yen.
    """

    name: str = Field(..., description="Service name, unique among active services")
    duration_minutes: int = Field(..., alias="duration", description="Duration in minutes")
    price: int = Field(..., description="Price in yen")
    category: str = Field(..., description="Category label, e.g. カット")
    description: Optional[str] = Field(None, description="Free text")


class ServiceUpdate(CamelModel):
    """
    Partial update. Omitted fields are left as they are.
    """

    name: Optional[str] = Field(None)
    duration_minutes: Optional[int] = Field(None, alias="duration")
    price: Optional[int] = Field(None)
    category: Optional[str] = Field(None)
    description: Optional[str] = Field(None)
    is_active: Optional[bool] = Field(None, description="false hides, true reactivates")
