"""
Customer - request bodies for the customer endpoints
"""

from typing import Literal, Optional
from pydantic import Field

from .base import CamelModel


Gender = Literal["male", "female", "other"]


class CustomerPreferences(CamelModel):
    hair_type: Optional[str] = Field(None, description="Hair type notes")
    allergy_info: Optional[str] = Field(None, description="Known allergies")
    skin_type: Optional[str] = Field(None, description="Scalp or skin notes")


class CustomerCreate(CamelModel):
    """
    New customer. Visit statistics are computed, so they are not accepted here.
    """

    name: str = Field(..., description="Full name")
    phone: str = Field(..., description="Phone number, unique per customer")
    kana: Optional[str] = Field(None, description="Reading of the name in kana")
    email: Optional[str] = Field(None)
    birthday: Optional[str] = Field(None, description="YYYY-MM-DD")
    gender: Optional[Gender] = Field(None)
    address: Optional[str] = Field(None)
    memo: Optional[str] = Field(None)
    preferences: Optional[CustomerPreferences] = Field(None)

    def details(self) -> dict:
        """Optional fields as keyword arguments for create_customer."""
        data = self.model_dump(exclude={"name", "phone", "preferences"}, exclude_none=True)
        if self.preferences:
            data["preferences"] = self.preferences.model_dump(by_alias=True, exclude_none=True)
        return data


class CustomerUpdate(CamelModel):
    name: Optional[str] = Field(None)
    phone: Optional[str] = Field(None)
    kana: Optional[str] = Field(None)
    email: Optional[str] = Field(None)
    birthday: Optional[str] = Field(None)
    gender: Optional[Gender] = Field(None)
    address: Optional[str] = Field(None)
    memo: Optional[str] = Field(None)
    preferences: Optional[CustomerPreferences] = Field(None)

    def changes(self) -> dict:
        data = self.model_dump(exclude={"preferences"}, exclude_unset=True)
        if self.preferences:
            data["preferences"] = self.preferences.model_dump(by_alias=True, exclude_none=True)
        return data
