from pydantic import BaseModel
from typing import Optional
from datetime import date


class Company(BaseModel):
    """A computer manufacturer"""
    id: Optional[int] = None
    name: str

    class Config:
        from_attributes = True  # Allows conversion from SQLAlchemy models


class Computer(BaseModel):
    """A computer model, optionally linked to the company that makes it"""
    id: Optional[int] = None
    name: str
    introduced: Optional[date] = None
    discontinued: Optional[date] = None
    company_id: Optional[int] = None

    class Config:
        from_attributes = True


class RealEstate(BaseModel):
    """
    A real estate listing.

    Unlike companies and computers, the id is chosen by the caller and is
    required on insert.
    """
    id: int
    name: str
    street: str
    city: str
    state: str
    country: str
    zip: str

    class Config:
        from_attributes = True


class Address(BaseModel):
    """Postal address value object; formats as a four-line mailing label"""
    id: int
    name: str
    number: int
    street: str
    city: str
    postal_code: int
    county: str
    country: str

    def __str__(self) -> str:
        return (
            f"{self.name}\n"
            f"{self.number} {self.street}\n"
            f"{self.city}, {self.county}, {self.postal_code}\n"
            f"{self.country}"
        )
