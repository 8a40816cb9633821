"""
Real estate table mapping.

Uses upper-case column names and a caller-supplied primary key.
"""

from sqlalchemy import Column, String
from app.core.database import Base
from app.models.types import IdentifierType
from app.schemas.records import RealEstate


class RealEstateTable(Base):
    """
    Stored form of a RealEstate listing.
    The primary key is never generated; inserts must carry it.
    """
    __tablename__ = "REAL_ESTATE_T"
    __auto_increment__ = False

    id = Column("REAL_ESTATE_ID", IdentifierType, primary_key=True, autoincrement=False)
    name = Column("NAME", String, nullable=False)
    street = Column("STREET", String, nullable=False)
    city = Column("CITY", String, nullable=False)
    state = Column("STATE", String, nullable=False)
    country = Column("COUNTRY", String, nullable=False)
    zip = Column("ZIP", String, nullable=False)

    def to_record(self) -> RealEstate:
        return RealEstate.model_validate(self)

    @classmethod
    def from_record(cls, real_estate: RealEstate) -> "RealEstateTable":
        return cls(**real_estate.model_dump())

    def __repr__(self):
        return f"<RealEstateTable(id={self.id}, name='{self.name}', city='{self.city}')>"
