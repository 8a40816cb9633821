"""
Company table mapping.
"""

from sqlalchemy import Column, String
from app.core.database import Base
from app.models.types import IdentifierType
from app.schemas.records import Company


class CompanyTable(Base):
    """
    Stored form of a Company.
    The primary key is assigned by the database on insert.
    """
    __tablename__ = "COMPANY"
    __auto_increment__ = True

    id = Column("id", IdentifierType, primary_key=True, autoincrement=True)
    name = Column("name", String, nullable=False)

    def to_record(self) -> Company:
        return Company(id=self.id, name=self.name)

    @classmethod
    def from_record(cls, company: Company) -> "CompanyTable":
        return cls(id=company.id, name=company.name)

    def __repr__(self):
        return f"<CompanyTable(id={self.id}, name='{self.name}')>"
