"""
Computer table mapping.

Computers optionally reference a company through `companyId`. No foreign key
constraint is declared: a dangling reference is valid data and is listed with
an absent company rather than rejected.
"""

from sqlalchemy import Column, String, BigInteger
from app.core.database import Base
from app.models.types import EpochMillisDate, IdentifierType
from app.schemas.records import Computer


class ComputerTable(Base):
    """
    Stored form of a Computer.
    The primary key is assigned by the database on insert.
    """
    __tablename__ = "COMPUTER"
    __auto_increment__ = True

    id = Column("id", IdentifierType, primary_key=True, autoincrement=True)
    name = Column("name", String, nullable=False)

    # Milliseconds since epoch, exposed as datetime.date
    introduced = Column("introduced", EpochMillisDate, nullable=True)
    discontinued = Column("discontinued", EpochMillisDate, nullable=True)

    company_id = Column("companyId", BigInteger, nullable=True, index=True)

    def to_record(self) -> Computer:
        return Computer.model_validate(self)

    @classmethod
    def from_record(cls, computer: Computer) -> "ComputerTable":
        return cls(**computer.model_dump())

    def __repr__(self):
        return f"<ComputerTable(id={self.id}, name='{self.name}', company_id={self.company_id})>"
