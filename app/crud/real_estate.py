"""
CRUD operations for RealEstate records.

Real estate ids are supplied by the caller; inserting an id that already
exists fails with the database's IntegrityError.
"""

from typing import Optional
from sqlalchemy.orm import Session

from app.crud import base
from app.models.real_estate import RealEstateTable
from app.schemas.records import RealEstate


def get_by_id(db: Session, real_estate_id: int) -> Optional[RealEstate]:
    return base.get_by_id(db, RealEstateTable, real_estate_id)


def count(db: Session, filter: Optional[str] = None) -> int:
    """Count listings, optionally only those whose name matches the LIKE pattern `filter`."""
    return base.count(db, RealEstateTable, filter)


def create(db: Session, real_estate: RealEstate) -> RealEstate:
    return base.create(db, RealEstateTable, real_estate)


def update(db: Session, real_estate_id: int, real_estate: RealEstate) -> bool:
    """Replace the listing with the given id; returns False if there is none."""
    return base.update(db, RealEstateTable, real_estate_id, real_estate)


def delete(db: Session, real_estate_id: int) -> bool:
    return base.delete(db, RealEstateTable, real_estate_id)
