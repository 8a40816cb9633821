"""
CRUD operations for Company records.
"""

from typing import List, Optional, Tuple
from sqlalchemy.orm import Session

from app.crud import base
from app.models.company import CompanyTable
from app.schemas.records import Company


def get_by_id(db: Session, company_id: int) -> Optional[Company]:
    """
    Retrieve a company by its ID.

    Args:
        db: Database session
        company_id: Company ID to retrieve

    Returns:
        Company if found, None otherwise
    """
    return base.get_by_id(db, CompanyTable, company_id)


def count(db: Session, filter: Optional[str] = None) -> int:
    """
    Count companies, optionally only those whose name matches `filter`.

    Args:
        db: Database session
        filter: Case-insensitive LIKE pattern (`%`, `_` wildcards); None counts all

    Returns:
        Number of matching companies
    """
    return base.count(db, CompanyTable, filter)


def options(db: Session) -> List[Tuple[str, str]]:
    """
    List (id, name) pairs for every company, sorted by name.

    Ids are returned as strings, ready to fill a select input.
    """
    rows = db.query(CompanyTable.id, CompanyTable.name).order_by(CompanyTable.name).all()
    return [(str(company_id), name) for company_id, name in rows]


def create(db: Session, company: Company) -> Company:
    """
    Insert a new company. The database assigns its id.

    Returns:
        Created Company with id
    """
    return base.create(db, CompanyTable, company)


def update(db: Session, company_id: int, company: Company) -> bool:
    """
    Replace the company with the given id.

    Returns:
        True if updated, False if not found
    """
    return base.update(db, CompanyTable, company_id, company)


def delete(db: Session, company_id: int) -> bool:
    """
    Delete a company by ID.

    Computers referencing it are left as they are and list with no company.

    Returns:
        True if deleted, False if not found
    """
    return base.delete(db, CompanyTable, company_id)
