"""
CRUD operations for Computer records.

Besides the single-row operations this module builds the paginated,
filtered listing of computers joined with their (optional) company.
"""

from typing import List, Optional, Tuple
from sqlalchemy.orm import Session

from app.core.config import settings
from app.core.pagination import Page, calculate_offset
from app.crud import base
from app.models.company import CompanyTable
from app.models.computer import ComputerTable
from app.schemas.records import Company, Computer

ComputerListing = Tuple[Computer, Optional[Company]]


def get_by_id(db: Session, computer_id: int) -> Optional[Computer]:
    """
    Retrieve a computer by its ID.

    Args:
        db: Database session
        computer_id: Computer ID to retrieve

    Returns:
        Computer if found, None otherwise
    """
    return base.get_by_id(db, ComputerTable, computer_id)


def count(db: Session, filter: Optional[str] = None) -> int:
    """
    Count computers, optionally only those whose name matches `filter`.

    Args:
        db: Database session
        filter: Case-insensitive LIKE pattern (`%`, `_` wildcards); None counts all

    Returns:
        Number of matching computers
    """
    return base.count(db, ComputerTable, filter)


def list_page(
    db: Session,
    page: int = 0,
    page_size: Optional[int] = None,
    order_by: int = 1,
    filter: str = base.MATCH_ALL
) -> Page[ComputerListing]:
    """
    Return one page of (Computer, Company) pairs.

    Computers are left-joined to companies, so a computer without a company,
    or whose company no longer exists, is listed with None.

    Args:
        db: Database session
        page: Zero-based page index
        page_size: Rows per page (defaults to settings.DEFAULT_PAGE_SIZE)
        order_by: Sort column index; accepted but not applied
        filter: Case-insensitive LIKE pattern on the computer name

    Returns:
        Page whose total is the filtered computer count

    Raises:
        ValueError: If page or page_size is negative
    """
    if page_size is None:
        page_size = settings.DEFAULT_PAGE_SIZE

    if page < 0 or page_size < 0:
        raise ValueError(f"page and page_size must be non-negative, got page={page}, page_size={page_size}")

    offset = calculate_offset(page, page_size)

    rows = (
        db.query(ComputerTable, CompanyTable.id, CompanyTable.name)
        .outerjoin(CompanyTable, ComputerTable.company_id == CompanyTable.id)
        .filter(base.name_matches(ComputerTable, filter))
        .offset(offset)
        .limit(page_size)
        .all()
    )

    # Counted separately so the total is independent of the join
    total = count(db, filter)

    items: List[ComputerListing] = [
        (computer.to_record(), _joined_company(company_id, company_name))
        for computer, company_id, company_name in rows
    ]

    return Page[ComputerListing].build(items, page, page_size, total)


def _joined_company(company_id: Optional[int], company_name: Optional[str]) -> Optional[Company]:
    """Rebuild the company from the outer-joined columns; a null id means no match."""
    if company_id is None:
        return None
    return Company(id=company_id, name=company_name)


def create(db: Session, computer: Computer) -> Computer:
    """
    Insert a new computer. The database assigns its id.

    Returns:
        Created Computer with id
    """
    return base.create(db, ComputerTable, computer)


def update(db: Session, computer_id: int, computer: Computer) -> bool:
    """
    Replace the computer with the given id.

    The id inside `computer` is ignored in favour of `computer_id`.

    Returns:
        True if updated, False if not found
    """
    return base.update(db, ComputerTable, computer_id, computer)


def delete(db: Session, computer_id: int) -> bool:
    """
    Delete a computer by ID.

    Returns:
        True if deleted, False if not found
    """
    return base.delete(db, ComputerTable, computer_id)
