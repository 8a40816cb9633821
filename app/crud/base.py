"""
Shared CRUD building blocks for the record tables.

Each table class maps one record type and provides `to_record()`,
`from_record()` and the `__auto_increment__` identity flag. The entity
modules (company, computer, real_estate) bind these helpers to their table
and expose the typed interface used by callers.

Storage errors are not caught here; they propagate to the caller, who owns
the session and decides whether to roll back.
"""

import logging
from typing import Optional

from pydantic import BaseModel
from sqlalchemy import func
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)

# Matches every non-null name
MATCH_ALL = "%"


def name_matches(table, filter: str):
    """Case-insensitive SQL LIKE condition on the table's name column."""
    return func.lower(table.name).like(filter.lower())


def get_by_id(db: Session, table, record_id: int) -> Optional[BaseModel]:
    row = db.query(table).filter(table.id == record_id).first()
    return row.to_record() if row is not None else None


def count(db: Session, table, filter: Optional[str] = None) -> int:
    query = db.query(table)
    if filter is not None:
        query = query.filter(name_matches(table, filter))
    return query.count()


def create(db: Session, table, record: BaseModel) -> BaseModel:
    """
    Insert a new row built from `record`.

    Auto-increment tables ignore any id on the record and let the database
    assign one. Other tables store the record's id as given.

    Returns:
        The stored record, including its id
    """
    row = table.from_record(record)
    if table.__auto_increment__:
        row.id = None

    db.add(row)
    db.commit()
    db.refresh(row)

    logger.info("Created %s %s", table.__tablename__, row.id)
    return row.to_record()


def update(db: Session, table, record_id: int, record: BaseModel) -> bool:
    """
    Overwrite the row with primary key `record_id` with the fields of `record`.

    The record's own id is replaced by `record_id` first, so a payload
    carrying a different id cannot move the update to another row.

    Returns:
        True if a row was updated, False if no row has that id
    """
    values = record.model_copy(update={"id": record_id}).model_dump()
    matched = (
        db.query(table)
        .filter(table.id == record_id)
        .update(values, synchronize_session=False)
    )
    db.commit()

    if matched:
        logger.info("Updated %s %s", table.__tablename__, record_id)
    else:
        logger.debug("No %s with id %s to update", table.__tablename__, record_id)
    return matched > 0


def delete(db: Session, table, record_id: int) -> bool:
    """
    Delete the row with primary key `record_id`.

    Returns:
        True if a row was deleted, False if no row has that id
    """
    deleted = (
        db.query(table)
        .filter(table.id == record_id)
        .delete(synchronize_session=False)
    )
    db.commit()

    if deleted:
        logger.info("Deleted %s %s", table.__tablename__, record_id)
    else:
        logger.debug("No %s with id %s to delete", table.__tablename__, record_id)
    return deleted > 0
