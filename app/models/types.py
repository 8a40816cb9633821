"""Custom SQLAlchemy column types used by the table mappings."""

from datetime import date, datetime, timedelta, timezone
from typing import Optional

from sqlalchemy.types import BigInteger, Integer, TypeDecorator

_EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)


class EpochMillisDate(TypeDecorator):
    """
    Store a date as milliseconds since the Unix epoch (UTC) in a BIGINT column.

    Dates are written as UTC midnight. Datetimes are accepted on write and
    truncated to their date when read back; naive datetimes are taken as UTC.
    """

    impl = BigInteger
    cache_ok = True

    def process_bind_param(self, value: Optional[date], dialect) -> Optional[int]:
        if value is None:
            return None
        if isinstance(value, datetime):
            moment = value if value.tzinfo else value.replace(tzinfo=timezone.utc)
        elif isinstance(value, date):
            moment = datetime(value.year, value.month, value.day, tzinfo=timezone.utc)
        else:
            raise TypeError(f"EpochMillisDate expects a date or datetime, got {type(value)!r}")
        delta = moment - _EPOCH
        return (delta.days * 86_400 + delta.seconds) * 1000 + delta.microseconds // 1000

    def process_result_value(self, value: Optional[int], dialect) -> Optional[date]:
        if value is None:
            return None
        return (_EPOCH + timedelta(milliseconds=int(value))).date()


# 64-bit keys, except on SQLite where only INTEGER PRIMARY KEY aliases the rowid
# and therefore autoincrements.
IdentifierType = BigInteger().with_variant(Integer(), "sqlite")
