"""Base classes shared by domain entities"""

from datetime import datetime, timezone
from sqlalchemy import BigInteger, DateTime, Integer
from sqlmodel import SQLModel

# SQLite only auto-increments INTEGER PRIMARY KEY columns
ID_TYPE = BigInteger().with_variant(Integer(), "sqlite")

TIMESTAMP_TYPE = DateTime(timezone=True)


def utc_now() -> datetime:
    """Timezone-aware current time in UTC"""
    return datetime.now(timezone.utc)


def as_utc(value: datetime) -> datetime:
    """Treat naive timestamps read back from SQLite as UTC"""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


class BaseModel(SQLModel):
    """Common base for all table entities"""

    def touch(self) -> None:
        """Refresh updated_at on entities that track it"""
        if hasattr(self, "updated_at"):
            self.updated_at = utc_now()
