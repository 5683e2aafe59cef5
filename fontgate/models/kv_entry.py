"""KeyValueEntry ORM — one row per store key (fonts and the `domains` record).

Invariants:
    - key is the primary key, stored verbatim (font path without leading slash)
    - value is opaque bytes; text records are UTF-8 encoded
    - updated_at refreshed on every write
"""

from datetime import datetime, timezone

from sqlalchemy import String, LargeBinary, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from fontgate.db.base import Base


class KeyValueEntry(Base):
    """Single key-value record."""
    __tablename__ = "kv_entries"

    key: Mapped[str] = mapped_column(String(512), primary_key=True)
    value: Mapped[bytes] = mapped_column(LargeBinary, nullable=False)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), nullable=False,
        default=lambda: datetime.now(timezone.utc),
        onupdate=lambda: datetime.now(timezone.utc),
    )

    def __repr__(self) -> str:
        return f"<KeyValueEntry key={self.key!r} size={len(self.value or b'')}>"
