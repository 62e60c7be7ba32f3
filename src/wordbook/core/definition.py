"""
A single dictionary definition with its metadata.
"""

from datetime import datetime


class Definition:
    """
    Definition text plus entry date and access counter.

    The text is only available through read(), which counts as an access.
    """

    __slots__ = ("_text", "_entry_date", "_access_count")

    def __init__(self, text: str, entry_date: datetime, access_count: int = 0):
        if access_count < 0:
            raise ValueError(f"access_count must be >= 0, got {access_count}")
        self._text = text
        self._entry_date = entry_date
        self._access_count = access_count

    def read(self) -> str:
        self._access_count += 1
        return self._text

    @property
    def entry_date(self) -> datetime:
        return self._entry_date

    @property
    def access_count(self) -> int:
        return self._access_count

    def change_date(self, new_date: datetime) -> datetime:
        """Replace the entry date and return the previous one."""
        old_date = self._entry_date
        self._entry_date = new_date
        return old_date

    def to_dict(self) -> dict:
        return {
            "text": self._text,
            "entry_date": self._entry_date.isoformat(),
            "access_count": self._access_count,
        }

    def __eq__(self, other) -> bool:
        if not isinstance(other, Definition):
            return NotImplemented
        return (
            self._text == other._text
            and self._entry_date == other._entry_date
            and self._access_count == other._access_count
        )

    def __repr__(self) -> str:
        return (
            f"Definition(entry_date={self._entry_date.isoformat()!r}, "
            f"access_count={self._access_count})"
        )
