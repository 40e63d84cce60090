"""Cursor pagination parameters for list operations.

A :class:`PageCursor` encodes to the ``pageBefore`` / ``pageAfter`` /
``pageSize`` query keys. Only the fields that are set are emitted. The core
never follows cursors on its own: each list call returns one page and the
caller passes the next cursor explicitly.

``before`` and ``after`` are meant to be used one at a time. That is a
caller contract and is not checked here.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from circle_w3s.exceptions import InvalidParamError


@dataclass(frozen=True)
class PageCursor:
    """One page request.

    Args:
        before: Opaque id; return items preceding it.
        after: Opaque id; return items following it.
        size: Maximum number of items in the page.

    Example::

        PageCursor(after="abc").to_query()  # {"pageAfter": "abc"}
    """

    before: Optional[str] = None
    after: Optional[str] = None
    size: Optional[int] = None

    def to_query(self) -> dict[str, str]:
        """Return the query fragment for this cursor.

        Raises:
            InvalidParamError: If ``size`` is not a positive integer.
        """
        query: dict[str, str] = {}
        if self.before is not None:
            query["pageBefore"] = self.before
        if self.after is not None:
            query["pageAfter"] = self.after
        if self.size is not None:
            if isinstance(self.size, bool) or not isinstance(self.size, int) or self.size < 1:
                raise InvalidParamError(f"page size must be a positive integer, got {self.size!r}")
            query["pageSize"] = str(self.size)
        return query

    @classmethod
    def after_id(cls, item_id: str, size: Optional[int] = None) -> PageCursor:
        """Cursor for the page following the item ``item_id``."""
        return cls(after=item_id, size=size)

    @classmethod
    def before_id(cls, item_id: str, size: Optional[int] = None) -> PageCursor:
        """Cursor for the page preceding the item ``item_id``."""
        return cls(before=item_id, size=size)
