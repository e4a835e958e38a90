"""
route_request/model/ids.py

Purpose:
    Feed-scoped identifiers (`feedId:entityId`) used for routes, agencies, trips and stops.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

ID_SEPARATOR = ":"


class FeedScopedId(BaseModel):
    model_config = ConfigDict(frozen=True)

    feed_id: str
    id: str

    def __str__(self) -> str:
        return f"{self.feed_id}{ID_SEPARATOR}{self.id}"

    @classmethod
    def is_valid_string(cls, value: str) -> bool:
        feed_id, sep, entity_id = value.partition(ID_SEPARATOR)
        return bool(sep and feed_id.strip() and entity_id.strip())

    @classmethod
    def parse(cls, value: str) -> "FeedScopedId":
        if not isinstance(value, str):
            raise TypeError(f"expected an id string, got {type(value).__name__}")
        s = value.strip()
        if not cls.is_valid_string(s):
            raise ValueError(f"'{value}' is not a feed-scoped id (expected 'feedId:id')")
        feed_id, _, entity_id = s.partition(ID_SEPARATOR)
        return cls(feed_id=feed_id.strip(), id=entity_id.strip())

    @classmethod
    def parse_list(cls, value: str) -> tuple["FeedScopedId", ...]:
        """
        Parse a comma separated id list. Blank entries are skipped; order is kept and
        duplicates are removed.
        """
        if not isinstance(value, str):
            raise TypeError(f"expected a comma separated id list, got {type(value).__name__}")
        out: list[FeedScopedId] = []
        for part in value.split(","):
            if not part.strip():
                continue
            fid = cls.parse(part)
            if fid not in out:
                out.append(fid)
        return tuple(out)
