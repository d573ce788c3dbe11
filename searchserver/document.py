"""Search result records and document statuses."""

from __future__ import annotations

import enum
from dataclasses import dataclass


class DocumentStatus(enum.Enum):
    """Lifecycle status of an indexed document."""

    ACTUAL = enum.auto()
    IRRELEVANT = enum.auto()
    BANNED = enum.auto()
    REMOVED = enum.auto()


@dataclass
class Document:
    """A single search hit: document id, relevance score and average rating."""

    id: int = 0
    relevance: float = 0.0
    rating: int = 0

    def __str__(self) -> str:
        return (
            f"{{ document_id = {self.id}, "
            f"relevance = {self.relevance:g}, "
            f"rating = {self.rating} }}"
        )