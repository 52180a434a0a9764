"""Table containers for the audit report.

Defines the column descriptors, the ordered heading set and the per-URL row.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Literal

from bootup.types.base import URL_HEADING_KEY

# 'url' cells hold links, every other column holds text
ItemType = Literal["url", "text"]


@dataclass(frozen=True)
class Heading:
    """Column descriptor of the report table.

    Attributes:
        key: Row field the column reads (``"url"`` or a category key).
        item_type: Renderer hint, ``"url"`` or ``"text"``.
        text: Column title.
    """

    key: str
    item_type: ItemType
    text: str

    def to_dict(self) -> Dict[str, str]:
        return {"key": self.key, "itemType": self.item_type, "text": self.text}


URL_HEADING = Heading(key=URL_HEADING_KEY, item_type="url", text="URL")


class HeadingSet:
    """Ordered, duplicate-free collection of table headings.

    The ``url`` heading is always first. Further headings keep the order in
    which they were first added; adding a key that is already present is a
    no-op.
    """

    def __init__(self) -> None:
        self._headings: Dict[str, Heading] = {URL_HEADING.key: URL_HEADING}

    def add(self, heading: Heading) -> bool:
        """Append ``heading`` unless its key is already present.

        Returns:
            True if the heading was appended.
        """
        if heading.key in self._headings:
            return False
        self._headings[heading.key] = heading
        return True

    def keys(self) -> List[str]:
        return list(self._headings)

    def category_keys(self) -> List[str]:
        """Keys of all headings after the ``url`` column."""
        return [key for key in self._headings if key != URL_HEADING_KEY]

    def to_list(self) -> List[Dict[str, str]]:
        return [heading.to_dict() for heading in self._headings.values()]

    def __contains__(self, key: object) -> bool:
        return key in self._headings

    def __iter__(self) -> Iterator[Heading]:
        return iter(list(self._headings.values()))

    def __len__(self) -> int:
        return len(self._headings)

    def __repr__(self) -> str:
        return f"HeadingSet({self.keys()!r})"


@dataclass
class ReportRow:
    """One table row: a URL and a formatted duration per category column."""

    url: str
    cells: Dict[str, str] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, str]:
        row = {URL_HEADING_KEY: self.url}
        row.update(
            (key, value) for key, value in self.cells.items() if key != URL_HEADING_KEY
        )
        return row
