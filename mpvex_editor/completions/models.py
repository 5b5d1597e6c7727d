"""Data types shared by the completion catalogs, matcher and dispatcher."""

from dataclasses import dataclass
from enum import Enum
from typing import Iterator, List, Tuple


class CompletionKind(Enum):
    """Kind tag attached to each completion candidate."""
    IDENTIFIER = "identifier"
    PROPERTY = "property"
    FUNCTION = "function"
    VALUE = "value"


@dataclass(frozen=True)
class ConfigOption:
    """An mpv.conf option."""
    key: str
    description: str
    default_value: str = ""

    @property
    def label(self) -> str:
        """``key=default`` when a default exists, otherwise the bare key."""
        if self.default_value:
            return f"{self.key}={self.default_value}"
        return self.key

    @property
    def search_fields(self) -> Tuple[str, str]:
        return self.key, self.description


@dataclass(frozen=True)
class ApiEntry:
    """A function or snippet of the MPV Lua scripting API."""
    name: str
    signature: str
    description: str

    @property
    def label(self) -> str:
        return self.name

    @property
    def search_fields(self) -> Tuple[str, str]:
        return self.name, self.description


@dataclass(frozen=True)
class CompletionItem:
    """A single completion candidate handed to the editor."""
    insert_text: str
    label: str
    description: str
    prefix_length: int
    kind: CompletionKind


class CompletionSink:
    """Accumulates completion items in the order they are added.

    The sink is owned by the caller; producers only ever append to it.
    """

    def __init__(self):
        self._items: List[CompletionItem] = []

    def add_item(self, item: CompletionItem) -> None:
        self._items.append(item)

    @property
    def items(self) -> List[CompletionItem]:
        return list(self._items)

    def labels(self) -> List[str]:
        return [item.label for item in self._items]

    def __iter__(self) -> Iterator[CompletionItem]:
        return iter(list(self._items))

    def __len__(self) -> int:
        return len(self._items)
