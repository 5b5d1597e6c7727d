"""Categorized, immutable completion catalogs."""

from typing import Dict, Generic, Iterable, Iterator, List, Optional, Sequence, Tuple, TypeVar

E = TypeVar("E")


class Catalog(Generic[E]):
    """An ordered list of named categories of entries.

    Searching treats the catalog as the concatenation of its categories, in
    category order. Categories stay available by name for display purposes.
    """

    def __init__(self, categories: Iterable[Tuple[str, Sequence[E]]]):
        self._categories: Tuple[Tuple[str, Tuple[E, ...]], ...] = tuple(
            (name, tuple(entries)) for name, entries in categories
        )
        self._entries: Tuple[E, ...] = tuple(
            entry for _, entries in self._categories for entry in entries
        )
        self._by_category: Dict[str, Tuple[E, ...]] = dict(self._categories)

    @property
    def entries(self) -> Tuple[E, ...]:
        """All entries, flattened in category order."""
        return self._entries

    @property
    def category_names(self) -> List[str]:
        return [name for name, _ in self._categories]

    def category(self, name: str) -> Optional[Tuple[E, ...]]:
        """Get the entries of one category, or None if there is no such category."""
        return self._by_category.get(name)

    def categories(self) -> Tuple[Tuple[str, Tuple[E, ...]], ...]:
        return self._categories

    def __iter__(self) -> Iterator[E]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"<Catalog {len(self._categories)} categories, {len(self._entries)} entries>"
