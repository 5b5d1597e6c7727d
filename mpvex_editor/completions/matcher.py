"""Case-insensitive substring matching over completion catalogs."""

from typing import Iterable, Iterator, TypeVar, Union

from .models import ApiEntry, CompletionItem, CompletionKind, ConfigOption
from ..utils.constants import OBSERVABLE_PROPERTY_DESCRIPTION

Entry = TypeVar("Entry", ConfigOption, ApiEntry)


def entry_matches(prefix: str, entry: Union[ConfigOption, ApiEntry]) -> bool:
    """Check whether the prefix occurs in the entry's key/name or description.

    Args:
        prefix: Text typed before the cursor (any case)
        entry: Catalog entry to test

    Returns:
        bool: True if the lower-cased prefix is a substring of either field
    """
    needle = prefix.lower()
    return any(needle in field.lower() for field in entry.search_fields)


def iter_matches(prefix: str, entries: Iterable[Entry]) -> Iterator[Entry]:
    """Yield matching entries in catalog order.

    Every call scans the entries from the start; an empty prefix matches all.
    """
    for entry in entries:
        if entry_matches(prefix, entry):
            yield entry


def iter_property_matches(prefix: str, properties: Iterable[str]) -> Iterator[str]:
    """Yield observable property names containing the prefix, case-insensitively."""
    needle = prefix.lower()
    for name in properties:
        if needle in name.lower():
            yield name


def option_candidate(option: ConfigOption, prefix_length: int) -> CompletionItem:
    # The label doubles as the inserted text so the default value lands in the file
    return CompletionItem(
        insert_text=option.label,
        label=option.label,
        description=option.description,
        prefix_length=prefix_length,
        kind=CompletionKind.PROPERTY,
    )


def api_candidate(api: ApiEntry, prefix_length: int) -> CompletionItem:
    return CompletionItem(
        insert_text=api.name,
        label=api.name,
        description=api.description,
        prefix_length=prefix_length,
        kind=CompletionKind.FUNCTION,
    )


def property_candidate(name: str, prefix_length: int) -> CompletionItem:
    return CompletionItem(
        insert_text=name,
        label=name,
        description=OBSERVABLE_PROPERTY_DESCRIPTION,
        prefix_length=prefix_length,
        kind=CompletionKind.VALUE,
    )


def match_options(prefix: str, options: Iterable[ConfigOption]) -> Iterator[CompletionItem]:
    """Yield completion candidates for the config options matching the prefix."""
    for option in iter_matches(prefix, options):
        yield option_candidate(option, len(prefix))


def match_api(prefix: str, apis: Iterable[ApiEntry]) -> Iterator[CompletionItem]:
    """Yield completion candidates for the Lua API entries matching the prefix."""
    for api in iter_matches(prefix, apis):
        yield api_candidate(api, len(prefix))


def match_properties(prefix: str, properties: Iterable[str]) -> Iterator[CompletionItem]:
    """Yield completion candidates for the observable properties matching the prefix."""
    for name in iter_property_matches(prefix, properties):
        yield property_candidate(name, len(prefix))
