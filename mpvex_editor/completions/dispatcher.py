"""Routes the text before the cursor to the option or Lua API catalog.

The dispatcher is the single entry point the editor calls on each completion
request. It extracts the word being typed, picks a catalog from the file kind
and appends candidates to a sink owned by the caller.
"""

import logging
from typing import Callable, Optional, Sequence

from .catalog import Catalog
from .lua_api import API_CATALOG, OBSERVABLE_PROPERTIES
from .matcher import match_api, match_options, match_properties
from .models import ApiEntry, CompletionSink, ConfigOption
from .options import OPTION_CATALOG
from ..utils.constants import CONF_FILE_KINDS, MIN_PROPERTY_PREFIX, PREFIX_EXTRA_CHARS
from ..utils.lazy import Lazy

logger = logging.getLogger(__name__)

# Host-provided completions: called with (line, column, sink) before the catalogs
BaseProvider = Callable[[str, int, CompletionSink], None]


def is_prefix_char(ch: str) -> bool:
    return ch.isalnum() or ch in PREFIX_EXTRA_CHARS


def extract_prefix(line: str, column: int) -> str:
    """Extract the word immediately before the cursor.

    Scans backward from ``column - 1`` over letters, digits and ``- _ .``.
    A column outside the line yields an empty prefix.

    Args:
        line: Text of the cursor line
        column: Zero-based cursor column within the line

    Returns:
        str: The prefix, possibly empty
    """
    if column <= 0 or column > len(line):
        return ""

    start = column
    while start > 0 and is_prefix_char(line[start - 1]):
        start -= 1
    return line[start:column]


def is_config_kind(file_kind: Optional[str]) -> bool:
    """Only the config kind selects the option catalog; everything else is a script."""
    return file_kind in CONF_FILE_KINDS


class CompletionDispatcher:
    """Appends MPV-specific completions after the host's own completions.

    Catalogs are passed in explicitly; the defaults are the process-wide
    lazily built catalogs.
    """

    def __init__(
        self,
        file_kind: str,
        base_provider: Optional[BaseProvider] = None,
        option_catalog: Lazy[Catalog[ConfigOption]] = OPTION_CATALOG,
        api_catalog: Lazy[Catalog[ApiEntry]] = API_CATALOG,
        observable_properties: Sequence[str] = OBSERVABLE_PROPERTIES,
    ):
        self.file_kind = file_kind
        self.base_provider = base_provider
        self._option_catalog = option_catalog
        self._api_catalog = api_catalog
        self._observable_properties = tuple(observable_properties)

    @property
    def is_config(self) -> bool:
        return is_config_kind(self.file_kind)

    def require_autocomplete(self, line: str, column: int, sink: CompletionSink) -> None:
        """Append completion candidates for the cursor position to the sink.

        Args:
            line: Text of the cursor line
            column: Zero-based cursor column within the line
            sink: Result sink; existing items are left in place
        """
        if self.base_provider is not None:
            self.base_provider(line, column, sink)

        prefix = extract_prefix(line, column)
        if not prefix:
            return

        self.add_catalog_completions(prefix, sink)

    def add_catalog_completions(self, prefix: str, sink: CompletionSink) -> None:
        """Append catalog candidates for an already extracted prefix."""
        before = len(sink)

        if self.is_config:
            for item in match_options(prefix, self._option_catalog.get()):
                sink.add_item(item)
        else:
            for item in match_api(prefix, self._api_catalog.get()):
                sink.add_item(item)
            if len(prefix) >= MIN_PROPERTY_PREFIX:
                for item in match_properties(prefix, self._observable_properties):
                    sink.add_item(item)

        logger.debug("Added %d catalog completions for %r (kind=%s)",
                     len(sink) - before, prefix, self.file_kind)
