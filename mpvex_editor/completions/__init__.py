"""MPV option and Lua API completion."""

from .completer import IdentifierCompleter, MpvCompleter
from .dispatcher import CompletionDispatcher, extract_prefix
from .lua_api import API_CATALOG, OBSERVABLE_PROPERTIES
from .models import ApiEntry, CompletionItem, CompletionKind, CompletionSink, ConfigOption
from .options import OPTION_CATALOG

__all__ = [
    "API_CATALOG",
    "OBSERVABLE_PROPERTIES",
    "OPTION_CATALOG",
    "ApiEntry",
    "CompletionDispatcher",
    "CompletionItem",
    "CompletionKind",
    "CompletionSink",
    "ConfigOption",
    "IdentifierCompleter",
    "MpvCompleter",
    "extract_prefix",
]
