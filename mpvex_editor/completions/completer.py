""" prompt_toolkit completers for the editor buffer """
import re
from typing import Iterable, Optional

from prompt_toolkit.completion import CompleteEvent, Completer, Completion
from prompt_toolkit.document import Document

from .dispatcher import CompletionDispatcher, extract_prefix
from .models import CompletionItem, CompletionKind, CompletionSink

WORD_PATTERN = re.compile(r"[\w.\-]+")

# Style class per completion kind, picked up by the editor style
KIND_STYLES = {
    CompletionKind.IDENTIFIER: "class:completion.identifier",
    CompletionKind.PROPERTY: "class:completion.property",
    CompletionKind.FUNCTION: "class:completion.function",
    CompletionKind.VALUE: "class:completion.value",
}


def to_completion(item: CompletionItem) -> Completion:
    """Convert a sink item into a prompt_toolkit Completion."""
    return Completion(
        item.insert_text,
        start_position=-item.prefix_length,
        display=item.label,
        display_meta=item.description,
        style=KIND_STYLES.get(item.kind, ""),
    )


class IdentifierCompleter(Completer):
    """Completes words that already appear elsewhere in the buffer."""

    def __init__(self, min_length: int = 2):
        self.min_length = min_length

    def get_completions(self, document: Document, complete_event: CompleteEvent) -> Iterable[Completion]:
        prefix = extract_prefix(document.current_line, document.cursor_position_col)
        if not prefix:
            return

        lower = prefix.lower()
        words = {
            word for word in WORD_PATTERN.findall(document.text)
            if len(word) >= self.min_length and word != prefix and word.lower().startswith(lower)
        }
        for word in sorted(words):
            yield Completion(
                word,
                start_position=-len(prefix),
                display_meta="identifier",
                style=KIND_STYLES[CompletionKind.IDENTIFIER],
            )


class MpvCompleter(Completer):
    """Wraps a base completer and appends MPV option / Lua API suggestions.

    Only ``get_completions`` is overridden; every other attribute is looked up
    on the wrapped completer.
    """

    def __init__(self, base: Completer, file_kind: str, dispatcher: Optional[CompletionDispatcher] = None):
        self.base = base
        self.file_kind = file_kind
        self.dispatcher = dispatcher or CompletionDispatcher(file_kind)

    def __getattr__(self, name):
        if name == "base":
            raise AttributeError(name)
        return getattr(self.base, name)

    def get_completions(self, document: Document, complete_event: CompleteEvent) -> Iterable[Completion]:
        # The base completer's own suggestions always come first
        yield from self.base.get_completions(document, complete_event)

        sink = CompletionSink()
        self.dispatcher.require_autocomplete(document.current_line, document.cursor_position_col, sink)
        for item in sink:
            yield to_completion(item)
