"""Test the prompt_toolkit completers."""

from prompt_toolkit.completion import CompleteEvent, Completer, Completion
from prompt_toolkit.document import Document

from mpvex_editor.completions.completer import IdentifierCompleter, MpvCompleter


class StubCompleter(Completer):
    """Base completer that always offers the same word."""

    marker = "stub"

    def __init__(self, word="mp.get_stub"):
        self.word = word

    def get_completions(self, document, complete_event):
        yield Completion(self.word, start_position=0, display_meta="from base")


def _complete(completer, text):
    document = Document(text, cursor_position=len(text))
    return list(completer.get_completions(document, CompleteEvent(completion_requested=True)))


def test_base_completions_first():
    """Test that the wrapped completer's results are yielded before catalog results."""
    completions = _complete(MpvCompleter(StubCompleter(), "lua"), "mp.get")

    assert completions[0].text == "mp.get_stub"
    texts = [c.text for c in completions[1:]]
    assert "mp.get_property" in texts
    assert "mp.get_property_bool" in texts


def test_catalog_completion_shape():
    """Test replacement range, display label and meta of catalog completions."""
    completions = _complete(MpvCompleter(StubCompleter(), "conf"), "volume-m")
    catalog = [c for c in completions if c.display_meta_text != "from base"]

    volume_max = next(c for c in catalog if c.display_text == "volume-max=130")
    assert volume_max.text == "volume-max=130"
    assert volume_max.start_position == -len("volume-m")
    assert volume_max.display_meta_text == "Maximum amplified volume"


def test_prefix_taken_from_current_line():
    """Test that only the cursor line is scanned for the prefix."""
    text = "volume=50\nsub-font-si"
    completions = _complete(MpvCompleter(StubCompleter(), "conf"), text)
    labels = [c.display_text for c in completions[1:]]
    assert labels == ["sub-font-size=55"]


def test_no_catalog_completions_without_prefix():
    """Test that only base completions appear after a separator."""
    completions = _complete(MpvCompleter(StubCompleter(), "lua"), "local x = ")
    assert [c.text for c in completions] == ["mp.get_stub"]


def test_attribute_access_is_forwarded():
    """Test that attributes not defined on the wrapper come from the base."""
    base = StubCompleter("word")
    completer = MpvCompleter(base, "lua")
    assert completer.marker == "stub"
    assert completer.word == "word"
    assert completer.file_kind == "lua"
    assert completer.base is base


def test_identifier_completer():
    """Test completion of words already present in the buffer."""
    text = "local volume_level = 1\nprint(vol"
    completions = _complete(IdentifierCompleter(), text)
    assert [c.text for c in completions] == ["volume_level"]
    assert completions[0].start_position == -3


def test_identifier_completer_ignores_current_word():
    """Test that the word being typed is not offered back."""
    assert _complete(IdentifierCompleter(), "unique_word") == []


def test_identifier_and_catalog_are_not_deduplicated():
    """Test that the same word can come from both sources."""
    text = "mute=yes\nmu"
    completions = _complete(MpvCompleter(IdentifierCompleter(), "conf"), text)
    texts = [c.text for c in completions]

    # Identifier completions from the buffer come first
    assert texts[0] == "mute"
    assert "mute=no" in texts
