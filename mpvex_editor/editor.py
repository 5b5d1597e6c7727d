import argparse
import logging
import os
from typing import Any, Dict, List, Optional, Tuple

from prompt_toolkit import PromptSession
from prompt_toolkit.application.current import get_app
from prompt_toolkit.completion import CompleteEvent
from prompt_toolkit.document import Document
from prompt_toolkit.filters import emacs_insert_mode, vi_insert_mode
from prompt_toolkit.key_binding import KeyBindings
from prompt_toolkit.layout.processors import HighlightMatchingBracketProcessor
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from . import __version__
from .completions import IdentifierCompleter, MpvCompleter
from .completions.dispatcher import is_config_kind
from .config.defaults import default_config
from .config.manager import ConfigManager
from .highlighting.registry import DEFAULT_REGISTRY, SyntaxRegistry, scope_for_kind
from .highlighting.theme import PALETTES, build_colors, build_style, get_palette
from .utils.constants import AUTO_CLOSE_PAIRS, CONF_FILE_KIND, EDITOR_KEYS, LUA_FILE_KIND
from .utils.logging import setup_logging

logger = logging.getLogger(__name__)

insert_mode = vi_insert_mode | emacs_insert_mode

GUTTER_WIDTH = 5


def detect_file_kind(path: str) -> str:
    """Pick the file kind from the extension: ``.conf`` files are config, all else Lua."""
    return CONF_FILE_KIND if path.lower().endswith(".conf") else LUA_FILE_KIND


def read_text(path: str) -> str:
    """Read a file for editing; a missing file starts out empty."""
    if not os.path.exists(path):
        return ""
    with open(path, 'r', encoding='utf-8') as f:
        return f.read()


def write_text(path: str, text: str) -> None:
    directory = os.path.dirname(path)
    if directory:
        os.makedirs(directory, exist_ok=True)
    with open(path, 'w', encoding='utf-8') as f:
        f.write(text)


class ScriptEditor:
    def __init__(self, file_kind: str, config: Optional[Dict[str, Any]] = None,
                 registry: Optional[SyntaxRegistry] = None, console: Optional[Console] = None):
        self.console = console or Console()
        self.file_kind = file_kind
        self.config = config or default_config()
        # Registry is passed in explicitly; the shared one is only the default
        self.registry = registry or DEFAULT_REGISTRY.get()
        self.completer = MpvCompleter(IdentifierCompleter(), file_kind)
        self.path: Optional[str] = None

    @property
    def editor_settings(self) -> Dict[str, Any]:
        return self.config["editorSettings"]

    def build_style(self):
        """Build the editor style from the configured palette and the file kind's theme"""
        palette = get_palette(self.config.get("theme", "dark"), self.config.get("paletteOverrides"))
        colors = build_colors(palette)
        token_style = self.registry.token_style(self.registry.theme_for_kind(self.file_kind))
        return build_style(colors, token_style)

    def build_lexer(self):
        return self.registry.create_lexer(scope_for_kind(self.file_kind))

    def build_key_bindings(self) -> KeyBindings:
        """Indentation, auto-indent and bracket/quote pairing.

        Enter keeps the leading whitespace of the current line when auto-indent
        is on. With pair closing on, typing an opening character also inserts
        its closing one with the cursor in between, and typing a closing
        character in front of the same character steps over it.
        """
        settings = self.editor_settings
        bindings = KeyBindings()
        indent = " " * settings["tabWidth"]

        @bindings.add("c-t")
        def _(event):
            event.current_buffer.insert_text(indent)

        if settings["autoIndent"]:
            @bindings.add("enter", filter=insert_mode)
            def _(event):
                event.current_buffer.newline(copy_margin=True)

        if settings["autoClosePairs"]:
            for opening, closing in AUTO_CLOSE_PAIRS.items():
                bindings.add(opening, filter=insert_mode)(self._pair_handler(opening, closing))
            for closing in set(AUTO_CLOSE_PAIRS.values()) - set(AUTO_CLOSE_PAIRS):
                bindings.add(closing, filter=insert_mode)(self._pair_handler(None, closing))

        return bindings

    @staticmethod
    def _pair_handler(opening: Optional[str], closing: str):
        typed = opening or closing

        def handler(event):
            buffer = event.current_buffer
            if typed == closing and buffer.document.current_char == closing:
                buffer.cursor_position += 1
            elif opening is None:
                buffer.insert_text(closing)
            else:
                buffer.insert_text(opening)
                buffer.insert_text(closing, move_cursor=False)
        return handler

    def gutter(self, line_number: int, wrap_count: int = 0) -> List[Tuple[str, str]]:
        """Line number shown to the left of a buffer line.

        Args:
            line_number: Zero-based line index
            wrap_count: How many times the line has been soft-wrapped so far

        Returns:
            Formatted text for the gutter
        """
        if wrap_count > 0:
            return [("class:line-number", " " * GUTTER_WIDTH)]

        current_row = get_app().current_buffer.document.cursor_position_row
        style = "class:line-number.current" if line_number == current_row else "class:line-number"
        return [(style, f"{line_number + 1:>{GUTTER_WIDTH - 1}} ")]

    def bottom_toolbar(self) -> List[Tuple[str, str]]:
        kind = "mpv config" if is_config_kind(self.file_kind) else "mpv Lua script"
        name = os.path.basename(self.path) if self.path else "[new]"
        return [
            ("class:bottom-toolbar", f" {name} "),
            ("class:line-divider", "│"),
            ("class:bottom-toolbar", f" {kind} "),
            ("class:line-divider", "│"),
            ("class:bottom-toolbar", " Esc Enter: save  Ctrl-C: quit  Ctrl-T: indent "),
        ]

    def create_session(self) -> PromptSession:
        settings = self.editor_settings
        line_numbers = settings["lineNumbers"]
        return PromptSession(
            message=(lambda: self.gutter(0)) if line_numbers else "",
            prompt_continuation=(
                (lambda width, line_number, wrap_count: self.gutter(line_number, wrap_count))
                if line_numbers else ""
            ),
            multiline=True,
            lexer=self.build_lexer(),
            completer=self.completer,
            complete_while_typing=settings["completeWhileTyping"],
            wrap_lines=settings["wordWrap"],
            mouse_support=settings["mouseSupport"],
            style=self.build_style(),
            include_default_pygments_style=False,
            key_bindings=self.build_key_bindings(),
            input_processors=[HighlightMatchingBracketProcessor(chars="()[]{}")],
            bottom_toolbar=self.bottom_toolbar,
        )

    async def edit(self, text: str, path: Optional[str] = None) -> Optional[str]:
        """Edit text in a multiline session

        Args:
            text: Initial buffer contents
            path: File being edited, shown in the toolbar

        Returns:
            The edited text, or None if the user quit without saving
        """
        self.path = path
        # Highlighting setup runs off the event loop and never fails
        await self.registry.ensure_ready_async()
        session = self.create_session()
        try:
            return await session.prompt_async(default=text)
        except (KeyboardInterrupt, EOFError):
            return None

    def complete(self, text: str) -> List[Tuple[str, str, str]]:
        """Collect completions for text with the cursor at its end

        Returns:
            List of (label, description, inserted text)
        """
        document = Document(text, cursor_position=len(text))
        event = CompleteEvent(completion_requested=True)
        return [
            (completion.display_text, completion.display_meta_text, completion.text)
            for completion in self.completer.get_completions(document, event)
        ]

    def display_completions(self, text: str) -> None:
        completions = self.complete(text)
        if not completions:
            self.console.print(f"[yellow]No completions for[/yellow] [bold]{text!r}[/bold]")
            return

        table = Table(title=f"Completions for {text!r} ({self.file_kind})")
        table.add_column("Label", style="cyan", no_wrap=True)
        table.add_column("Description")
        table.add_column("Inserts", style="green")
        for label, description, insert_text in completions:
            table.add_row(label, description, insert_text)
        self.console.print(table)

    def print_help(self):
        """Print editor key bindings"""
        lines = [f"[bold cyan]{key}[/bold cyan]: {description}" for key, description in EDITOR_KEYS.items()]
        self.console.print(Panel("\n".join(lines), title="Keys", border_style="blue", expand=False))


async def main() -> int:
    parser = argparse.ArgumentParser(description="Editor for mpv config files and Lua scripts")

    parser.add_argument("file", nargs="?", help="File to edit (.conf files are edited as mpv config)")
    parser.add_argument("--kind", choices=[CONF_FILE_KIND, LUA_FILE_KIND],
                        help="Override the file kind detected from the extension")
    parser.add_argument("--theme", choices=sorted(PALETTES), help="Color theme (overrides the saved setting)")
    parser.add_argument("--complete", metavar="TEXT",
                        help="Print the completions for TEXT (cursor at the end) and exit")
    parser.add_argument("--config", default="default", help="Name of the saved settings to use")
    parser.add_argument("--save-config", metavar="NAME",
                        help="Save the settings in effect (including --theme) under NAME")
    parser.add_argument("--reset-config", action="store_true",
                        help="Reset the --config settings to their defaults and save them")
    parser.add_argument("--log-file", help="Also write logs to this file")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    args = parser.parse_args()

    console = Console()
    setup_logging(debug=args.debug, log_file=args.log_file)

    manages_config = args.save_config is not None or args.reset_config
    if args.complete is None and not args.file and not manages_config:
        parser.error("a file to edit is required unless --complete, --save-config or --reset-config is given")

    config_manager = ConfigManager(console)
    if args.reset_config:
        config = config_manager.reset_configuration()
        if not config_manager.save_configuration(config, args.config):
            return 1
    else:
        config = config_manager.load_configuration(args.config, quiet=True)
    if args.theme:
        config["theme"] = args.theme

    if args.save_config is not None and not config_manager.save_configuration(config, args.save_config):
        return 1

    if args.complete is None and not args.file:
        return 0

    file_kind = args.kind or (detect_file_kind(args.file) if args.file else LUA_FILE_KIND)
    editor = ScriptEditor(file_kind, config=config, console=console)

    if args.complete is not None:
        editor.display_completions(args.complete)
        return 0

    try:
        text = read_text(args.file)
    except (OSError, UnicodeDecodeError) as e:
        console.print(Panel(f"[bold red]Cannot open {args.file}:[/bold red] {str(e)}",
                            title="Error", border_style="red", expand=False))
        return 1

    editor.print_help()
    try:
        result = await editor.edit(text, path=args.file)
    except Exception as e:
        console.print(Panel(f"[bold red]Error:[/bold red] {str(e)}", title="Exception", border_style="red", expand=False))
        console.print_exception()
        return 1

    if result is None:
        console.print("[yellow]Exited without saving.[/yellow]")
        return 0

    try:
        write_text(args.file, result)
    except OSError as e:
        console.print(Panel(f"[bold red]Cannot save {args.file}:[/bold red] {str(e)}",
                            title="Error", border_style="red", expand=False))
        return 1

    console.print(f"[green]Saved {args.file}[/green]")
    return 0
