"""Help screen showing all keyboard shortcuts."""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from typing_extensions import override

from textual.containers import VerticalScroll
from textual.screen import ModalScreen
from textual.widgets import Static

if TYPE_CHECKING:
    from textual.app import ComposeResult
    from textual.binding import BindingType

HELP_TEXT = """\
[bold]Navigation[/bold]
  Up/Down                               Move between rows
  PgUp/PgDn                             Page up/down
  Home/End                              Jump to first/last row
  Left/Right                            Hide/show leading columns

[bold]Display[/bold]
  Enter                                 Wrap/unwrap the message of the selected row

[bold]Search[/bold]
  /                                     Start typing a search (exact, case-sensitive)
  Enter                                 Run the search and jump to the nearest match
  Backspace                             Delete the last character
  n                                     Next matching row
  N                                     Previous matching row
  Escape                                Close the search

[bold]Clipboard[/bold]
  y                                     Copy the selected line
  Y                                     Copy the message of the selected line

[bold]General[/bold]
  t                                     Toggle dark/light theme
  h                                     Show this help
  q                                     Quit
"""


class HelpScreen(ModalScreen[None]):
    """Modal help screen with keyboard shortcuts."""

    DEFAULT_CSS = """
    HelpScreen {
        align: center middle;
    }

    HelpScreen > VerticalScroll {
        width: 60%;
        height: 90%;
        max-height: 30;
        background: $surface;
        border: tall $accent;
        padding: 1 2;
    }
    """

    BINDINGS: ClassVar[list[BindingType]] = [
        ("escape", "dismiss_help", "Close"),
        ("h", "dismiss_help", "Close"),
        ("q", "dismiss_help", "Close"),
    ]

    @override
    def compose(self) -> ComposeResult:
        with VerticalScroll():
            yield Static(HELP_TEXT, markup=True)

    def action_dismiss_help(self) -> None:
        self.dismiss(None)
