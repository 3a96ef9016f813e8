# display/style.py

from io import StringIO
from typing import Dict, Iterable, Optional

from rich.console import Console
from rich.style import Style
from rich.text import Text

from ..session.output import OutputRecord, RecordKind
from ..session.suggestions import SuggestionState

INPUT_MARKER = "$ "

COLORS = {
    'GREEN': 'green3',
    'BLUE': 'blue1',
    'GRAY': 'gray50',
    'RED': 'indian_red1',
    'WHITE': 'white',
}

# Record kind -> (color name, bold)
KIND_STYLES = {
    RecordKind.PROMPT_HEADER: ('GREEN', True),
    RecordKind.USER_INPUT: ('WHITE', False),
    RecordKind.SYSTEM_OUTPUT: ('GRAY', False),
    RecordKind.ERROR: ('RED', False),
}


class DisplayStyle:
    """
    Turns scrollback records and suggestion state into ANSI text.

    Rendering goes through a Rich console writing into a StringIO, so the
    result can be handed to whatever draws the screen.
    """

    def __init__(self, width: int = 80, colors: Optional[Dict[str, str]] = None):
        self.colors = colors if colors is not None else COLORS.copy()
        self._console = Console(
            force_terminal=True,
            color_system="truecolor",
            file=StringIO(),
            highlight=False,
            width=width,
        )
        self.kind_styles = {
            kind: Style(color=self.colors[color], bold=bold)
            for kind, (color, bold) in KIND_STYLES.items()
        }
        self.selected_style = Style(color=self.colors['BLUE'], reverse=True)
        self.candidate_style = Style(color=self.colors['BLUE'])

    def get_style(self, kind: RecordKind) -> Style:
        return self.kind_styles.get(kind, Style())

    def format_record(self, record: OutputRecord) -> Text:
        text = record.text
        if record.kind is RecordKind.USER_INPUT:
            text = INPUT_MARKER + text
        return Text(text, style=self.get_style(record.kind))

    def format_suggestions(self, state: SuggestionState) -> Text:
        line = Text()
        for index, candidate in enumerate(state.candidates):
            if index:
                line.append("  ")
            style = self.selected_style if index == state.selected else self.candidate_style
            line.append(candidate, style=style)
        return line

    def _render(self, items: Iterable[Text], width: Optional[int], soft_wrap: bool = False) -> str:
        if width:
            self._console.width = width
        with self._console.capture() as capture:
            for item in items:
                self._console.print(item, soft_wrap=soft_wrap)
        return capture.get()

    def render_records(self, records: Iterable[OutputRecord], width: Optional[int] = None) -> str:
        """Render records to ANSI text, wrapped to the console width."""
        return self._render((self.format_record(r) for r in records), width)

    def render_suggestions(self, state: SuggestionState, width: Optional[int] = None) -> str:
        if not state.visible:
            return ""
        return self._render([self.format_suggestions(state)], width, soft_wrap=True).rstrip("\n")
