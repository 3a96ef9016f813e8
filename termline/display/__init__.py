# display/__init__.py

from .style import DisplayStyle
from .terminal import DisplayTerminal, KEY_EVENTS

class Display:
    """
    Coordinates terminal display components.

    Component Hierarchy:
    DisplayStyle (rendering) → DisplayTerminal (keys, layout, event loop)
    """
    def __init__(self, width: int = 80):
        """Initialize components in dependency order."""
        self.style = DisplayStyle(width=width)
        self.terminal = DisplayTerminal(style=self.style)

    async def run(self, session) -> None:
        """Drive the session until it terminates."""
        await self.terminal.run(session)

__all__ = ['Display', 'DisplayStyle', 'DisplayTerminal', 'KEY_EVENTS']
