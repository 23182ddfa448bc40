"""Drawing surface protocol shared by the renderer and the terminal backend."""

from typing import Protocol, Tuple

from .styles import Style


class ScreenProtocol(Protocol):
    """Protocol defining the primitives the console renderer draws with."""

    def size(self) -> Tuple[int, int]:
        """Return the current terminal size as (width, height)."""
        ...

    def clear(self) -> None:
        """Blank the whole screen in the pending frame."""
        ...

    def print(self, x: int, y: int, text: str, style: Style = Style.PLAIN) -> None:
        """Queue ``text`` at column ``x``, row ``y`` with the given style tag.

        Args:
            x: Zero-based column
            y: Zero-based row
            text: Text to draw
            style: Style tag for the text
        """
        ...

    def flush(self) -> None:
        """Write the pending frame to the terminal in one batch."""
        ...
