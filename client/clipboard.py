"""Best-effort clipboard write through a throwaway, invisible Tk window."""

import logging

logger = logging.getLogger(__name__)


class ClipboardError(Exception):
    """The text could not be placed on the system clipboard."""


def copy_to_clipboard(text: str) -> None:
    """
    Put text on the system clipboard.

    A withdrawn Tk root is created, focused, filled, flushed and destroyed in
    one call, so nothing is left on screen and no clipboard permission prompt
    is involved.

    Raises:
        ClipboardError: if Tk is unavailable or the write fails.
    """
    try:
        import tkinter
    except ImportError as e:
        raise ClipboardError("tkinter is not available") from e

    try:
        root = tkinter.Tk()
    except tkinter.TclError as e:
        raise ClipboardError(f"no display for clipboard: {e}") from e

    try:
        root.withdraw()
        root.focus_force()
        root.clipboard_clear()
        root.clipboard_append(text)
        root.update()
    except tkinter.TclError as e:
        raise ClipboardError(str(e)) from e
    finally:
        root.destroy()
    logger.debug("Copied %d chars to clipboard", len(text))
