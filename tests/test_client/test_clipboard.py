"""Tests for the Tk clipboard writer: tkinter is replaced with a mock module."""

import sys
from unittest.mock import MagicMock, patch

import pytest

from client.clipboard import ClipboardError, copy_to_clipboard


class FakeTclError(Exception):
    pass


def fake_tkinter(root: MagicMock) -> MagicMock:
    module = MagicMock()
    module.TclError = FakeTclError
    module.Tk.return_value = root
    return module


class TestCopyToClipboard:
    def test_writes_through_hidden_window(self) -> None:
        root = MagicMock()
        with patch.dict(sys.modules, {"tkinter": fake_tkinter(root)}):
            copy_to_clipboard("hello")

        root.withdraw.assert_called_once()
        root.focus_force.assert_called_once()
        root.clipboard_clear.assert_called_once()
        root.clipboard_append.assert_called_once_with("hello")
        root.update.assert_called_once()
        root.destroy.assert_called_once()

    def test_failed_write_still_destroys_window(self) -> None:
        root = MagicMock()
        root.clipboard_append.side_effect = FakeTclError("clipboard locked")
        with patch.dict(sys.modules, {"tkinter": fake_tkinter(root)}):
            with pytest.raises(ClipboardError, match="clipboard locked"):
                copy_to_clipboard("hello")
        root.destroy.assert_called_once()

    def test_no_display(self) -> None:
        module = fake_tkinter(MagicMock())
        module.Tk.side_effect = FakeTclError("no $DISPLAY")
        with patch.dict(sys.modules, {"tkinter": module}):
            with pytest.raises(ClipboardError, match="no display"):
                copy_to_clipboard("hello")
