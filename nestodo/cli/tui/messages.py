"""Custom Textual messages for TUI inter-widget communication."""

from __future__ import annotations

from textual.message import Message
from textual.widget import Widget


class FieldFocused(Message):
    """A todo field or control received focus."""

    def __init__(self, widget: Widget) -> None:
        super().__init__()
        self.widget = widget


class FocusReporter:
    """Mixin posting `FieldFocused` whenever the widget gains focus."""

    def on_focus(self) -> None:
        self.post_message(FieldFocused(self))  # type: ignore[attr-defined,arg-type]
