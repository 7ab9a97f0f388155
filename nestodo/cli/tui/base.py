"""Base mixin for nestodo TUI widgets."""


class NestodoMixin:
    """Mixin for widgets that render controlled content.

    Suppresses Textual's default link processing.
    """

    auto_links = False
