"""Exceptions raised by the todo tree core."""


class NestodoError(Exception):
    """Base class for nestodo errors."""


class InvalidIndexError(NestodoError, IndexError):
    """A caller addressed a position outside the target list.

    This is a programming error: positions always come from `locate`, so the
    core never catches it.
    """

    def __init__(self, index: int, length: int) -> None:
        super().__init__(f"Todo index {index} out of range for list of length {length}")
        self.index = index
        self.length = length
