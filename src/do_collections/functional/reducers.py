"""Reduce expressions shipped with the library."""

from io import StringIO
from typing import Optional


class ReduceToTextBuffer:
    """
    Joins strings into a StringIO, putting the separator between elements.

    Usage:
        buffer = (
            Do.with_collection(words)
            .with_initial_value(StringIO())
            .reduce(ReduceToTextBuffer(", "))
        )
        buffer.getvalue()  # "a, b, c"

    ::: This is-in-layer Functional-Layer.
    ::: This is a reducer.
    ::: This is stateless.
    """

    def __init__(self, separator: Optional[str]):
        """
        Args:
            separator: string used to join elements. May be None or empty,
                in which case the elements are written back to back.
        """
        self.separator = separator

    def __call__(self, buffer: StringIO, element: str) -> StringIO:
        if self.separator and buffer.tell() > 0:
            buffer.write(self.separator)
        buffer.write(element)
        return buffer

    def __repr__(self) -> str:
        return f"ReduceToTextBuffer({self.separator!r})"
