"""Exceptions raised at the stream and process boundaries.

Per-row validation problems are not exceptions; they surface as
:class:`~transaction_report.models.RowWarning` values.
"""

from __future__ import annotations


class ArgumentError(ValueError):
    """The command-line input is unusable (missing path, wrong file, wrong extension)."""


class ReadError(RuntimeError):
    """The row source could not be opened, decoded, or streamed.

    The underlying exception is kept on ``cause`` and chained via
    ``raise ... from``.
    """

    def __init__(self, message: str, *, cause: BaseException | None = None) -> None:
        super().__init__(message)
        self.cause = cause


__all__ = ["ArgumentError", "ReadError"]
