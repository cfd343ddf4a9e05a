"""Errors raised while reading SVG documents and path data."""

from __future__ import annotations


class PathError(ValueError):
    """Base class for path data that cannot be interpreted."""

    kind = "path_error"


class MalformedPathError(PathError):
    """Token stream does not fit the arity of the active command."""

    kind = "malformed_path"


class UnsupportedCommandError(PathError):
    """A valid SVG directive this parser does not handle (A, Q, T, S, Z)."""

    kind = "unsupported_command"

    def __init__(self, command: str, index: int | None = None) -> None:
        self.command = command
        self.index = index
        where = f" at token {index}" if index is not None else ""
        super().__init__(f"Unsupported path command {command!r}{where}")


class SvgDocumentError(ValueError):
    """The SVG document itself could not be read."""

    kind = "svg_document"
