"""
Error Taxonomy
==============
Every failure raised while loading an OBJ source derives from ``ObjError``.

Classes:
    ObjReadError: The source could not be opened or read (also an OSError).
    ObjFormatError: Base for directive-level errors; carries the line number.
    MalformedDirectiveError: Too few tokens for the directive.
    InvalidNumberError: A coordinate is not a valid float.
    InvalidIndexError: A face index sub-field is missing or not an integer.
    UnresolvedReferenceError: A face index is outside [1, len(list)].
"""
from __future__ import annotations

from typing import Optional


class ObjError(Exception):
    """Base class of all errors raised by objmesh."""


class ObjReadError(ObjError, OSError):
    def __init__(self, source: str, reason: str, line_number: Optional[int] = None) -> None:
        self.source = source
        self.reason = reason
        self.line_number = line_number
        if line_number is None:
            msg = f"unable to read OBJ source '{source}': {reason}"
        else:
            msg = f"unable to read OBJ source '{source}' near line {line_number}: {reason}"
        super().__init__(msg)


class ObjFormatError(ObjError, ValueError):
    def __init__(self, message: str, line_number: int) -> None:
        self.line_number = line_number
        super().__init__(message)


class MalformedDirectiveError(ObjFormatError):
    def __init__(self, line_number: int, directive: str) -> None:
        self.directive = directive
        super().__init__(
            f"insufficient points found in {directive} directive on line {line_number}",
            line_number,
        )


class InvalidNumberError(ObjFormatError):
    def __init__(self, line_number: int, directive: str, coordinate: str) -> None:
        self.directive = directive
        self.coordinate = coordinate
        super().__init__(
            f"invalid float {coordinate} coordinate found in {directive} directive on line {line_number}",
            line_number,
        )


class InvalidIndexError(ObjFormatError):
    def __init__(self, line_number: int, field: str, token: str) -> None:
        self.field = field
        self.token = token
        super().__init__(
            f"invalid {field} index {token!r} found in face directive on line {line_number}",
            line_number,
        )


class UnresolvedReferenceError(ObjFormatError):
    def __init__(self, line_number: int, index: int, kind: str) -> None:
        self.index = index
        self.kind = kind
        super().__init__(
            f"unable to resolve {kind} id {index} used on line {line_number}",
            line_number,
        )
