"""
bai2_errors.py
Exceptions raised while scanning and decoding BAI2 files.

Every error derives from Bai2Error, which is a ValueError, so callers that
catch ValueError around parse_bai2() keep working.
"""

from typing import List, Optional


class Bai2Error(ValueError):
    """Base class for all BAI2 parsing failures."""


class StructuralError(Bai2Error):
    """The line sequence breaks the File/Group/Account/Transaction nesting."""

    def __init__(
        self,
        message: str,
        kind: Optional[str] = None,
        context: Optional[str] = None,
        line_number: Optional[int] = None,
    ):
        self.kind = kind
        self.context = context
        self.line_number = line_number
        if line_number is not None:
            message = f"{message} (line {line_number})"
        super().__init__(message)


class FieldCountError(Bai2Error):
    """A record has fewer fields than its layout requires."""

    def __init__(self, record: str, expected: int, found: int):
        self.record = record
        self.expected = expected
        self.found = found
        super().__init__(
            f"Invalid {record}. Expected {expected} fields, but found {found}."
        )


class FieldDecodeError(Bai2Error):
    """A required field could not be decoded into its expected type."""

    def __init__(self, record: str, field: str, value: str):
        self.record = record
        self.field = field
        self.value = value
        super().__init__(f"Invalid {record}: could not decode {field} from {value!r}")


class ControlTotalError(Bai2Error):
    """Trailer control values disagree with the records read (strict mode)."""

    def __init__(self, mismatches: List):
        self.mismatches = list(mismatches)
        details = "; ".join(str(m) for m in self.mismatches)
        super().__init__(f"{len(self.mismatches)} control total mismatch(es): {details}")
