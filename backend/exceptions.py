"""
Error taxonomy for document classification and parsing.
Every exception maps to one value of the closed ErrorKind enumeration.
"""
from enum import Enum
from typing import Optional


class ErrorKind(str, Enum):
    ARGUMENT = "argument"
    NOT_FOUND = "not_found"
    UNSUPPORTED_FAMILY = "unsupported_family"
    TYPE_MISMATCH = "type_mismatch"
    EXTRACTION = "extraction"


class NotFoundReason(str, Enum):
    """What a parser was looking for and did not find."""
    NO_MRZ_FOUND = "NoMrzFound"
    MRZ_LINE1_NOT_FOUND = "MrzLine1NotFound"
    MRZ_LINE2_NOT_FOUND = "MrzLine2NotFound"
    EMIRATES_ID_NUMBER_NOT_DETECTED = "EmiratesIdNumberNotDetected"
    TRADE_LICENSE_IDENTIFIERS_NOT_DETECTED = "TradeLicenseIdentifiersNotDetected"


NOT_FOUND_MESSAGES = {
    NotFoundReason.NO_MRZ_FOUND: "No MRZ candidates found",
    NotFoundReason.MRZ_LINE1_NOT_FOUND: "MRZ line 1 not detected",
    NotFoundReason.MRZ_LINE2_NOT_FOUND: "MRZ line 2 not detected",
    NotFoundReason.EMIRATES_ID_NUMBER_NOT_DETECTED: "Emirates ID number not detected",
    NotFoundReason.TRADE_LICENSE_IDENTIFIERS_NOT_DETECTED: (
        "UAE Trade License number or company name not detected"
    ),
}


class DocumentProcessingError(Exception):
    """Base class for all classification and parsing errors."""
    kind = ErrorKind.EXTRACTION


class ArgumentError(DocumentProcessingError, ValueError):
    """Required input is empty or missing."""
    kind = ErrorKind.ARGUMENT


class NotFoundError(DocumentProcessingError):
    """A mandatory document marker (MRZ, ID number, license identifiers) is absent."""
    kind = ErrorKind.NOT_FOUND

    def __init__(self, reason: NotFoundReason, message: Optional[str] = None):
        self.reason = reason
        super().__init__(message or NOT_FOUND_MESSAGES[reason])


class UnsupportedFamilyError(DocumentProcessingError):
    kind = ErrorKind.UNSUPPORTED_FAMILY

    def __init__(self, family):
        self.family = family
        super().__init__(f"Unsupported document type: {family!r}")


class DocumentTypeMismatchError(DocumentProcessingError):
    """The detected document family differs from the one the caller asked for."""
    kind = ErrorKind.TYPE_MISMATCH

    def __init__(self, expected, detected):
        self.expected = expected
        self.detected = detected
        super().__init__(
            f"Document type mismatch. Expected: {getattr(expected, 'value', expected)}, "
            f"but detected: {getattr(detected, 'value', detected)}. "
            "The uploaded document does not match the selected document type."
        )
