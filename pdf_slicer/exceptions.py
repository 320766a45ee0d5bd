"""
Custom exceptions for PDF Slicer.

Engine operations degrade instead of raising; these exceptions are raised at
the storage boundary (loading and strict saving).
"""


class PDFSlicerException(Exception):
    """Base exception for all PDF Slicer errors."""

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.default_message)
        self.message = message or self.default_message

    @property
    def default_message(self) -> str:
        return "An unknown PDF slicer error occurred."


class InvalidPDFError(PDFSlicerException):
    """Raised when PDF file is invalid or corrupted."""

    @property
    def default_message(self) -> str:
        return "Invalid or corrupted PDF file."


class EncryptedPDFError(PDFSlicerException):
    """Raised when PDF is encrypted and cannot be processed."""

    @property
    def default_message(self) -> str:
        return "PDF is encrypted and cannot be processed without a password."


class DocumentWriteError(PDFSlicerException):
    """Raised when a document cannot be written to storage."""

    @property
    def default_message(self) -> str:
        return "Unable to write PDF document."


class RasterizationError(PDFSlicerException):
    """Raised by render or encode backends when a page cannot be processed."""

    @property
    def default_message(self) -> str:
        return "Unable to rasterize page."
