"""Reading and writing string catalog files."""

from .xcstrings_parser import InvalidDocumentError, XCStringsParser
from .xcstrings_writer import XCStringsWriter

__all__ = ["InvalidDocumentError", "XCStringsParser", "XCStringsWriter"]
