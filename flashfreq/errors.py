"""
Exception types raised by the FlashFreq analysis core.

Every error derives from ``FlashFreqError`` so the GUI can catch one
type, and also from the closest built-in exception so callers that
only know ``OSError`` / ``ValueError`` / ``IndexError`` still work.
"""


class FlashFreqError(Exception):
    """Base class for all FlashFreq errors."""


class ReadError(FlashFreqError, OSError):
    """The input file could not be read (I/O or decoding failure)."""


class FileTypeError(FlashFreqError, ValueError):
    """The selected file is not a ``.csv`` file."""


class ParseError(FlashFreqError, ValueError):
    """The input text could not be turned into a table."""


class EmptyInputError(ParseError):
    """The input contains no records once empty lines are skipped."""


class InvalidColumnError(FlashFreqError, IndexError):
    """A column index outside the known header list was requested."""
