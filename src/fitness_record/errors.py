"""Exceptions raised by logbook persistence."""


class LogbookError(Exception):
    """Base class for logbook failures."""


class ReadError(LogbookError):
    """The logbook file could not be read or understood."""


class WriteError(LogbookError):
    """The logbook file could not be written."""


class ParseError(LogbookError):
    """A stored record does not match the expected shape."""
