"""Errors raised by the conversion pipeline"""


class Bin2hError(Exception):
    """Base class for every error that aborts a conversion"""


class InvalidColumnSize(Bin2hError, ValueError):
    """The column size is odd or smaller than 2"""


class InvalidName(Bin2hError, ValueError):
    """A name derived from a path came out empty"""


class InputOpenFailure(Bin2hError):
    """The input file could not be opened"""


class OutputCreateFailure(Bin2hError):
    """The output file could not be created or overwritten"""


class SeekFailure(Bin2hError):
    """Skipping into the input was rejected by the I/O layer"""


class ReadFailure(Bin2hError):
    """Reading the input failed before end of stream"""
