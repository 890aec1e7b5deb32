"""Codec exceptions.

Every failure detected while parsing frames or driving the decoder state
machine is reported as a subclass of :class:`ParserError`, so callers can
catch one class for any codec fault.
"""


class ParserError(Exception):
    """Base class for all codec errors."""


class FramingError(ParserError):
    """A text frame does not follow the frame grammar."""


class ValidationError(ParserError):
    """A well-formed payload has a shape not allowed for its packet type."""


class ProtocolSequenceError(ParserError):
    """A frame arrived that the decoder is not expecting in its current state."""


class ReconstructionError(ParserError):
    """A placeholder refers to an attachment that was never received."""
