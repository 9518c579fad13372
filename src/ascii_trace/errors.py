"""
Errors
======

Exception types shared by the encoder and the player.

Both kinds are unrecoverable at the point of detection:
    - InputError: source video or Document missing / unreadable
    - FormatError: Document present but missing or misshapen fields
"""


class AsciiTraceError(Exception):
    """Base class for all ascii-trace failures."""
    pass


class InputError(AsciiTraceError):
    """Raised when an input file is missing, unreadable, or has no video stream."""
    pass


class FormatError(AsciiTraceError):
    """Raised when a Document does not have the expected structure."""
    pass
