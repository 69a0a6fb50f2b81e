"""
Common exception classes.
"""


class InvalidParameters(Exception):
    """Arithmetic called with arguments outside its domain."""


class InvalidGroupError(InvalidParameters):
    """Modulus or subgroup order do not describe a prime-order subgroup."""


class GroupMismatchError(InvalidParameters):
    """Generators do not lie in the same prime-order subgroup."""


class ValidationError(Exception):
    """Error during validation."""


class SessionStateError(Exception):
    """Protocol step called out of order."""


class NonceReuseError(SessionStateError):
    """A commitment nonce was offered twice."""


class ExtractionError(Exception):
    """Transcripts cannot be used to extract the witness."""
