"""
Error Taxonomy

Exceptions raised by the Feistel framework. Every validation error is also a
``ValueError`` so callers that only catch ``ValueError`` keep working.
"""


class FeistelError(Exception):
    """Base class for all framework errors."""


class ConfigurationError(FeistelError, ValueError):
    """Bad word size or key-word count at construction."""


class KeyFormatError(FeistelError, ValueError):
    """Key words are not a sequence of exactly m elements."""


class KeyRangeError(FeistelError, ValueError):
    """A key word is not an integer in [0, 2^n)."""


class InputError(FeistelError, ValueError):
    """Missing or unsupported text input."""


class CodecError(FeistelError, ValueError):
    """A word or bit string cannot be represented by the codec."""


class CodecAlignmentError(CodecError):
    """Reassembled bit length is not a multiple of the alphabet size."""
