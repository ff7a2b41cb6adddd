"""
FeistelCore - Generic Feistel Network Block Cipher Framework

This library implements the reusable skeleton of a Feistel block cipher:
an engine parameterized by word size and key-word count, pluggable key
expansion and round functions, and the bit-level codec that turns 8-bit
ASCII text into fixed-size numeric blocks and back.

Key Features:
- Configurable word size (n) and key-word count (m)
- Pluggable cipher strategies (key expansion + block transform)
- Generic balanced Feistel network with injected round function
- ARX and cyclic round-key expansion helpers
- Argon2id key-word derivation from passwords
- Bit-exact text <-> block codec with explicit padding rules

"""

from .config import CipherConfig, ALPHABET_SIZE, DEFAULT_ROUNDS
from .errors import (
    FeistelError,
    ConfigurationError,
    KeyFormatError,
    KeyRangeError,
    InputError,
    CodecError,
    CodecAlignmentError,
)
from .cipher_core import (
    BlockCipher,
    CipherStrategy,
    IdentityStrategy,
    FeistelNetwork,
    encrypt_ascii,
    decrypt_ascii,
)

__version__ = '0.1.0'
__author__ = 'FeistelCore Team'

__all__ = [
    'CipherConfig', 'ALPHABET_SIZE', 'DEFAULT_ROUNDS',
    'FeistelError', 'ConfigurationError', 'KeyFormatError', 'KeyRangeError',
    'InputError', 'CodecError', 'CodecAlignmentError',
    'BlockCipher', 'CipherStrategy', 'IdentityStrategy', 'FeistelNetwork',
    'encrypt_ascii', 'decrypt_ascii',
]
