"""
Configuration

Module-level defaults and the ``CipherConfig`` value object that fixes the
word size (n) and key-word count (m) of a cipher.
"""

import os
import logging
from dataclasses import dataclass

from .errors import ConfigurationError

logger = logging.getLogger(__name__)

# Bits per character; the codec assumes 8-bit ASCII
ALPHABET_SIZE = 8

# Environment variable overriding the default Feistel round count
ROUNDS_ENV_VAR = 'FEISTELCORE_ROUNDS'

# Default parameters for Argon2id key-word derivation
KDF_DEFAULT_PARAMS = {
    'time_cost': 4,       # Number of iterations
    'memory_cost': 65536, # 64 MB
    'parallelism': 4,     # Number of threads
    'salt_len': 16        # Salt size in bytes
}


def _rounds_from_env(default: int = 16) -> int:
    raw = os.environ.get(ROUNDS_ENV_VAR)
    if raw is None:
        return default
    try:
        rounds = int(raw)
    except ValueError:
        rounds = 0
    if rounds < 1:
        logger.warning(f"Ignoring {ROUNDS_ENV_VAR}={raw!r}; using {default} rounds")
        return default
    return rounds


DEFAULT_ROUNDS = _rounds_from_env()


def _is_positive_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


@dataclass(frozen=True)
class CipherConfig:
    """
    Word size and key-word count of a Feistel cipher.

    Args:
        word_size: Bits per half-block word (n)
        key_word_count: Number of key words consumed by key expansion (m)
    """
    word_size: int
    key_word_count: int

    def __post_init__(self):
        if not _is_positive_int(self.word_size) or not _is_positive_int(self.key_word_count):
            raise ConfigurationError(
                f"missing initialization parameters: word_size={self.word_size!r}, "
                f"key_word_count={self.key_word_count!r}"
            )

    @property
    def max_word(self) -> int:
        return 1 << self.word_size

    @property
    def max_key(self) -> int:
        return 1 << (self.key_word_count * self.word_size)

    @property
    def block_size(self) -> int:
        """Block size in bits (two words)."""
        return 2 * self.word_size

    @property
    def key_size(self) -> int:
        """Key size in bits."""
        return self.key_word_count * self.word_size
