"""
Key Words

This module validates the key words supplied to a cipher and provides ways
to generate them at random or derive them from a password with Argon2id.
"""

import math
import numbers
import secrets
from collections import abc
from typing import List, Optional, Sequence, Union

import argon2
from argon2.low_level import Type

from ..config import CipherConfig, KDF_DEFAULT_PARAMS
from ..errors import KeyFormatError, KeyRangeError


def validate_key_words(key_words: Sequence[int], config: CipherConfig) -> None:
    """
    Check that ``key_words`` holds exactly m integers in [0, 2^n).

    Args:
        key_words: The key words to check
        config: Cipher configuration providing n and m

    Raises:
        KeyFormatError: If the input is not a sequence of exactly m elements
        KeyRangeError: If an element is not an integer in range
    """
    if isinstance(key_words, (str, bytes)) or not isinstance(key_words, abc.Sequence):
        raise KeyFormatError(f"bad key words: expected a sequence, got {type(key_words).__name__}")
    if len(key_words) != config.key_word_count:
        raise KeyFormatError(
            f"bad key words: expected {config.key_word_count}, got {len(key_words)}"
        )
    for key in key_words:
        if isinstance(key, bool) or not isinstance(key, numbers.Integral):
            raise KeyRangeError(f"bad key word {key!r}: not an integer")
        if not 0 <= key < config.max_word:
            raise KeyRangeError(f"bad key word {key}: must be in [0, {config.max_word})")


def generate_key_words(config: CipherConfig) -> List[int]:
    """
    Generate m cryptographically random key words.

    Args:
        config: Cipher configuration providing n and m

    Returns:
        A list of m integers in [0, 2^n)
    """
    return [secrets.randbelow(config.max_word) for _ in range(config.key_word_count)]


def generate_salt(length: int = KDF_DEFAULT_PARAMS['salt_len']) -> bytes:
    """Generate a cryptographically secure random salt."""
    return secrets.token_bytes(length)


def derive_key_words(password: Union[str, bytes],
                     salt: bytes,
                     config: CipherConfig,
                     time_cost: Optional[int] = None,
                     memory_cost: Optional[int] = None,
                     parallelism: Optional[int] = None) -> List[int]:
    """
    Derive m key words from a password using Argon2id.

    The raw hash is read as a big-endian integer, trimmed to m*n bits and
    split into n-bit words, most significant word first.

    Args:
        password: Password to derive the key words from
        salt: Salt value (at least 8 bytes)
        config: Cipher configuration providing n and m
        time_cost: Number of iterations
        memory_cost: Memory usage in KiB
        parallelism: Degree of parallelism

    Returns:
        A list of m integers in [0, 2^n)
    """
    if isinstance(password, str):
        password = password.encode('utf-8')

    hash_len = max(4, math.ceil(config.key_size / 8))
    raw = argon2.low_level.hash_secret_raw(
        secret=password,
        salt=salt,
        time_cost=time_cost or KDF_DEFAULT_PARAMS['time_cost'],
        memory_cost=memory_cost or KDF_DEFAULT_PARAMS['memory_cost'],
        parallelism=parallelism or KDF_DEFAULT_PARAMS['parallelism'],
        hash_len=hash_len,
        type=Type.ID  # Argon2id variant
    )

    material = int.from_bytes(raw, byteorder='big') >> (hash_len * 8 - config.key_size)
    mask = config.max_word - 1
    n = config.word_size
    return [(material >> (n * i)) & mask for i in reversed(range(config.key_word_count))]
