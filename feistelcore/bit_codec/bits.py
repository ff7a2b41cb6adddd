"""
Bit/Byte Codec

This module converts 8-bit ASCII text to a string of '0'/'1' characters and
back, and provides the helpers used to normalize and chop bit groups.
"""

import numpy as np
from typing import List, Sequence, TypeVar

from ..config import ALPHABET_SIZE
from ..errors import CodecError, CodecAlignmentError, InputError

T = TypeVar('T', str, Sequence)

_ZERO = ord('0')


def chop_string(seq: T, size: int) -> List[T]:
    """
    Chop a string (or any sliceable sequence) into consecutive chunks.

    The final chunk is shorter than ``size`` when ``len(seq)`` is not a
    multiple of it.

    Args:
        seq: The sequence to chop
        size: The chunk width

    Returns:
        A list of chunks covering ``seq`` in order
    """
    if size < 1:
        raise ValueError("Chunk size must be positive")
    return [seq[i:i + size] for i in range(0, len(seq), size)]


def dec_to_bin(value: int) -> str:
    """Natural binary representation of a non-negative integer."""
    if value < 0:
        raise CodecError(f"Cannot encode negative word {value}")
    return format(value, 'b')


def ensure_n_bits(bits: str, n: int) -> str:
    """
    Left-pad a bit string with zeros to exactly ``n`` bits.

    Args:
        bits: Bit string of at most ``n`` characters
        n: Target width

    Returns:
        The bit string, zero-padded on the left

    Raises:
        CodecError: If ``bits`` is already longer than ``n``
    """
    if len(bits) > n:
        raise CodecError(f"Word {bits} does not fit in {n} bits")
    return bits.rjust(n, '0')


def ascii_to_bits(text: str) -> str:
    """
    Encode text as 8 bits per character, most significant bit first.

    Raises:
        InputError: If a character does not fit in 8 bits
    """
    try:
        raw = text.encode('latin-1')
    except UnicodeEncodeError as e:
        raise InputError(f"Only {ALPHABET_SIZE}-bit characters are supported: {e}")
    bits = np.unpackbits(np.frombuffer(raw, dtype=np.uint8))
    return (bits + _ZERO).astype(np.uint8).tobytes().decode('ascii')


def bits_to_ascii(bits: str) -> str:
    """
    Decode a bit string produced by ``ascii_to_bits``.

    Raises:
        CodecAlignmentError: If the length is not a multiple of the alphabet size
    """
    if len(bits) % ALPHABET_SIZE != 0:
        raise CodecAlignmentError(
            f"Bit length {len(bits)} is not a multiple of {ALPHABET_SIZE}"
        )
    arr = np.frombuffer(bits.encode('ascii'), dtype=np.uint8) - _ZERO
    if np.any(arr > 1):
        raise CodecError("Bit string may only contain '0' and '1'")
    return np.packbits(arr).tobytes().decode('latin-1')

