"""
Round-Key Expansion Helpers

Reusable key schedules for the generic Feistel engine. Each schedule takes
``(key_words, rounds, word_size)`` and returns ``rounds`` round keys, each an
n-bit word.
"""

from typing import List, Sequence

# Constants for ARX operations, taken from fractional parts of
# well-known irrationals (golden ratio, pi, e)
ARX_CONSTANTS = [
    0x9e3779b9, 0x243f6a88, 0xb7e15162, 0x3707344a,
    0xa4093822, 0x299f31d0, 0x082efa98, 0xec4e6c89,
    0x452821e6, 0x38d01377, 0xbe5466cf, 0x34e90c6c,
    0xc0ac29b7, 0xc97c50dd, 0x3f84d5b5, 0xb5470917
]


def rotate_left(value: int, shift: int, size: int = 32) -> int:
    """
    Rotate a value left by the specified number of bits.

    Args:
        value: The value to rotate
        shift: The number of bits to rotate by (taken modulo ``size``)
        size: The bit size of the value

    Returns:
        The rotated value
    """
    shift %= size
    mask = (1 << size) - 1
    return ((value << shift) | (value >> (size - shift))) & mask


def rotate_right(value: int, shift: int, size: int = 32) -> int:
    """
    Rotate a value right by the specified number of bits.

    Args:
        value: The value to rotate
        shift: The number of bits to rotate by (taken modulo ``size``)
        size: The bit size of the value

    Returns:
        The rotated value
    """
    return rotate_left(value, size - (shift % size), size)


def cyclic_round_keys(key_words: Sequence[int], rounds: int, word_size: int) -> List[int]:
    """Round i uses key word ``i mod m``."""
    mask = (1 << word_size) - 1
    return [key_words[i % len(key_words)] & mask for i in range(rounds)]


def arx_round_keys(key_words: Sequence[int], rounds: int, word_size: int) -> List[int]:
    """
    Expand key words with Addition/Rotation/XOR mixing over n-bit words.

    Every round updates the whole state, then emits one state word as the
    round key.

    Args:
        key_words: The key words (m words of n bits)
        rounds: Number of round keys to produce
        word_size: Bits per word

    Returns:
        A list of ``rounds`` round keys
    """
    mask = (1 << word_size) - 1
    state = [k & mask for k in key_words]
    size = len(state)
    round_keys = []

    for r in range(rounds):
        for i in range(size):
            # Addition
            state[i] = (state[i] + ARX_CONSTANTS[(r + i) % 16]) & mask

            # Rotation
            state[i] = rotate_left(state[i], i + r + 1, word_size)

            # XOR with the neighbouring word
            if size > 1:
                state[i] ^= state[(i + 1) % size]

        round_keys.append(state[r % size])

    return round_keys
