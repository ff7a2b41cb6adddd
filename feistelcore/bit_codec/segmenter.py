"""
Block Segmenter

This module turns text into paired n-bit words (Feistel blocks) and turns a
flat word sequence back into text.
"""

import logging
from typing import List, Sequence, Tuple

from ..config import ALPHABET_SIZE
from ..errors import CodecError
from .bits import ascii_to_bits, bits_to_ascii, chop_string, dec_to_bin, ensure_n_bits

logger = logging.getLogger(__name__)

Block = Tuple[int, int]


def bits_to_words(bits: str, word_size: int) -> List[int]:
    """
    Parse a bit string as unsigned ``word_size``-bit words.

    A short final chunk is zero-padded on the right, so no input bit is lost.
    """
    return [int(chunk.ljust(word_size, '0'), 2) for chunk in chop_string(bits, word_size)]


def pad_words(words: Sequence[int], word_size: int) -> List[int]:
    """
    Pad a word sequence so it can be paired and reassembled into whole characters.

    An odd word count gets one zero word. If the resulting bit length is still
    not a multiple of the alphabet size, zero blocks are appended until it is.

    Args:
        words: The input words (not modified)
        word_size: Bits per word

    Returns:
        A new, padded list of words
    """
    padded = list(words)
    if len(padded) % 2 != 0:
        padded.append(0)
    while (len(padded) * word_size) % ALPHABET_SIZE != 0:
        padded.extend((0, 0))
    if len(padded) != len(words):
        logger.debug(f"Padded {len(words)} words to {len(padded)}")
    return padded


def pair_words(words: Sequence[int]) -> List[Block]:
    """
    Group consecutive words into 2-word blocks, left to right.

    Raises:
        CodecError: If the word count is odd
    """
    if len(words) % 2 != 0:
        raise CodecError(f"Cannot pair an odd number of words ({len(words)})")
    return [(words[i], words[i + 1]) for i in range(0, len(words), 2)]


def flatten_blocks(blocks: Sequence[Sequence[int]]) -> List[int]:
    """Flatten blocks back into a word sequence, preserving order."""
    return [word for block in blocks for word in block]


def text_to_blocks(text: str, word_size: int) -> List[Block]:
    """
    Convert 8-bit ASCII text into a list of n-bit word pairs.

    Args:
        text: Text to convert
        word_size: Bits per word (n)

    Returns:
        Ordered blocks covering the whole text
    """
    words = bits_to_words(ascii_to_bits(text), word_size)
    return pair_words(pad_words(words, word_size))


def blocks_to_text(words: Sequence[int], word_size: int) -> str:
    """
    Convert a flat sequence of n-bit words back into text.

    Each word is normalized to exactly ``word_size`` bits before the groups
    are concatenated and read back 8 bits per character.

    Raises:
        CodecError: If a word does not fit in ``word_size`` bits
        CodecAlignmentError: If the total bit length is not a multiple of 8
    """
    bits = ''.join(ensure_n_bits(dec_to_bin(w), word_size) for w in words)
    return bits_to_ascii(bits)
