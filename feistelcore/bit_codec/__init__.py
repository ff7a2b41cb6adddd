"""
Bit Codec Package

This package converts ASCII text into fixed-width numeric words grouped in
Feistel blocks, and reassembles text from transformed words.
"""

from .bits import ascii_to_bits, bits_to_ascii, chop_string, dec_to_bin, ensure_n_bits
from .segmenter import (
    Block,
    bits_to_words,
    blocks_to_text,
    flatten_blocks,
    pad_words,
    pair_words,
    text_to_blocks,
)

__all__ = [
    'ascii_to_bits', 'bits_to_ascii', 'chop_string', 'dec_to_bin', 'ensure_n_bits',
    'Block', 'bits_to_words', 'blocks_to_text', 'flatten_blocks', 'pad_words',
    'pair_words', 'text_to_blocks',
]
