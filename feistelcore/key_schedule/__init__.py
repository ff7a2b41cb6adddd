"""
Key Schedule Package

This package validates, generates and derives key words, and implements
the key expansion algorithms that turn key words into round keys.
"""

from .key_words import validate_key_words, generate_key_words, generate_salt, derive_key_words
from .expansion import rotate_left, rotate_right, cyclic_round_keys, arx_round_keys

__all__ = [
    'validate_key_words', 'generate_key_words', 'generate_salt', 'derive_key_words',
    'rotate_left', 'rotate_right', 'cyclic_round_keys', 'arx_round_keys',
]
