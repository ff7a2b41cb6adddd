"""
Cipher Strategy Interface

A concrete cipher plugs into ``BlockCipher`` by implementing key expansion
and the block transforms. The engine only ever talks to this interface.
"""

from typing import List, Sequence

from ..bit_codec.segmenter import Block


class CipherStrategy:
    """
    Key expansion and block transform supplied by a concrete cipher.

    Implementations must guarantee, for any round keys and any block,
    ``decrypt_block(encrypt_block(block, rk), rk) == block``.
    """

    def expand_key(self, key_words: Sequence[int]) -> List[int]:
        """Derive round keys from already validated key words."""
        raise NotImplementedError("expand_key must be implemented by a concrete cipher")

    def encrypt_block(self, block: Block, round_keys: Sequence[int]) -> Block:
        raise NotImplementedError("encrypt_block must be implemented by a concrete cipher")

    def decrypt_block(self, block: Block, round_keys: Sequence[int]) -> Block:
        raise NotImplementedError("decrypt_block must be implemented by a concrete cipher")


class IdentityStrategy(CipherStrategy):
    """No-op cipher: round keys are the key words and blocks pass through."""

    def expand_key(self, key_words: Sequence[int]) -> List[int]:
        return list(key_words)

    def encrypt_block(self, block: Block, round_keys: Sequence[int]) -> Block:
        return tuple(block)

    def decrypt_block(self, block: Block, round_keys: Sequence[int]) -> Block:
        return tuple(block)
