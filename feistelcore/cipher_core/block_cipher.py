"""
Block Cipher Implementation

This module provides ``BlockCipher``, the facade that turns ASCII text into
Feistel blocks, runs them through a pluggable cipher strategy and turns the
result back into text.
"""

import logging
from typing import List, Optional, Sequence

from ..bit_codec.segmenter import Block, blocks_to_text, flatten_blocks, text_to_blocks
from ..config import ALPHABET_SIZE, CipherConfig
from ..errors import ConfigurationError, InputError
from ..key_schedule.key_words import validate_key_words
from .strategy import CipherStrategy

logger = logging.getLogger(__name__)


class BlockCipher:
    """
    Feistel block encryption helper over 8-bit ASCII text.

    Key expansion and the block transforms come from ``strategy``. Subclasses
    may instead override ``_expand_key``, ``encrypt_block`` and
    ``decrypt_block`` directly.
    """

    ALPHABET_SIZE = ALPHABET_SIZE

    def __init__(self, n: int, m: int, strategy: Optional[CipherStrategy] = None):
        """
        Initialize the block cipher.

        Args:
            n: Word size in bits
            m: Number of key words
            strategy: Concrete key expansion and block transform
        """
        self.config = CipherConfig(n, m)
        if getattr(strategy, "word_size", n) != n:
            raise ConfigurationError(
                f"strategy word size {strategy.word_size} does not match cipher word size {n}"
            )
        self.strategy = strategy if strategy is not None else CipherStrategy()
        logger.info(
            f"creating block cipher with block size: {self.config.block_size} "
            f"key size: {self.config.key_size}"
        )

    @property
    def n(self) -> int:
        return self.config.word_size

    @property
    def m(self) -> int:
        return self.config.key_word_count

    @property
    def MAX_KEY(self) -> int:
        return self.config.max_key

    @property
    def MAX_WORD(self) -> int:
        return self.config.max_word

    def check_key_words(self, key_words: Sequence[int]) -> None:
        validate_key_words(key_words, self.config)

    def expand_key(self, key_words: Sequence[int]) -> List[int]:
        """
        Validate the key words and derive the round keys.

        Args:
            key_words: m key words, each in [0, 2^n)

        Returns:
            The round keys used for every block of one call
        """
        self.check_key_words(key_words)
        return self._expand_key(key_words)

    def _expand_key(self, key_words: Sequence[int]) -> List[int]:
        return self.strategy.expand_key(key_words)

    def encrypt_block(self, block: Block, round_keys: Sequence[int]) -> Block:
        return self.strategy.encrypt_block(block, round_keys)

    def decrypt_block(self, block: Block, round_keys: Sequence[int]) -> Block:
        return self.strategy.decrypt_block(block, round_keys)

    def text_to_blocks(self, text: str) -> List[Block]:
        """Convert text to word sized integer blocks."""
        return text_to_blocks(text, self.n)

    def blocks_to_text(self, words: Sequence[int]) -> str:
        """Convert a flat list of word integers into text."""
        return blocks_to_text(words, self.n)

    def _transform(self, text: str, key_words: Sequence[int], encrypt: bool) -> str:
        if text is None:
            raise InputError("bad input: text is required")
        if not isinstance(text, str):
            raise InputError(f"bad input: expected str, got {type(text).__name__}")

        # prepare the round keys before touching the text
        round_keys = self.expand_key(key_words)
        blocks = self.text_to_blocks(text)

        transform = self.encrypt_block if encrypt else self.decrypt_block
        out_blocks = [transform(block, round_keys) for block in blocks]
        logger.debug(f"{'encrypted' if encrypt else 'decrypted'} {len(blocks)} blocks")

        return self.blocks_to_text(flatten_blocks(out_blocks))

    def encrypt_ascii(self, text: str, key_words: Sequence[int]) -> str:
        """
        Encrypt 8-bit ASCII text.

        Args:
            text: Text to encrypt; the empty string is valid
            key_words: m key words, each in [0, 2^n)

        Returns:
            The ciphertext as 8-bit characters
        """
        return self._transform(text, key_words, encrypt=True)

    def decrypt_ascii(self, text: str, key_words: Sequence[int], strip_padding: bool = True) -> str:
        """
        Decrypt text produced by ``encrypt_ascii``.

        Args:
            text: Ciphertext to decrypt
            key_words: The key words used for encryption
            strip_padding: Remove the trailing NUL characters added as padding.
                Any NUL characters the plaintext itself ends with are removed
                too; pass False for such text and trim the padding yourself.

        Returns:
            The plaintext
        """
        plaintext = self._transform(text, key_words, encrypt=False)
        if strip_padding:
            plaintext = plaintext.rstrip('\x00')
        return plaintext


def encrypt_ascii(text: str, key_words: Sequence[int], n: int, m: int,
                  strategy: CipherStrategy) -> str:
    """
    Convenience function to encrypt text with a one-off cipher.

    Args:
        text: Text to encrypt
        key_words: m key words
        n: Word size in bits
        m: Number of key words
        strategy: Concrete key expansion and block transform

    Returns:
        The ciphertext
    """
    return BlockCipher(n, m, strategy).encrypt_ascii(text, key_words)


def decrypt_ascii(text: str, key_words: Sequence[int], n: int, m: int,
                  strategy: CipherStrategy) -> str:
    """
    Convenience function to decrypt text with a one-off cipher.

    Args:
        text: Ciphertext to decrypt
        key_words: m key words
        n: Word size in bits
        m: Number of key words
        strategy: Concrete key expansion and block transform

    Returns:
        The plaintext
    """
    return BlockCipher(n, m, strategy).decrypt_ascii(text, key_words)
