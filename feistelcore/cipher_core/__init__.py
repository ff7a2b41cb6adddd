"""
Cipher Core Package

This package implements the core components of the Feistel framework: the
cipher strategy interface, the generic Feistel network and the text facade.
"""

from .strategy import CipherStrategy, IdentityStrategy
from .feistel_network import FeistelNetwork
from .block_cipher import BlockCipher, encrypt_ascii, decrypt_ascii

__all__ = [
    'CipherStrategy', 'IdentityStrategy', 'FeistelNetwork',
    'BlockCipher', 'encrypt_ascii', 'decrypt_ascii',
]
