import random

import pytest

from feistelcore.cipher_core import CipherStrategy, FeistelNetwork, IdentityStrategy
from feistelcore.errors import ConfigurationError, InputError
from feistelcore.key_schedule import arx_round_keys


def mixing_round_function(half, round_key, word_size):
    return (half * 7 + round_key) ^ (half >> 1)


def test_single_round_structure():
    network = FeistelNetwork(8, lambda half, k, n: k, rounds=1)
    assert network.encrypt_block((1, 2), [4]) == (5, 2)
    assert network.decrypt_block((5, 2), [4]) == (1, 2)


@pytest.mark.parametrize("word_size", [1, 3, 8, 13, 16, 32])
def test_decrypt_inverts_encrypt(word_size):
    rng = random.Random(word_size)
    network = FeistelNetwork(word_size, mixing_round_function, rounds=12, key_schedule=arx_round_keys)
    round_keys = network.expand_key([rng.getrandbits(word_size), rng.getrandbits(word_size)])
    for _ in range(50):
        block = (rng.getrandbits(word_size), rng.getrandbits(word_size))
        encrypted = network.encrypt_block(block, round_keys)
        assert all(0 <= w < 1 << word_size for w in encrypted)
        assert network.decrypt_block(encrypted, round_keys) == block


def test_non_invertible_round_function_still_round_trips():
    network = FeistelNetwork(8, lambda half, k, n: 0xff, rounds=3)
    round_keys = network.expand_key([7])
    assert network.decrypt_block(network.encrypt_block((10, 20), round_keys), round_keys) == (10, 20)


def test_expand_key_uses_round_count():
    network = FeistelNetwork(8, mixing_round_function, rounds=5)
    assert network.expand_key([1, 2]) == [1, 2, 1, 2, 1]


def test_expand_key_masks_round_keys():
    network = FeistelNetwork(4, mixing_round_function, rounds=2,
                             key_schedule=lambda kw, rounds, n: [0x1f, 0x20])
    assert network.expand_key([0]) == [0xf, 0x0]


def test_expand_key_checks_schedule_length():
    network = FeistelNetwork(8, mixing_round_function, rounds=4,
                             key_schedule=lambda kw, rounds, n: list(kw))
    with pytest.raises(ConfigurationError):
        network.expand_key([1, 2])


@pytest.mark.parametrize("block", [(1, 2, 3), (1,), (256, 0), (0, -1)])
def test_bad_blocks_are_rejected(block):
    network = FeistelNetwork(8, mixing_round_function, rounds=2)
    with pytest.raises(InputError):
        network.encrypt_block(block, [1, 2])


@pytest.mark.parametrize("kwargs", [dict(word_size=0), dict(rounds=0), dict(word_size=1.5)])
def test_bad_construction(kwargs):
    params = dict(word_size=8, round_function=mixing_round_function, rounds=4)
    params.update(kwargs)
    with pytest.raises(ConfigurationError):
        FeistelNetwork(**params)


def test_base_strategy_is_abstract():
    strategy = CipherStrategy()
    with pytest.raises(NotImplementedError):
        strategy.expand_key([0])
    with pytest.raises(NotImplementedError):
        strategy.encrypt_block((0, 0), [])
    with pytest.raises(NotImplementedError):
        strategy.decrypt_block((0, 0), [])


def test_identity_strategy():
    strategy = IdentityStrategy()
    assert strategy.expand_key([3, 4]) == [3, 4]
    assert strategy.encrypt_block((1, 2), [3]) == (1, 2)
    assert strategy.decrypt_block((1, 2), [3]) == (1, 2)
