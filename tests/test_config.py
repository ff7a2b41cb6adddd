import logging

import pytest

from feistelcore import config
from feistelcore.config import CipherConfig, ROUNDS_ENV_VAR
from feistelcore.errors import ConfigurationError


def test_cipher_config_properties():
    cfg = CipherConfig(word_size=6, key_word_count=3)
    assert cfg.max_word == 64
    assert cfg.max_key == 1 << 18
    assert cfg.block_size == 12
    assert cfg.key_size == 18


def test_cipher_config_is_frozen():
    cfg = CipherConfig(8, 1)
    with pytest.raises(AttributeError):
        cfg.word_size = 16


@pytest.mark.parametrize("n, m", [(0, 1), (1, 0), (-3, 1), (None, 1), ("8", 1), (False, 1)])
def test_cipher_config_rejects_bad_values(n, m):
    with pytest.raises(ConfigurationError):
        CipherConfig(n, m)


def test_configuration_error_is_a_value_error():
    with pytest.raises(ValueError):
        CipherConfig(0, 0)


def test_rounds_from_env(monkeypatch):
    monkeypatch.setenv(ROUNDS_ENV_VAR, "8")
    assert config._rounds_from_env() == 8

    monkeypatch.delenv(ROUNDS_ENV_VAR)
    assert config._rounds_from_env() == 16


@pytest.mark.parametrize("raw", ["abc", "0", "-4"])
def test_malformed_rounds_from_env_falls_back(monkeypatch, caplog, raw):
    monkeypatch.setenv(ROUNDS_ENV_VAR, raw)
    with caplog.at_level(logging.WARNING, logger="feistelcore.config"):
        assert config._rounds_from_env() == 16
    assert ROUNDS_ENV_VAR in caplog.text
