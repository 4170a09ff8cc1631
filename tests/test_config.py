"""Tests for environment-driven settings."""

import logging

import pytest

from calcstate.config import (
    GROUP_SIZE_VAR,
    LOG_LEVEL_VAR,
    SEPARATOR_VAR,
    load_formatter_config,
    resolve_log_level,
    setup_logging,
)
from calcstate.formatter import FormatterConfig


def test_defaults():
    assert load_formatter_config(env={}) == FormatterConfig(",", 3)


def test_env_values():
    env = {SEPARATOR_VAR: ".", GROUP_SIZE_VAR: "4"}
    assert load_formatter_config(env=env) == FormatterConfig(".", 4)


def test_arguments_override_env():
    env = {SEPARATOR_VAR: ".", GROUP_SIZE_VAR: "4"}
    config = load_formatter_config(env=env, separator=" ", group_size=2)
    assert config == FormatterConfig(" ", 2)


@pytest.mark.parametrize("raw", ["zero", "0", "-3"])
def test_bad_env_group_size_falls_back(raw, caplog):
    with caplog.at_level(logging.WARNING, logger="calcstate.config"):
        config = load_formatter_config(env={GROUP_SIZE_VAR: raw})
    assert config.group_size == 3
    assert GROUP_SIZE_VAR in caplog.text


def test_bad_explicit_group_size_raises():
    with pytest.raises(ValueError):
        load_formatter_config(env={}, group_size=0)


def test_log_level():
    assert resolve_log_level(verbose=True, env={}) == logging.DEBUG
    assert resolve_log_level(env={LOG_LEVEL_VAR: "info"}) == logging.INFO
    assert resolve_log_level(env={LOG_LEVEL_VAR: "bogus"}) == logging.WARNING
    assert resolve_log_level(env={}) == logging.WARNING


def test_setup_logging_installs_one_handler():
    setup_logging(logging.INFO)
    setup_logging(logging.DEBUG)
    root = logging.getLogger("calcstate")
    assert len(root.handlers) == 1
    assert root.level == logging.DEBUG
