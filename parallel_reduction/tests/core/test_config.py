# SPDX-FileCopyrightText: 2024 Intel Corporation
#
# SPDX-License-Identifier: Apache-2.0

import logging

from parallel_reduction.core import config


def test_readenv_default(monkeypatch):
    monkeypatch.delenv("PARALLEL_REDUCTION_TEST_FLAG", raising=False)

    assert config._readenv("PARALLEL_REDUCTION_TEST_FLAG", int, 3) == 3
    assert config._readenv("PARALLEL_REDUCTION_TEST_FLAG", int, lambda: 5) == 5


def test_readenv_parses_value(monkeypatch):
    monkeypatch.setenv("PARALLEL_REDUCTION_TEST_FLAG", "16")

    assert config._readenv("PARALLEL_REDUCTION_TEST_FLAG", int, 3) == 16


def test_readenv_falls_back_on_parse_error(monkeypatch, caplog):
    monkeypatch.setenv("PARALLEL_REDUCTION_TEST_FLAG", "sixteen")

    with caplog.at_level(logging.ERROR):
        value = config._readenv("PARALLEL_REDUCTION_TEST_FLAG", int, 3)

    assert value == 3
    assert "PARALLEL_REDUCTION_TEST_FLAG" in caplog.text


def test_default_options_have_expected_types():
    assert isinstance(config.DEBUG, int)
    assert isinstance(config.DEFAULT_DEVICE_NAME, str)
    assert isinstance(config.DEFAULT_SUB_GROUP_SIZE, int)
    assert isinstance(config.DEFAULT_MAX_WORK_GROUP_SIZE, int)
