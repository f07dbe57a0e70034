from __future__ import annotations

import logging

import pytest

from envswitch.catalog import EnvLayout
from envswitch.log_utils import LOGGER_NAME


@pytest.fixture
def layout(tmp_path):
    return EnvLayout(tmp_path)


@pytest.fixture
def clean_env(monkeypatch):
    for name in (
        "ENVSWITCH_ROOT",
        "ENVSWITCH_ENVIRONMENTS",
        "ENVSWITCH_LOG_LEVEL",
        "ENVSWITCH_RUN_LOG_DIR",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture(autouse=True)
def reset_envswitch_logger():
    yield
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)
