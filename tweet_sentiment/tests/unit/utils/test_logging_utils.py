import logging

import pytest

from tweet_sentiment.utils import logging_utils
from tweet_sentiment.utils.logging_utils import setup_logging


@pytest.fixture(autouse=True)
def restore_root_level():
    root = logging.getLogger()
    level = root.level
    yield
    root.setLevel(level)


def test_missing_config_falls_back_to_basic_config_with_normalised_level(mocker, tmp_path):
    basic_config = mocker.patch.object(logging_utils.logging, "basicConfig")

    setup_logging(tmp_path / "missing.yaml", "debug")

    basic_config.assert_called_once_with(level="DEBUG")
    assert logging.getLogger().level == logging.DEBUG


def test_invalid_config_falls_back_to_basic_config(mocker, tmp_path):
    config_path = tmp_path / "logging.yaml"
    config_path.write_text("version: 99\n", encoding="utf-8")
    basic_config = mocker.patch.object(logging_utils.logging, "basicConfig")

    setup_logging(config_path, "warning")

    basic_config.assert_called_once_with(level="WARNING")
    assert logging.getLogger().level == logging.WARNING
