from unittest.mock import AsyncMock

from tweet_sentiment import main as main_module
from tweet_sentiment.core.exceptions import ConfigError, UpstreamError
from tweet_sentiment.core.pipeline import RunSummary


def test_main_returns_2_on_invalid_config(mocker):
    mocker.patch.object(main_module, "load_settings", side_effect=ConfigError("Invalid configuration"))
    run = mocker.patch.object(main_module, "run", new_callable=AsyncMock)

    assert main_module.main() == 2
    run.assert_not_called()


def test_main_returns_0_on_success(mocker, settings):
    mocker.patch.object(main_module, "load_settings", return_value=settings)
    mocker.patch.object(main_module, "setup_logging")
    mocker.patch.object(main_module, "run", new_callable=AsyncMock, return_value=RunSummary())

    assert main_module.main() == 0


def test_main_returns_1_when_run_fails(mocker, settings):
    mocker.patch.object(main_module, "load_settings", return_value=settings)
    mocker.patch.object(main_module, "setup_logging")
    mocker.patch.object(
        main_module, "run", new_callable=AsyncMock, side_effect=UpstreamError("Source API returned 503", 503)
    )

    assert main_module.main() == 1
