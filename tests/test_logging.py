import pytest
from pytest_mock import MockerFixture

from authparse.logging import get_logging_config, setup_logging


@pytest.mark.parametrize(
    ("debug", "rich", "cli_mode", "level", "handler"),
    [
        (False, False, False, "INFO", "console"),
        (True, False, False, "DEBUG", "console"),
        (False, True, False, "INFO", "rich"),
        (True, True, True, "DEBUG", "cli"),
    ],
)
def test_get_logging_config(settings_factory, debug, rich, cli_mode, level, handler):
    settings = settings_factory(logging={"debug": debug, "rich": rich})

    config = get_logging_config(settings, cli_mode=cli_mode)

    assert config["loggers"]["authparse"] == {
        "handlers": [handler],
        "level": level,
        "propagate": False,
    }
    assert config["handlers"]["rich"]["level"] == level


def test_setup_logging(mocker: MockerFixture, settings_factory):
    mocked_dict_config = mocker.patch("logging.config.dictConfig")
    settings = settings_factory()

    setup_logging(settings, cli_mode=True)

    mocked_dict_config.assert_called_once()
    config = mocked_dict_config.call_args.args[0]
    assert config["loggers"]["authparse"]["handlers"] == ["cli"]


@pytest.mark.parametrize(("rich", "handler"), [(False, "console"), (True, "rich")])
def test_root_handler_follows_settings(settings_factory, rich, handler):
    settings = settings_factory(logging={"debug": False, "rich": rich})

    config = get_logging_config(settings)

    assert config["root"]["handlers"] == [handler]


def test_signature_logger_level(settings_factory):
    settings = settings_factory(logging={"debug": True, "rich": False})

    config = get_logging_config(settings)

    assert config["loggers"]["authparse.signature"] == {
        "level": "DEBUG",
        "propagate": True,
    }
