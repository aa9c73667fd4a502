from dynaconf import Dynaconf, LazySettings

from authparse.constants import DEFAULT_CLOCK_SKEW

type Settings = LazySettings

DEFAULT_SETTINGS = {
    "LOGGING": {
        "debug": False,
        "rich": False,
    },
    "SIGNATURE": {
        "parser": "http-signature",
        "options": {
            "clock_skew": DEFAULT_CLOCK_SKEW,
            "headers": [],
            "strict": False,
        },
    },
}

_settings = None


def get_settings() -> Settings:
    global _settings
    if not _settings:
        _settings = Dynaconf(
            envvar_prefix="AUTHPARSE",
            settings_files=["settings.yaml", ".secrets.yaml"],
            merge_enabled=True,
        )
        _settings.configure(**DEFAULT_SETTINGS)
    return _settings
