import pytest

from gcdist.config.settings import get_logging_config, get_settings
from gcdist.core.env import load_dotenv_if_present

_ENV_VARS = (
    "GCDIST_CONFIG_PATH",
    "GCDIST_LOG_LEVEL",
    "GCDIST_TRACE",
    "GCDIST_ENV_FILE",
)


def _clear_caches() -> None:
    for fn in (get_settings, get_logging_config, load_dotenv_if_present):
        fn.cache_clear()


@pytest.fixture(autouse=True)
def isolated_settings(monkeypatch, tmp_path):
    # Keep a developer's real `.env` / shell exports out of the tests.
    # setenv first so values loaded from a `.env` during a test are undone at teardown.
    for name in _ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    # An empty working directory, so `.env` discovery sees only what a test writes.
    monkeypatch.chdir(tmp_path)
    _clear_caches()
    yield
    _clear_caches()
