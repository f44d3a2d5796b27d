import pytest

from formula_editor.config import LOCALE_ENV_VAR


@pytest.fixture(autouse=True)
def default_locale(monkeypatch):
    """Run every test with the default locale regardless of the caller's environment."""
    monkeypatch.delenv(LOCALE_ENV_VAR, raising=False)
