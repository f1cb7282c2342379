import pytest

from app.config import get_settings
from app.services import reply_generator


@pytest.fixture(autouse=True)
def _dashscope_env(monkeypatch):
    monkeypatch.setenv("DASHSCOPE_API_KEY", "sk-test")
    monkeypatch.setenv("DASHSCOPE_APP_ID", "app-test")
    # Settings and the generator are cached; reset so each test sees its own env.
    get_settings.cache_clear()
    monkeypatch.setattr(reply_generator, "_generator", None)
    yield
    get_settings.cache_clear()
