import pytest

from utils.config import AppConfig

ENV_VARS = [
    "SEARCH_DELAY_SECONDS",
    "PAYMENT_DELAY_SECONDS",
    "TYPING_DELAY_SECONDS",
    "ITINERARY_DELAY_SECONDS",
    "BRAND_NAME",
    "BRAND_TAGLINE",
    "SUPPORT_EMAIL",
    "SUPPORT_PHONE",
    "LOG_LEVEL",
]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch, tmp_path):
    # keep a developer's .env out of these tests
    monkeypatch.chdir(tmp_path)
    for name in ENV_VARS:
        # set first so anything load_dotenv writes is rolled back
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)


def test_defaults():
    cfg = AppConfig.from_env()
    assert cfg.search_delay == 1.5
    assert cfg.payment_delay == 2.5
    assert cfg.typing_delay == 1.0
    assert cfg.itinerary_delay == 3.0
    assert cfg.brand_name == "Suvidha Escapes"
    assert cfg.log_level == "INFO"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("SEARCH_DELAY_SECONDS", "0.2")
    monkeypatch.setenv("PAYMENT_DELAY_SECONDS", "0")
    monkeypatch.setenv("SUPPORT_EMAIL", "help@example.com")
    monkeypatch.setenv("LOG_LEVEL", "debug")
    cfg = AppConfig.from_env()
    assert cfg.search_delay == pytest.approx(0.2)
    assert cfg.payment_delay == 0.0
    assert cfg.support_email == "help@example.com"
    assert cfg.log_level == "DEBUG"


def test_dotenv_file_is_read(tmp_path):
    (tmp_path / ".env").write_text("TYPING_DELAY_SECONDS=0.25\n", encoding="utf-8")
    assert AppConfig.from_env().typing_delay == pytest.approx(0.25)


def test_non_numeric_delay(monkeypatch):
    monkeypatch.setenv("PAYMENT_DELAY_SECONDS", "soon")
    with pytest.raises(ValueError, match="PAYMENT_DELAY_SECONDS"):
        AppConfig.from_env()


def test_negative_delay(monkeypatch):
    monkeypatch.setenv("SEARCH_DELAY_SECONDS", "-1")
    with pytest.raises(ValueError, match="SEARCH_DELAY_SECONDS"):
        AppConfig.from_env()


def test_instant_has_no_delays():
    cfg = AppConfig.instant()
    assert (cfg.search_delay, cfg.payment_delay, cfg.typing_delay, cfg.itinerary_delay) == (0, 0, 0, 0)
