import pytest

from gecko import config


@pytest.fixture(autouse=True)
def _clear_env(monkeypatch):
    for name in (
        "GECKO_SEPARATOR",
        "GECKO_BYTES_PER_LINE",
        "GECKO_LOG_LEVEL",
        "GECKO_STRICT_TERMINATORS",
    ):
        monkeypatch.delenv(name, raising=False)
    yield


def test_defaults() -> None:
    cfg = config.load_gecko_config()
    assert cfg == config.GeckoConfig()
    assert cfg.record_separator == "\n\n// ---\n\n"
    assert cfg.bytes_per_line == 8
    assert cfg.log_level == "WARNING"
    assert cfg.strict_terminators is False


def test_env_overrides(monkeypatch) -> None:
    monkeypatch.setenv("GECKO_SEPARATOR", "// ===")
    monkeypatch.setenv("GECKO_BYTES_PER_LINE", "16")
    monkeypatch.setenv("GECKO_LOG_LEVEL", " debug ")
    monkeypatch.setenv("GECKO_STRICT_TERMINATORS", "1")
    cfg = config.load_gecko_config()
    assert cfg.record_separator == "\n\n// ===\n\n"
    assert cfg.bytes_per_line == 16
    assert cfg.log_level == "DEBUG"
    assert cfg.strict_terminators is True


@pytest.mark.parametrize("raw", ["0", "false", "OFF", ""])
def test_flag_off_values(monkeypatch, raw: str) -> None:
    monkeypatch.setenv("GECKO_STRICT_TERMINATORS", raw)
    assert config.load_gecko_config().strict_terminators is False


def test_bytes_per_line_must_be_positive(monkeypatch) -> None:
    monkeypatch.setenv("GECKO_BYTES_PER_LINE", "0")
    with pytest.raises(ValueError):
        config.load_gecko_config()
