import pytest

from config import DEFAULT_LINK_MARKERS, DEFAULT_RAPIDAPI_HOST, load_config


def test_defaults_from_empty_environment():
    cfg = load_config({})
    assert cfg.port == 3000
    assert cfg.bot_mode == "polling"
    assert cfg.rapidapi_host == DEFAULT_RAPIDAPI_HOST
    assert cfg.link_markers == DEFAULT_LINK_MARKERS
    assert cfg.fetch_url == f"https://{DEFAULT_RAPIDAPI_HOST}/fetch"


def test_values_read_from_environment():
    cfg = load_config({
        "PORT": "8080",
        "BOT_TOKEN": "t",
        "API_ID": "42",
        "BOT_MODE": "Webhook",
        "RAPIDAPI_KEY": "k",
        "RAPIDAPI_HOST": "example.test",
        "UPLOAD_DIR": "/srv/videos",
        "FETCH_TIMEOUT": "2.5",
        "LINK_MARKERS": "a.example, b.example ,",
    })
    assert cfg.port == 8080
    assert cfg.api_id == 42
    assert cfg.bot_mode == "webhook"
    assert cfg.fetch_url == "https://example.test/fetch"
    assert cfg.upload_dir == "/srv/videos"
    assert cfg.fetch_timeout == 2.5
    assert cfg.link_markers == ("a.example", "b.example")


def test_bad_number_names_variable():
    with pytest.raises(ValueError, match="PORT"):
        load_config({"PORT": "eighty"})


def test_unknown_bot_mode_rejected():
    with pytest.raises(ValueError, match="BOT_MODE"):
        load_config({"BOT_MODE": "carrier-pigeon"})


def test_context_creates_upload_dir(tmp_path):
    from config import Config
    from context import AppContext

    ctx = AppContext(Config(upload_dir=str(tmp_path / "a" / "b")))
    ctx.ensure_upload_dir()
    ctx.ensure_upload_dir()
    assert (tmp_path / "a" / "b").is_dir()
    assert ctx.upload_path("x.mp4") == str(tmp_path / "a" / "b" / "x.mp4")
