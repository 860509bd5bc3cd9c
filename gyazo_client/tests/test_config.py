import pytest

from gyazo_client.client import GyazoClient
from gyazo_client.config import (
    DEFAULT_BASE_URL,
    DEFAULT_UPLOAD_URL,
    GyazoClientOptions,
    validate_base_url,
)


def test_defaults():
    opts = GyazoClientOptions(access_token="t")

    assert opts.base_url == DEFAULT_BASE_URL == "https://api.gyazo.com"
    assert opts.upload_url == DEFAULT_UPLOAD_URL == "https://upload.gyazo.com"
    assert opts.timeout is None


def test_repr_hides_token():
    assert "s3cret" not in repr(GyazoClientOptions(access_token="s3cret"))


def test_from_env_reads_values():
    opts = GyazoClientOptions.from_env(
        {
            "GYAZO_ACCESS_TOKEN": " tok ",
            "GYAZO_BASE_URL": "http://localhost:9000",
            "GYAZO_UPLOAD_URL": "",
            "GYAZO_TIMEOUT": "2.5",
        }
    )

    assert opts.access_token == "tok"
    assert opts.base_url == "http://localhost:9000"
    assert opts.upload_url == DEFAULT_UPLOAD_URL
    assert opts.timeout == 2.5


def test_from_env_uses_process_environment(monkeypatch):
    monkeypatch.setenv("GYAZO_ACCESS_TOKEN", "from-env")
    monkeypatch.delenv("GYAZO_TIMEOUT", raising=False)

    opts = GyazoClientOptions.from_env()

    assert opts.access_token == "from-env"
    assert opts.timeout is None


@pytest.mark.parametrize("url", ["not a url", "ftp://example.com", "https://", ""])
def test_invalid_base_urls_are_rejected(url):
    with pytest.raises(ValueError):
        validate_base_url("base_url", url)

    with pytest.raises(ValueError):
        GyazoClient.from_token("t", upload_url=url)


def test_validate_base_url_normalizes_trailing_slash():
    assert validate_base_url("base_url", "https://api.gyazo.com") == "https://api.gyazo.com/"
    assert validate_base_url("base_url", "http://h/p/") == "http://h/p/"


def test_empty_token_is_rejected():
    with pytest.raises(ValueError):
        GyazoClient(GyazoClientOptions(access_token=""))


def test_options_are_immutable():
    client = GyazoClient.from_token("t", timeout=3)

    with pytest.raises(Exception):
        client.options.access_token = "other"
    assert client.options.timeout == 3


@pytest.mark.parametrize("raw", ["abc", "0", "-1", "nan", "inf", "  "])
def test_from_env_falls_back_on_unusable_timeout(raw):
    opts = GyazoClientOptions.from_env({"GYAZO_ACCESS_TOKEN": "t", "GYAZO_TIMEOUT": raw})

    assert opts.timeout is None
