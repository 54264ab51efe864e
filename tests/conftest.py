import pytest

WEBDAV_ENVIRONS = (
    "WEBDAV_SERVER",
    "WEBDAV_WRITE_SERVER",
    "WEBDAV_USERNAME",
    "WEBDAV_PASSWORD",
    "WEBDAV_ASSET_HOST",
)


@pytest.fixture(autouse=True)
def clean_webdav_environ(monkeypatch):
    for name in WEBDAV_ENVIRONS:
        monkeypatch.delenv(name, raising=False)
