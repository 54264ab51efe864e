import os
from typing import Optional

from davfile.interfaces import AssetHost, Uploader
from davfile.lib.joinpath import uri_join

__all__ = [
    "WEBDAV_SERVER",
    "WEBDAV_WRITE_SERVER",
    "WEBDAV_USERNAME",
    "WEBDAV_PASSWORD",
    "WEBDAV_ASSET_HOST",
    "WebdavUploader",
]

WEBDAV_SERVER = "WEBDAV_SERVER"
WEBDAV_WRITE_SERVER = "WEBDAV_WRITE_SERVER"
WEBDAV_USERNAME = "WEBDAV_USERNAME"
WEBDAV_PASSWORD = "WEBDAV_PASSWORD"
WEBDAV_ASSET_HOST = "WEBDAV_ASSET_HOST"


class WebdavUploader(Uploader):
    """Uploader storing files under ``store_dir``

    Every argument left empty is read from its environment variable.
    """

    def __init__(
        self,
        webdav_server: Optional[str] = None,
        webdav_write_server: Optional[str] = None,
        webdav_username: Optional[str] = None,
        webdav_password: Optional[str] = None,
        asset_host: Optional[AssetHost] = None,
        store_dir: str = "uploads",
        filename: Optional[str] = None,
    ):
        self.webdav_server = webdav_server or os.getenv(WEBDAV_SERVER)
        self.webdav_write_server = webdav_write_server or os.getenv(
            WEBDAV_WRITE_SERVER
        )
        self.webdav_username = webdav_username or os.getenv(WEBDAV_USERNAME)
        self.webdav_password = webdav_password or os.getenv(WEBDAV_PASSWORD)
        self.asset_host = asset_host or os.getenv(WEBDAV_ASSET_HOST)
        self.store_dir = store_dir
        self.filename = filename

    def store_path(self, identifier: Optional[str] = None) -> str:
        name = identifier or self.filename
        if not name:
            raise ValueError("No filename to store in: %r" % self.store_dir)
        if not self.store_dir:
            return name
        return uri_join(self.store_dir, name)
