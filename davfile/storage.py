from logging import getLogger as get_logger
from typing import Optional

import requests

from davfile.interfaces import Uploader
from davfile.webdav_file import Content, RemoteFile

__all__ = [
    "WebdavStorage",
]

_logger = get_logger(__name__)


class WebdavStorage:
    """Storage backend of an upload layer, keeping files on WebDAV"""

    def __init__(self, uploader: Uploader, session: Optional[requests.Session] = None):
        self.uploader = uploader
        self._session = session

    def store(self, file: Content) -> RemoteFile:
        """Store the file in WebDAV

        :param file: file object to read from, or its content
        :returns: the stored file
        :raises: CollectionCreationError, ContentStorageError
        """
        stored = RemoteFile(self.uploader, self.uploader.store_path(), self._session)
        content = file.read() if hasattr(file, "read") else file
        stored.write(content)
        _logger.debug("stored file: %r", stored)
        return stored

    def retrieve(self, identifier: str) -> RemoteFile:
        """Retrieve the file from WebDAV, no request is sent

        :param identifier: the filename of the file
        """
        return RemoteFile(
            self.uploader, self.uploader.store_path(identifier), self._session
        )
