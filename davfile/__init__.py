from davfile.errors import (
    CollectionCreationError,
    ContentRetrievalError,
    ContentStorageError,
    DeletionError,
    WebdavConfigError,
    WebdavException,
    WebdavResponseError,
    WebdavUnknownError,
)
from davfile.interfaces import StatResult, Uploader
from davfile.storage import WebdavStorage
from davfile.uploader import WebdavUploader
from davfile.version import VERSION as __version__  # noqa: F401
from davfile.webdav_file import RemoteFile, ancestor_collections

__all__ = [
    "RemoteFile",
    "WebdavStorage",
    "WebdavUploader",
    "Uploader",
    "StatResult",
    "ancestor_collections",
    "WebdavException",
    "WebdavConfigError",
    "WebdavResponseError",
    "WebdavUnknownError",
    "ContentRetrievalError",
    "CollectionCreationError",
    "ContentStorageError",
    "DeletionError",
]
