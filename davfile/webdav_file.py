import io
from logging import getLogger as get_logger
from typing import IO, List, Optional, Tuple, Type, Union

import requests
from dateutil import parser as date_parser
from requests.structures import CaseInsensitiveDict

from davfile.errors import (
    CollectionCreationError,
    ContentRetrievalError,
    ContentStorageError,
    DeletionError,
    WebdavConfigError,
    WebdavResponseError,
    translate_webdav_error,
)
from davfile.http import get_http_session
from davfile.interfaces import PathLike, StatResult, Uploader
from davfile.lib import status
from davfile.lib.compat import fspath
from davfile.lib.joinpath import join_url
from davfile.lib.status import Outcome, StatusPolicy

__all__ = [
    "RemoteFile",
    "ancestor_collections",
]

_logger = get_logger(__name__)

Content = Union[bytes, str, IO[bytes]]


def ancestor_collections(path: str) -> List[str]:
    """Collections containing path, shallowest first

    e.g. ``a/b/c/t.txt`` gives ``['/a', '/a/b', '/a/b/c']``
    """
    dirs: List[str] = []
    for name in [part for part in path.split("/") if part][:-1]:
        previous = dirs[-1] if dirs else ""
        dirs.append(f"{previous}/{name}")
    return dirs


class RemoteFile:
    """A file stored on a WebDAV server

    Reads (GET / HEAD / PROPFIND) go to ``uploader.webdav_server``, writes
    (PUT / DELETE / MKCOL) to ``uploader.webdav_write_server`` when it is set.
    Nothing about the remote file is cached, each call is a new request.
    """

    def __init__(
        self,
        uploader: Uploader,
        path: PathLike,
        session: Optional[requests.Session] = None,
    ):
        self.uploader = uploader
        self.path = fspath(path).lstrip("/")

        server = uploader.webdav_server
        if not server:
            raise WebdavConfigError("No webdav server configured for: %r" % self.path)
        self.server = server.rstrip("/")  # Like 'https://www.WebDAV.com/dav'
        self.write_server = (uploader.webdav_write_server or "").rstrip("/") or None

        self.auth: Optional[Tuple[str, str]] = None
        if uploader.webdav_username:
            self.auth = (uploader.webdav_username, uploader.webdav_password or "")
        self._session = session

    def __repr__(self) -> str:
        return "%s(%r)" % (self.__class__.__name__, self.read_url)

    def __eq__(self, other) -> bool:
        if not isinstance(other, RemoteFile):
            return NotImplemented
        return (self.server, self.write_server, self.path) == (
            other.server,
            other.write_server,
            other.path,
        )

    def __hash__(self) -> int:
        return hash((self.server, self.write_server, self.path))

    @property
    def filename(self) -> str:
        return self.path.rstrip("/").rsplit("/", 1)[-1]

    @property
    def read_url(self) -> str:
        return join_url(self.server, self.path)

    @property
    def write_url(self) -> str:
        return join_url(self.write_server or self.server, self.path)

    def _get_session(self) -> requests.Session:
        if self._session is not None:
            return self._session
        return get_http_session()

    def _request(
        self, session: requests.Session, method: str, url: str, **kwargs
    ) -> requests.Response:
        try:
            return session.request(method, url, auth=self.auth, **kwargs)
        except Exception as error:
            raise translate_webdav_error(error, url)

    def _check(
        self,
        response: requests.Response,
        policy: StatusPolicy,
        error_class: Type[WebdavResponseError],
        url: str,
    ) -> requests.Response:
        if not policy.accepts(response.status_code):
            raise error_class.from_response(response, url)
        return response

    def read(self) -> bytes:
        """Download the whole content of the file

        :returns: File content
        :raises: ContentRetrievalError
        """
        url = self.read_url
        response = self._request(self._get_session(), "GET", url)
        self._check(response, status.READ, ContentRetrievalError, url)
        return response.content

    def headers(self) -> CaseInsensitiveDict:
        """Response headers of a HEAD request on the file

        :raises: ContentRetrievalError
        """
        url = self.read_url
        response = self._request(self._get_session(), "HEAD", url)
        self._check(response, status.METADATA, ContentRetrievalError, url)
        return response.headers

    def exists(self) -> bool:
        """Test if the file exists, ``404`` means it does not

        :raises: ContentRetrievalError on any status other than 200 and 404
        """
        url = self.read_url
        response = self._request(self._get_session(), "HEAD", url)
        if status.METADATA.classify(response.status_code) == Outcome.NOT_FOUND:
            return False
        self._check(response, status.METADATA, ContentRetrievalError, url)
        return True

    def content_type(self) -> Optional[str]:
        content_type = self.headers().get("Content-Type")
        if not content_type:
            return None
        return content_type.split(";", 1)[0].strip()

    def length(self) -> int:
        # Size of what is actually served, Content-Length is not trusted
        return len(self.read())

    content_length = length
    file_length = length
    size = length

    def getmtime(self) -> float:
        """
        Get last-modified time of the file (in Unix timestamp format).

        :returns: last-modified time, 0.0 if the server does not tell
        """
        return self._parse_mtime(self.headers())

    def _parse_mtime(self, headers: CaseInsensitiveDict) -> float:
        last_modified = headers.get("Last-Modified")
        if not last_modified:
            return 0.0
        try:
            return date_parser.parse(last_modified).timestamp()
        except (ValueError, OverflowError):
            _logger.warning(
                "Can not parse Last-Modified of %r: %r", self.read_url, last_modified
            )
            return 0.0

    def stat(self) -> StatResult:
        headers = self.headers()
        return StatResult(
            size=self.length(),
            mtime=self._parse_mtime(headers),
            isdir=False,
            extra=headers,
        )

    def _find_collections_to_create(self, session: requests.Session) -> List[str]:
        missing = []
        for collection in ancestor_collections(self.path):
            response = self._request(
                session,
                "PROPFIND",
                join_url(self.server, collection),
                headers={"Depth": "0"},
            )
            if not status.PROBE.accepts(response.status_code):
                missing.append(collection)
        return missing

    def _make_collections(self, session: requests.Session) -> None:
        # All probes are sent before the first MKCOL
        collections = self._find_collections_to_create(session)
        write_server = self.write_server or self.server
        for collection in collections:
            url = join_url(write_server, collection)
            response = self._request(session, "MKCOL", url)
            self._check(response, status.MAKE_COLLECTION, CollectionCreationError, url)
            _logger.info(
                "create collection: %r, status: %d", url, response.status_code
            )

    def write(self, content: Content) -> requests.Response:
        """Upload content to the file, creating missing collections first

        :param content: bytes, str (sent as utf-8) or binary file object
        :raises: CollectionCreationError, ContentStorageError
        """
        if isinstance(content, str):
            content = content.encode("utf-8")
        session = self._get_session()
        self._make_collections(session)

        url = self.write_url
        response = self._request(session, "PUT", url, data=content)
        return self._check(response, status.STORE, ContentStorageError, url)

    def delete(self, collection: bool = False) -> requests.Response:
        """Delete the file, an already missing file is not an error

        :param collection: delete the path as a collection (trailing slash)
        :raises: DeletionError
        """
        url = self.write_url
        if collection and not url.endswith("/"):
            url += "/"
        response = self._request(self._get_session(), "DELETE", url)
        return self._check(response, status.DELETE, DeletionError, url)

    def delete_dir(self) -> requests.Response:
        """Delete the path as an (empty) collection"""
        return self.delete(collection=True)

    def url(self) -> str:
        """Public url of the file, through the uploader's asset host if any"""
        asset_host = getattr(self.uploader, "asset_host", None)
        if asset_host:
            if callable(asset_host):
                return asset_host(self)
            return join_url(asset_host, self.path)
        return self.read_url

    def load(self) -> io.BytesIO:
        """Read all content of the file into memory

        :returns: Binary stream
        """
        return io.BytesIO(self.read())
