import time
from functools import wraps
from logging import getLogger
from typing import Callable, Optional

import requests.exceptions
import urllib3.exceptions

from davfile.config import ERROR_DETAIL_SIZE

__all__ = [
    "WebdavException",
    "WebdavConfigError",
    "WebdavResponseError",
    "ContentRetrievalError",
    "CollectionCreationError",
    "ContentStorageError",
    "DeletionError",
    "UnknownError",
    "WebdavUnknownError",
    "translate_webdav_error",
    "response_detail",
    "patch_method",
    "http_should_retry",
]

_logger = getLogger(__name__)


def full_class_name(obj):
    module = obj.__class__.__module__
    if module is None or module == str.__class__.__module__:
        return obj.__class__.__name__  # Avoid reporting __builtin__
    else:
        return module + "." + obj.__class__.__name__


def full_error_message(error):
    return "%s(%r)" % (full_class_name(error), str(error))


def response_detail(response) -> str:
    """Short description of a response for error messages: reason and the
    beginning of the body"""
    reason = getattr(response, "reason", None) or ""
    body = getattr(response, "text", None) or ""
    if len(body) > ERROR_DETAIL_SIZE:
        body = body[:ERROR_DETAIL_SIZE] + "..."
    if reason and body:
        return "%s: %s" % (reason, body)
    return reason or body


def patch_method(
    func: Callable,
    max_retries: int,
    should_retry: Callable[[Exception], bool],
    before_callback: Optional[Callable] = None,
    after_callback: Optional[Callable] = None,
    retry_callback: Optional[Callable] = None,
):
    @wraps(func)
    def wrapper(*args, **kwargs):
        if before_callback is not None:
            before_callback(*args, **kwargs)

        for retries in range(1, max_retries + 1):
            try:
                result = func(*args, **kwargs)
                if after_callback is not None:
                    result = after_callback(result, *args, **kwargs)
                if retries > 1:
                    _logger.info(f"Error already fixed by retry {retries - 1} times")
                return result
            except Exception as error:
                if not should_retry(error):
                    raise
                if retry_callback is not None:
                    retry_callback(error, *args, **kwargs)
                if retries == max_retries:
                    raise
                retry_interval = min(0.1 * 2**retries, 30)
                _logger.info(
                    "unknown error encountered: %s, retry in %0.1f seconds "
                    "after %d tries"
                    % (full_error_message(error), retry_interval, retries)
                )
                time.sleep(retry_interval)

    return wrapper


class WebdavException(Exception):
    """
    Base type for all webdav errors, should NOT be constructed directly.
    When you try to do so, consider adding a new type of error.
    """


class WebdavConfigError(WebdavException, ValueError):
    """
    Error raised by wrong uploader config, e.g. no webdav server.
    """


class WebdavResponseError(WebdavException):
    """
    Base type for errors raised on an unexpected response status,
    should NOT be constructed directly.
    """

    action = "request"

    def __init__(self, url: str, status_code: int, detail: Optional[str] = None):
        message = "Can't %s: %r, status: %d" % (self.action, url, status_code)
        if detail:
            message += ", detail: %r" % detail
        super().__init__(message)
        self.url = url
        self.status_code = status_code
        self.detail = detail

    @classmethod
    def from_response(cls, response, url: Optional[str] = None):
        return cls(url or response.url, response.status_code, response_detail(response))

    def __reduce__(self):
        return (self.__class__, (self.url, self.status_code, self.detail))


class ContentRetrievalError(WebdavResponseError):
    action = "download a file"


class CollectionCreationError(WebdavResponseError):
    action = "create a new collection"


class ContentStorageError(WebdavResponseError):
    action = "put a new file"


class DeletionError(WebdavResponseError):
    action = "delete a file"


class UnknownError(Exception):
    def __init__(self, error: Exception, url: str, extra: Optional[str] = None):
        message = "Unknown error encountered: %r, error: %s" % (
            url,
            full_error_message(error),
        )
        if extra is not None:
            message += ", " + extra
        super().__init__(message)
        self.url = url
        self.extra = extra
        self.__cause__ = error

    def __reduce__(self):
        return (self.__class__, (self.__cause__, self.url, self.extra))


class WebdavUnknownError(WebdavException, UnknownError):
    pass


http_retry_exceptions = (
    requests.exceptions.ReadTimeout,
    requests.exceptions.ConnectTimeout,
    requests.exceptions.ChunkedEncodingError,
    requests.exceptions.HTTPError,
    requests.exceptions.ProxyError,
    urllib3.exceptions.IncompleteRead,
    urllib3.exceptions.ProtocolError,
    urllib3.exceptions.ReadTimeoutError,
)


def http_should_retry(error: Exception) -> bool:
    if isinstance(error, http_retry_exceptions):
        return True
    return False


def translate_webdav_error(error: Exception, url: str) -> Exception:
    """Wrap errors raised by requests with the url they happened on

    :param error: error raised while sending a request
    :param url: request url
    """
    if isinstance(error, WebdavException):
        return error
    return WebdavUnknownError(error, url)
