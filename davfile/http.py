from functools import partial
from logging import getLogger as get_logger
from typing import Iterable, Iterator, Optional, Tuple, Union

import requests

from davfile import config
from davfile.config import DEFAULT_TIMEOUT, HTTP_AUTH_HEADERS
from davfile.errors import http_should_retry, patch_method

__all__ = [
    "get_http_session",
]

_logger = get_logger(__name__)

_AUTH_HEADER_NAMES = frozenset(name.lower() for name in HTTP_AUTH_HEADERS)


def _hide_credentials(kwargs: dict) -> dict:
    kwargs = dict(kwargs)
    if kwargs.get("auth"):
        kwargs["auth"] = "***"
    headers = kwargs.get("headers")
    if headers:
        kwargs["headers"] = {
            key: "***" if key.lower() in _AUTH_HEADER_NAMES else value
            for key, value in headers.items()
        }
    if "data" in kwargs and isinstance(kwargs["data"], (bytes, str)):
        kwargs["data"] = "<%d bytes>" % len(kwargs["data"])
    return kwargs


def get_http_session(
    timeout: Optional[Union[int, Tuple[int, int]]] = DEFAULT_TIMEOUT,
    status_forcelist: Iterable[int] = (),
) -> requests.Session:
    """Session sending the webdav requests

    Only timeouts and protocol errors are retried, response statuses are left
    to the caller unless listed in ``status_forcelist``. MKCOL is never
    retried: a repeated MKCOL on a collection created by the first attempt
    would fail with 405.
    """
    session = requests.Session()

    def after_callback(response, *args, **kwargs):
        if response.status_code in status_forcelist:
            response.raise_for_status()
        return response

    def before_callback(method, url, **kwargs):
        _logger.debug(
            "send webdav request: %s %r, with parameters: %s",
            method,
            url,
            _hide_credentials(kwargs),
        )

    def retry_callback(error, method, url, data=None, **kwargs):
        if method.upper() == "MKCOL":
            raise error
        if data and hasattr(data, "seek"):
            data.seek(0)
        elif isinstance(data, Iterator):
            _logger.warning("Can not retry webdav request with iterator data")
            raise error

    session.request = patch_method(
        partial(session.request, timeout=timeout),
        max_retries=config.HTTP_MAX_RETRY_TIMES,
        should_retry=http_should_retry,
        before_callback=before_callback,
        after_callback=after_callback,
        retry_callback=retry_callback,
    )
    return session
