import logging
import pickle

import pytest
import requests
import urllib3.exceptions

from davfile.errors import (
    CollectionCreationError,
    ContentRetrievalError,
    ContentStorageError,
    DeletionError,
    UnknownError,
    WebdavConfigError,
    WebdavException,
    WebdavResponseError,
    WebdavUnknownError,
    http_retry_exceptions,
    http_should_retry,
    patch_method,
    response_detail,
    translate_webdav_error,
)


class FakeResponse:
    url = "http://dav.test/a"
    status_code = 500
    reason = "Internal Server Error"
    text = "boom"


def test_unknown_error():
    cause = Exception("cause")
    error = UnknownError(cause, "url")
    assert "Exception(" in str(error)
    assert "cause" in str(error)
    assert "url" in str(error)
    assert error.__cause__ is cause


def test_unknown_error_pickle():
    cause = Exception("cause")
    error = WebdavUnknownError(cause, "url", "extra")
    error = pickle.loads(pickle.dumps(error))
    assert isinstance(error, WebdavException)
    assert "cause" in str(error)
    assert "extra" in str(error)
    assert str(error.__cause__) == str(cause)


@pytest.mark.parametrize(
    "error_class, action",
    [
        (ContentRetrievalError, "download a file"),
        (CollectionCreationError, "create a new collection"),
        (ContentStorageError, "put a new file"),
        (DeletionError, "delete a file"),
    ],
)
def test_response_error(error_class, action):
    error = error_class.from_response(FakeResponse())
    assert isinstance(error, WebdavResponseError)
    assert isinstance(error, WebdavException)
    assert error.url == "http://dav.test/a"
    assert error.status_code == 500
    assert error.detail == "Internal Server Error: boom"
    assert str(error) == (
        "Can't %s: 'http://dav.test/a', status: 500, "
        "detail: 'Internal Server Error: boom'" % action
    )

    error = pickle.loads(pickle.dumps(error))
    assert isinstance(error, error_class)
    assert error.status_code == 500


def test_response_error_without_detail():
    error = DeletionError("http://dav.test/a", 423)
    assert str(error) == "Can't delete a file: 'http://dav.test/a', status: 423"
    error = DeletionError.from_response(FakeResponse(), url="http://dav.test/b/")
    assert error.url == "http://dav.test/b/"


def test_response_detail(mocker):
    mocker.patch("davfile.errors.ERROR_DETAIL_SIZE", 3)

    class Response:
        reason = ""
        text = "abcdef"

    assert response_detail(Response()) == "abc..."
    Response.reason = "Locked"
    Response.text = ""
    assert response_detail(Response()) == "Locked"
    assert response_detail(object()) == ""


def test_config_error():
    error = WebdavConfigError("no server")
    assert isinstance(error, ValueError)
    assert isinstance(error, WebdavException)


def test_translate_webdav_error():
    error = DeletionError("url", 500)
    assert translate_webdav_error(error, "url") is error

    cause = requests.exceptions.ConnectionError("refused")
    error = translate_webdav_error(cause, "http://dav.test/a")
    assert isinstance(error, WebdavUnknownError)
    assert error.__cause__ is cause
    assert error.url == "http://dav.test/a"


def test_http_should_retry():
    for Error in http_retry_exceptions:
        if Error is urllib3.exceptions.ReadTimeoutError:
            assert http_should_retry(Error(None, None, None)) is True
        elif Error is urllib3.exceptions.IncompleteRead:
            assert http_should_retry(Error(0, 1)) is True
        else:
            assert http_should_retry(Error()) is True
    assert http_should_retry(requests.exceptions.ConnectionError()) is False
    assert http_should_retry(ValueError()) is False


def test_patch_method(caplog, mocker):
    mocker.patch("time.sleep")
    with caplog.at_level(logging.INFO, logger="davfile"):
        times = 0

        def test():
            nonlocal times
            if times >= 2:
                return

            times += 1
            raise ValueError("test")

        patched_test = patch_method(
            test,
            max_retries=2,
            should_retry=lambda e: True,
        )

        with pytest.raises(ValueError):
            patched_test()

        times = 1
        patched_test()
        assert "Error already fixed by retry" in caplog.text


def test_patch_method_no_retry():
    calls = []

    def test():
        calls.append(1)
        raise ValueError("test")

    patched_test = patch_method(test, max_retries=5, should_retry=lambda e: False)
    with pytest.raises(ValueError):
        patched_test()
    assert len(calls) == 1
