import logging
import os
import typing as T


def parse_seconds(name: str, default: int) -> int:
    """
    Read a positive number of seconds from environment variable ``name``.

    Raises:
    ValueError on non-integer or non-positive value
    """
    value = os.getenv(name)
    if not value:
        return default
    try:
        seconds = int(value)
    except ValueError:
        raise ValueError("Invalid number format: {}={!r}".format(name, value))
    if seconds <= 0:
        raise ValueError(f"'{name}' must bigger than 0, got {seconds}")
    return seconds


def set_log_level(level: T.Optional[T.Union[int, str]] = None):
    logging.basicConfig(
        level=logging.ERROR,
        format=(
            "%(asctime)s | %(levelname)-8s | "
            "%(name)s:%(funcName)s:%(lineno)d - %(message)s"
        ),
    )
    level = level or os.getenv("DAVFILE_LOG_LEVEL") or logging.INFO
    logging.getLogger("davfile").setLevel(level)


HTTP_CONNECT_TIMEOUT = parse_seconds("DAVFILE_HTTP_CONNECT_TIMEOUT", 60)
HTTP_READ_TIMEOUT = parse_seconds("DAVFILE_HTTP_READ_TIMEOUT", 10 * 60)
DEFAULT_TIMEOUT = (HTTP_CONNECT_TIMEOUT, HTTP_READ_TIMEOUT)

DEFAULT_MAX_RETRY_TIMES = int(os.getenv("DAVFILE_MAX_RETRY_TIMES") or 10)
HTTP_MAX_RETRY_TIMES = int(
    os.getenv("DAVFILE_HTTP_MAX_RETRY_TIMES") or DEFAULT_MAX_RETRY_TIMES
)

# Upper bound of response body kept in error messages
ERROR_DETAIL_SIZE = 512

HTTP_AUTH_HEADERS = ("Authorization", "Www-Authenticate", "Cookie", "Cookie2")

if os.getenv("DAVFILE_LOG_LEVEL"):
    set_log_level()
