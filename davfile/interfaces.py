import os
from abc import ABC, abstractmethod
from typing import Any, Callable, NamedTuple, Optional, Union

__all__ = [
    "AssetHost",
    "PathLike",
    "StatResult",
    "Uploader",
]

PathLike = Union[str, os.PathLike]

# A fixed public base url, or a callable turning a RemoteFile into its url
AssetHost = Union[str, Callable[[Any], str]]


class StatResult(NamedTuple):
    size: int = 0
    mtime: float = 0.0
    isdir: bool = False
    extra: Any = None

    def is_file(self) -> bool:
        return not self.isdir

    def is_dir(self) -> bool:
        return self.isdir

    @property
    def st_size(self) -> int:
        return self.size

    @property
    def st_mtime(self) -> float:
        return self.mtime


class Uploader(ABC):
    """Configuration source of the webdav storage.

    The upload layer decides where a file lives (``store_path``) and which
    server stores it; :class:`davfile.webdav_file.RemoteFile` only reads the
    attributes below.
    """

    webdav_server: Optional[str] = None
    webdav_write_server: Optional[str] = None
    webdav_username: Optional[str] = None
    webdav_password: Optional[str] = None
    asset_host: Optional[AssetHost] = None

    @abstractmethod
    def store_path(self, identifier: Optional[str] = None) -> str:
        """Return the logical path of the file named ``identifier``"""
