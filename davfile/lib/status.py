"""Response status handling of the WebDAV requests.

Every request maps its status code to one :class:`Outcome`, then checks the
outcome against the ones its :class:`StatusPolicy` accepts.
"""

from enum import Enum
from typing import FrozenSet, NamedTuple, Tuple

__all__ = [
    "Outcome",
    "StatusPolicy",
    "READ",
    "METADATA",
    "PROBE",
    "MAKE_COLLECTION",
    "STORE",
    "DELETE",
]


class Outcome(Enum):
    SUCCESS = "success"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    ERROR = "error"


class StatusPolicy(NamedTuple):
    success_codes: Tuple[int, ...]
    accepted: FrozenSet[Outcome] = frozenset([Outcome.SUCCESS])

    def classify(self, status_code: int) -> Outcome:
        if status_code in self.success_codes:
            return Outcome.SUCCESS
        if status_code == 404:
            return Outcome.NOT_FOUND
        if status_code == 409:
            return Outcome.CONFLICT
        return Outcome.ERROR

    def accepts(self, status_code: int) -> bool:
        return self.classify(status_code) in self.accepted


READ = StatusPolicy((200,))
METADATA = StatusPolicy((200,))
PROBE = StatusPolicy((200, 201, 207))
# 409: a missing ancestor on servers creating collections out of order
MAKE_COLLECTION = StatusPolicy(
    (200, 201, 207), frozenset([Outcome.SUCCESS, Outcome.CONFLICT])
)
STORE = StatusPolicy((201, 204))
DELETE = StatusPolicy((200, 204), frozenset([Outcome.SUCCESS, Outcome.NOT_FOUND]))
