import pytest

from davfile.lib import status
from davfile.lib.status import Outcome, StatusPolicy


def test_classify():
    policy = StatusPolicy((200, 204))
    assert policy.classify(200) == Outcome.SUCCESS
    assert policy.classify(204) == Outcome.SUCCESS
    assert policy.classify(404) == Outcome.NOT_FOUND
    assert policy.classify(409) == Outcome.CONFLICT
    assert policy.classify(201) == Outcome.ERROR
    assert policy.classify(500) == Outcome.ERROR


@pytest.mark.parametrize(
    "policy, accepted",
    [
        (status.READ, {200}),
        (status.METADATA, {200}),
        (status.PROBE, {200, 201, 207}),
        (status.MAKE_COLLECTION, {200, 201, 207, 409}),
        (status.STORE, {201, 204}),
        (status.DELETE, {200, 204, 404}),
    ],
)
def test_policies(policy, accepted):
    for status_code in (200, 201, 204, 207, 301, 400, 401, 403, 404, 405, 409, 500):
        assert policy.accepts(status_code) is (status_code in accepted)
