"""Domain Types — identity wrappers are transparent at runtime."""

from uuid import uuid4

from app.core.domain_types import UserId


def test_user_id_wraps_uuid():
    uid = uuid4()
    assert UserId(uid) == uid
