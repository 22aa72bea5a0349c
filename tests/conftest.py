from __future__ import annotations

from typing import List, Optional

import pytest
from pydantic import BaseModel

from hal_resource import HalDocument, HalLink, HalLinks


# -----------------------------------------------------------------------------
# Typed resources used across the tests
# -----------------------------------------------------------------------------
class RoleResource(HalDocument):
    name: str


class EmbeddedRoles(BaseModel):
    roles: List[RoleResource]


class UserLinks(HalLinks):
    profile: Optional[HalLink] = None


class UserResource(HalDocument[EmbeddedRoles, UserLinks]):
    username: str


class EmbeddedUsers(BaseModel):
    users: List[UserResource]


# -----------------------------------------------------------------------------
# Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def user_doc():
    return {
        "username": "admin",
        "_embedded": {
            "roles": [
                {
                    "name": "administrator",
                    "_links": {"self": {"href": "http://localhost/roles/administrator"}},
                }
            ]
        },
        "_links": {
            "self": {"href": "http://localhost/users/admin"},
            "profile": {"href": "http://localhost/users/admin/profile"},
        },
    }


@pytest.fixture
def paged_doc():
    return {
        "_embedded": {
            "users": [
                {"username": "admin", "_links": {"self": {"href": "http://localhost/users/admin"}}}
            ]
        },
        "page": {"number": 1, "size": 10, "totalPages": 2, "totalElements": 20},
        "_links": {
            "self": {"href": "http://localhost/users?p=3"},
            "first": {"href": "http://localhost/users?p=1"},
            "next": {"href": "http://localhost/users?p=4"},
            "prev": {"href": "http://localhost/users?p=2"},
            "last": {"href": "http://localhost/users?p=5"},
        },
    }
