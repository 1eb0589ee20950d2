import pytest

from storefront.db.model import Role
from storefront.db.session import session_scope
from storefront.repository import role_repo


def test_session_scope_leaves_commit_to_caller(session_factory):
    with session_scope(session_factory) as db:
        db.add(Role(role_id="draft", role_name="Never committed"))
        db.flush()

    with session_factory() as db:
        assert role_repo.get_by_role_id(db, "draft") is None


def test_session_scope_keeps_explicit_commits(session_factory):
    with session_scope(session_factory) as db:
        role_repo.create_role(db, "admin", "Administrator")

    with session_factory() as db:
        assert role_repo.get_by_role_id(db, "admin") is not None


def test_session_scope_rolls_back_and_reraises(session_factory):
    with pytest.raises(RuntimeError):
        with session_scope(session_factory) as db:
            db.add(Role(role_id="oops", role_name="Oops"))
            db.flush()
            raise RuntimeError("boom")

    with session_factory() as db:
        assert role_repo.get_by_role_id(db, "oops") is None
