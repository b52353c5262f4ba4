"""Tests for identity resolution and session state."""

import uuid

import pytest
from sqlmodel import select

from judgeboard.core import AccessDeniedError, NotFoundError, ValidationError
from judgeboard.models import AdminAccount
from judgeboard.services import identity as identity_service
from judgeboard.services import roster
from judgeboard.services.identity import (
    ROLE_ADMIN,
    ROLE_JUDGE,
    ROLE_TEAM,
    SESSION_KEY,
    Identity,
    IdentitySession,
    resolve_admin,
    resolve_judge,
    resolve_team,
)


class TestResolveByName:
    def test_judge_found(self, session):
        judge = roster.create_judge(session, "Judge A")
        identity = resolve_judge(session, "Judge A")
        assert identity == Identity(role=ROLE_JUDGE, id=judge.id, name="Judge A")

    def test_team_found(self, session):
        team = roster.create_team(session, "Team X")
        assert resolve_team(session, " Team X ").id == team.id

    def test_lookup_is_exact(self, session):
        roster.create_team(session, "Team X")
        with pytest.raises(NotFoundError, match="Team not found"):
            resolve_team(session, "team x")

    def test_unknown_name(self, session):
        with pytest.raises(NotFoundError, match="Judge not found"):
            resolve_judge(session, "Nobody")

    @pytest.mark.parametrize("name", ["", "   ", None, 12])
    def test_missing_name(self, session, name):
        with pytest.raises(ValidationError, match="Name required for judge login"):
            resolve_judge(session, name)


class TestResolveAdmin:
    def test_listed_email_becomes_admin(self, session):
        identity = resolve_admin(session, email="Admin@Example.com", sub="sub-1", name="Ada")
        assert identity.role == ROLE_ADMIN
        assert identity.email == "admin@example.com"
        assert identity.name == "Ada"
        account = session.get(AdminAccount, uuid.UUID(identity.id))
        assert account.subject == "sub-1"
        assert account.role == ROLE_ADMIN

    def test_second_sign_in_reuses_account(self, session):
        first = resolve_admin(session, email="admin@example.com", sub="sub-1")
        second = resolve_admin(session, email="admin@example.com", sub="sub-2", name="Ada")
        assert first.id == second.id
        assert second.name == "Ada"
        assert session.get(AdminAccount, uuid.UUID(second.id)).subject == "sub-2"

    def test_unlisted_email_refused(self, session):
        with pytest.raises(AccessDeniedError):
            resolve_admin(session, email="someone@example.com", sub="sub-2")
        [account] = session.exec(select(AdminAccount)).all()
        assert account.role == "user"

    @pytest.mark.parametrize("email, sub", [(None, "sub"), ("admin@example.com", None), ("", "")])
    def test_missing_credentials(self, session, email, sub):
        with pytest.raises(ValidationError, match="Email and subject required"):
            resolve_admin(session, email=email, sub=sub)


class TestIdentitySession:
    def test_starts_empty(self, session):
        assert IdentitySession({}, session).identity is None

    def test_sign_in_writes_storage(self, session):
        team = roster.create_team(session, "Team X")
        storage = {}
        state = IdentitySession(storage, session)
        state.sign_in(Identity(role=ROLE_TEAM, id=team.id, name=team.name))
        assert storage[SESSION_KEY] == {"role": "team", "id": team.id, "name": "Team X", "email": None}
        assert state.identity.name == "Team X"

    def test_rehydrates_from_storage(self, session):
        judge = roster.create_judge(session, "Judge A")
        storage = {SESSION_KEY: {"role": "judge", "id": judge.id, "name": "Judge A"}}
        identity = IdentitySession(storage, session).identity
        assert identity == Identity(role=ROLE_JUDGE, id=judge.id, name="Judge A")

    def test_sign_out_clears_storage(self, session):
        judge = roster.create_judge(session, "Judge A")
        storage = {SESSION_KEY: {"role": "judge", "id": judge.id, "name": "Judge A"}, "other": 1}
        state = IdentitySession(storage, session)
        state.sign_out()
        assert state.identity is None
        assert storage == {"other": 1}

    def test_deleted_record_invalidates(self, session):
        judge = roster.create_judge(session, "Judge A")
        storage = {SESSION_KEY: {"role": "judge", "id": judge.id, "name": "Judge A"}}
        roster.delete_judge(session, judge.id)
        assert IdentitySession(storage, session).identity is None
        assert SESSION_KEY not in storage

    def test_reused_id_invalidates(self, session):
        alice = roster.create_judge(session, "Alice")
        storage = {SESSION_KEY: {"role": "judge", "id": alice.id, "name": "Alice"}}
        alice_id = alice.id
        roster.delete_judge(session, alice_id)
        bob = roster.create_judge(session, "Bob")
        assert bob.id == alice_id

        assert IdentitySession(storage, session).identity is None
        assert SESSION_KEY not in storage
        bob_storage = {SESSION_KEY: {"role": "judge", "id": bob.id, "name": "Bob"}}
        assert IdentitySession(bob_storage, session).identity.name == "Bob"

    def test_admin_removed_from_config_invalidates(self, session, monkeypatch):
        identity = resolve_admin(session, email="admin@example.com", sub="sub-1")
        storage = {SESSION_KEY: identity.to_dict()}
        assert IdentitySession(dict(storage), session).identity == identity

        monkeypatch.setattr(identity_service, "ADMIN_EMAILS", [])
        assert IdentitySession(storage, session).identity is None
        assert SESSION_KEY not in storage

    def test_deleted_admin_account_invalidates(self, session):
        identity = resolve_admin(session, email="admin@example.com", sub="sub-1")
        session.delete(session.get(AdminAccount, uuid.UUID(identity.id)))
        session.commit()
        assert IdentitySession({SESSION_KEY: identity.to_dict()}, session).identity is None

    @pytest.mark.parametrize(
        "raw",
        ["judge", {"role": "owner", "id": 1, "name": "x"}, {"role": "team", "name": "x"}],
    )
    def test_malformed_storage_is_discarded(self, session, raw):
        storage = {SESSION_KEY: raw}
        assert IdentitySession(storage, session).identity is None
        assert SESSION_KEY not in storage
