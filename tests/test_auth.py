"""
AuthSession tests against a fake Supabase client.
"""

from types import SimpleNamespace

import pytest

from learntrack.auth import AuthSession, PROFILES_TABLE
from learntrack.config import ConfigError, Settings


class FakeAuth:
    def __init__(self, session=None, sign_out_error=None, sign_in_error=None):
        self.session = session
        self.sign_out_error = sign_out_error
        self.sign_in_error = sign_in_error
        self.sign_out_calls = 0

    def get_session(self):
        return self.session

    def sign_in_with_password(self, credentials):
        if self.sign_in_error:
            raise self.sign_in_error
        user = SimpleNamespace(id="u1", email=credentials["email"])
        self.session = SimpleNamespace(user=user)

    def sign_out(self):
        self.sign_out_calls += 1
        if self.sign_out_error:
            raise self.sign_out_error
        self.session = None


class FakeQuery:
    def __init__(self, rows, error=None):
        self.rows = rows
        self.error = error
        self.filters = {}

    def select(self, columns):
        return self

    def eq(self, column, value):
        self.filters[column] = value
        return self

    def limit(self, count):
        return self

    def execute(self):
        if self.error:
            raise self.error
        rows = [
            row for row in self.rows
            if all(row.get(k) == v for k, v in self.filters.items())
        ]
        return SimpleNamespace(data=rows)


class FakeClient:
    def __init__(self, auth, tables=None, query_error=None):
        self.auth = auth
        self.tables = tables or {}
        self.query_error = query_error
        self.table_calls = 0

    def table(self, name):
        self.table_calls += 1
        return FakeQuery(self.tables.get(name, []), error=self.query_error)


def signed_in_session():
    return SimpleNamespace(user=SimpleNamespace(id="u1", email="ada@example.com"))


class TestSession:
    """Test session presence."""

    def test_signed_out(self):
        auth = AuthSession(FakeClient(FakeAuth()))
        assert auth.get_current_session() is None
        assert not auth.is_signed_in()
        assert auth.current_user() is None

    def test_signed_in(self):
        auth = AuthSession(FakeClient(FakeAuth(session=signed_in_session())))
        assert auth.is_signed_in()
        assert auth.current_user().email == "ada@example.com"

    def test_sign_in(self):
        auth = AuthSession(FakeClient(FakeAuth()))
        assert auth.sign_in("ada@example.com", "secret") is None
        assert auth.is_signed_in()

    def test_sign_in_failure_returns_message(self):
        fake = FakeAuth(sign_in_error=RuntimeError("Invalid login credentials"))
        auth = AuthSession(FakeClient(fake))
        assert auth.sign_in("ada@example.com", "wrong") == "Invalid login credentials"
        assert not auth.is_signed_in()


class TestSignOut:
    """Test sign out error forwarding."""

    def test_sign_out(self):
        fake = FakeAuth(session=signed_in_session())
        auth = AuthSession(FakeClient(fake))
        assert auth.sign_out() is None
        assert not auth.is_signed_in()

    def test_sign_out_failure_keeps_session(self, caplog):
        fake = FakeAuth(session=signed_in_session(), sign_out_error=RuntimeError("network down"))
        auth = AuthSession(FakeClient(fake))

        assert auth.sign_out() == "network down"
        assert auth.is_signed_in()
        assert fake.sign_out_calls == 1
        assert "Error signing out" in caplog.text


class TestFetchProfile:
    """Test profile lookup."""

    def test_fetch_profile(self):
        rows = [
            {"user_id": "u2", "username": "bob"},
            {"user_id": "u1", "username": "ada", "learning_goals": ["agents"]},
        ]
        auth = AuthSession(FakeClient(FakeAuth(), tables={PROFILES_TABLE: rows}))
        profile = auth.fetch_profile("u1")
        assert profile.username == "ada"
        assert profile.learning_goals == ["agents"]

    def test_fetch_missing_profile(self):
        auth = AuthSession(FakeClient(FakeAuth()))
        assert auth.fetch_profile("u1") is None

    def test_missing_profile_queried_once(self):
        client = FakeClient(FakeAuth())
        auth = AuthSession(client)
        assert auth.fetch_profile("u1") is None
        assert auth.fetch_profile("u1") is None
        assert client.table_calls == 1

    def test_found_profile_queried_once(self):
        client = FakeClient(FakeAuth(), tables={PROFILES_TABLE: [{"user_id": "u1", "username": "ada"}]})
        auth = AuthSession(client)
        assert auth.fetch_profile("u1").username == "ada"
        assert auth.fetch_profile("u1").username == "ada"
        assert client.table_calls == 1

    def test_provider_error_returns_none(self, caplog):
        client = FakeClient(FakeAuth(), query_error=RuntimeError("relation does not exist"))
        auth = AuthSession(client)

        assert auth.fetch_profile("u1") is None
        assert "Error loading profile" in caplog.text
        assert "relation does not exist" in caplog.text

    def test_provider_error_not_cached(self):
        client = FakeClient(FakeAuth(), query_error=RuntimeError("timeout"))
        auth = AuthSession(client)
        assert auth.fetch_profile("u1") is None

        client.query_error = None
        client.tables[PROFILES_TABLE] = [{"user_id": "u1", "username": "ada"}]
        assert auth.fetch_profile("u1").username == "ada"
        assert client.table_calls == 2

    def test_sign_out_clears_cache(self):
        client = FakeClient(FakeAuth(session=signed_in_session()))
        auth = AuthSession(client)
        assert auth.fetch_profile("u1") is None

        auth.sign_out()
        assert auth.fetch_profile("u1") is None
        assert client.table_calls == 2


class TestFromSettings:
    """Test client construction from settings."""

    def test_unconfigured_raises(self):
        with pytest.raises(ConfigError):
            AuthSession.from_settings(Settings())
