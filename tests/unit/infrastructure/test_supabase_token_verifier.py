"""Tests for SupabaseTokenVerifier."""

from datetime import timedelta

import jwt
import pytest

from noteswise.config import Settings
from noteswise.domain.common.value_objects import OwnerId
from noteswise.infrastructure.identity.auth.supabase_token_verifier import SupabaseTokenVerifier
from tests.conftest import TEST_JWT_SECRET, make_token


@pytest.fixture
def verifier() -> SupabaseTokenVerifier:
    settings = Settings(
        ENVIRONMENT="test", SUPABASE_URL=None, SUPABASE_JWT_SECRET=TEST_JWT_SECRET
    )
    return SupabaseTokenVerifier(settings)


class TestSupabaseTokenVerifier:
    def test_valid_token_yields_subject(self, verifier: SupabaseTokenVerifier) -> None:
        assert verifier.verify(make_token("user-1")) == OwnerId("user-1")

    def test_garbage_token(self, verifier: SupabaseTokenVerifier) -> None:
        assert verifier.verify("not.a.token") is None

    def test_expired_token(self, verifier: SupabaseTokenVerifier) -> None:
        assert verifier.verify(make_token("user-1", expires_in=timedelta(seconds=-1))) is None

    def test_wrong_audience(self, verifier: SupabaseTokenVerifier) -> None:
        assert verifier.verify(make_token("user-1", audience="service_role")) is None

    def test_token_without_expiry(self, verifier: SupabaseTokenVerifier) -> None:
        token = jwt.encode(
            {"sub": "user-1", "aud": "authenticated"}, TEST_JWT_SECRET, algorithm="HS256"
        )
        assert verifier.verify(token) is None

    def test_unsigned_token_rejected(self, verifier: SupabaseTokenVerifier) -> None:
        token = jwt.encode({"sub": "user-1", "aud": "authenticated"}, None, algorithm="none")
        assert verifier.verify(token) is None

    def test_hs256_rejected_without_secret(self) -> None:
        verifier = SupabaseTokenVerifier(
            Settings(ENVIRONMENT="test", SUPABASE_URL=None, SUPABASE_JWT_SECRET=None)
        )
        assert verifier.verify(make_token("user-1")) is None
