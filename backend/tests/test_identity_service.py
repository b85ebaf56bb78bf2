"""
Tests for external identity resolution and the provider callback endpoint.
"""

import time

import pytest

from lunch_api.models import User
from lunch_api.services.domain import IdentityService, UserService
from lunch_shared.security.password import verify_password
from lunch_shared.security.tokens import sign_identity_token
from lunch_shared.utils.exceptions import NotAuthenticatedError, ValidationError
from lunch_shared.utils.schemas import ExternalIdentityClaims

from conftest import TEST_PASSWORD, auth_headers_for


def _claims(uid: str = "g-100", name: str = "Grace", email: str = "grace@acme.org") -> ExternalIdentityClaims:
    return ExternalIdentityClaims(provider="google", uid=uid, name=name, email=email)


class TestIdentityToken:
    """Provider tokens are HS256 JWTs signed with the OAuth client secret."""

    def test_claims_from_valid_token(self, db_session):
        token = sign_identity_token({"sub": "g-100", "name": "Grace", "email": "grace@acme.org"})

        claims = IdentityService(db_session).claims_from_token("google", token)

        assert claims == _claims()

    def test_expired_token(self, db_session):
        token = sign_identity_token(
            {"sub": "g-100", "name": "Grace", "email": "grace@acme.org", "exp": int(time.time()) - 60}
        )
        with pytest.raises(NotAuthenticatedError) as exc_info:
            IdentityService(db_session).claims_from_token("google", token)
        assert exc_info.value.detail == "Identity token has expired"

    def test_tampered_token(self, db_session):
        token = sign_identity_token({"sub": "g-100", "name": "Grace", "email": "grace@acme.org"})
        with pytest.raises(NotAuthenticatedError):
            IdentityService(db_session).claims_from_token("google", token[:-2] + "xx")

    def test_missing_email_claim(self, db_session):
        token = sign_identity_token({"sub": "g-100", "name": "Grace"})
        with pytest.raises(NotAuthenticatedError):
            IdentityService(db_session).claims_from_token("google", token)


class TestFromExternalIdentity:

    def test_creates_user_in_organization(self, db_session, seed_organization):
        user = IdentityService(db_session).from_external_identity(_claims(), seed_organization.id)

        assert user.id is not None
        assert user.provider == "google"
        assert user.uid == "g-100"
        assert user.organization_id == seed_organization.id
        assert user.auth_token

    def test_new_user_cannot_sign_in_with_password(self, db_session, seed_organization):
        user = IdentityService(db_session).from_external_identity(_claims(), seed_organization.id)
        assert not verify_password(TEST_PASSWORD, user.password)

    def test_first_identity_user_is_admin(self, db_session, seed_organization):
        user = IdentityService(db_session).from_external_identity(_claims(), seed_organization.id)
        assert user.admin is True

    def test_idempotent(self, db_session, seed_organization):
        """The same claims twice yield the same user and a single record."""
        service = IdentityService(db_session)

        first = service.from_external_identity(_claims(), seed_organization.id)
        second = service.from_external_identity(_claims(), seed_organization.id)

        assert first.id == second.id
        assert db_session.query(User).count() == 1

    def test_matches_by_provider_uid_after_email_change(self, db_session, seed_organization):
        service = IdentityService(db_session)
        first = service.from_external_identity(_claims(), seed_organization.id)

        again = service.from_external_identity(_claims(email="grace@new.org"), seed_organization.id)

        assert again.id == first.id

    def test_matches_existing_account_by_email(self, db_session, member_user):
        user = IdentityService(db_session).from_external_identity(
            _claims(email="ALICE@acme.org", name="Alice"), member_user.organization_id
        )

        assert user.id == member_user.id
        assert user.provider is None

    def test_taken_name_is_rejected(self, db_session, member_user):
        with pytest.raises(ValidationError) as exc_info:
            IdentityService(db_session).from_external_identity(
                _claims(name="alice", email="other@acme.org"), member_user.organization_id
            )
        assert exc_info.value.fields == ["name"]

    def test_new_user_keeps_claims_as_issued(self, db_session, seed_organization):
        user = IdentityService(db_session).from_external_identity(
            _claims(name=" Ann Lee ", email=" Ann@Example.ORG"), seed_organization.id
        )

        db_session.expire_all()
        stored = db_session.get(User, user.id)
        assert stored.name == " Ann Lee "
        assert stored.email == " Ann@Example.ORG"

    def test_blank_name_claim_is_rejected(self, db_session, seed_organization):
        with pytest.raises(ValidationError) as exc_info:
            IdentityService(db_session).from_external_identity(_claims(name="   "), seed_organization.id)
        assert exc_info.value.fields == ["name"]

    def test_rejects_unknown_organization(self, db_session, seed_organization):
        with pytest.raises(ValidationError) as exc_info:
            IdentityService(db_session).from_external_identity(_claims(), 999)
        assert exc_info.value.fields == ["organization_id"]


class TestCallbackEndpoint:

    def _post(self, client, organization_id, **claims):
        payload = {"sub": "g-100", "name": "Grace", "email": "grace@acme.org", **claims}
        return client.post(
            "/api/auth/google/callback",
            json={"id_token": sign_identity_token(payload), "organization_id": organization_id},
        )

    def test_new_user_signs_in(self, client, seed_organization):
        response = self._post(client, seed_organization.id)

        assert response.status_code == 200
        data = response.json()
        assert data["provider"] == "google"
        assert data["first_entry"] is True
        assert data["auth_token"]

    def test_returning_user(self, client, seed_organization):
        first = self._post(client, seed_organization.id).json()
        second = self._post(client, seed_organization.id).json()

        assert second["id"] == first["id"]
        assert second["sign_in_count"] == 2
        assert second["first_entry"] is False

    def test_token_works_as_bearer(self, client, db_session, seed_organization):
        data = self._post(client, seed_organization.id).json()
        user = db_session.get(User, data["id"])

        response = client.get("/api/users/me", headers=auth_headers_for(user))

        assert response.status_code == 200
        assert response.json()["email"] == "grace@acme.org"

    def test_invalid_token(self, client, seed_organization):
        response = client.post(
            "/api/auth/google/callback",
            json={"id_token": "not-a-jwt", "organization_id": seed_organization.id},
        )
        assert response.status_code == 401

    def test_signed_in_user_is_counted(self, db_session, seed_organization):
        identities = IdentityService(db_session)
        user = identities.from_external_identity(_claims(), seed_organization.id)

        UserService(db_session).record_sign_in(user)

        assert user.sign_in_count == 1
