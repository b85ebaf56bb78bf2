"""
External identity provider callback - /api/auth/{provider}/callback.

The provider handshake happens elsewhere; this endpoint receives the signed
identity token it produced and signs the matching local user in.
"""

from fastapi import APIRouter, Depends, Path
from sqlalchemy.orm import Session

from lunch_api.services.domain import IdentityService, UserService
from lunch_shared.infrastructure.db import get_db
from lunch_shared.utils.schemas import ExternalIdentityCallbackRequest, SessionOutput


router = APIRouter(prefix="/api/auth", tags=["auth"])


@router.post("/{provider}/callback", response_model=SessionOutput)
def identity_callback(
    body: ExternalIdentityCallbackRequest,
    provider: str = Path(pattern=r"^[a-z0-9_\-]{1,50}$"),
    db: Session = Depends(get_db),
) -> SessionOutput:
    """
    Find or create the user behind an identity token and sign them in.

    New users join the given organization.
    """
    identities = IdentityService(db)
    claims = identities.claims_from_token(provider, body.id_token)
    user = identities.from_external_identity(claims, body.organization_id)
    user = UserService(db).record_sign_in(user)
    return SessionOutput.model_validate(user)
