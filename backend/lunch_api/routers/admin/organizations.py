"""
Organization management endpoints.
"""

from lunch_api.routers.admin._base import (
    APIRouter, Depends, status, Session, PermissionContext, Resources,
    get_db, require_manage,
)
from lunch_api.routers.admin_schemas import OrganizationCreate, OrganizationUpdate
from lunch_api.repositories import RepositoryFilters
from lunch_api.services.domain import OrganizationService
from lunch_shared.utils.schemas import OrganizationOutput


router = APIRouter(tags=["admin-organizations"])

require_admin = require_manage(Resources.ORGANIZATION)


@router.get("/organizations", response_model=list[OrganizationOutput])
def list_organizations(
    search: str | None = None,
    db: Session = Depends(get_db),
    ctx: PermissionContext = Depends(require_admin),
) -> list[OrganizationOutput]:
    return OrganizationService(db).list_all(RepositoryFilters(search=search))


@router.get("/organizations/{organization_id}", response_model=OrganizationOutput)
def get_organization(
    organization_id: int,
    db: Session = Depends(get_db),
    ctx: PermissionContext = Depends(require_admin),
) -> OrganizationOutput:
    return OrganizationService(db).get_by_id(organization_id)


@router.post("/organizations", response_model=OrganizationOutput, status_code=status.HTTP_201_CREATED)
def create_organization(
    body: OrganizationCreate,
    db: Session = Depends(get_db),
    ctx: PermissionContext = Depends(require_admin),
) -> OrganizationOutput:
    return OrganizationService(db).create(body.model_dump())


@router.patch("/organizations/{organization_id}", response_model=OrganizationOutput)
def update_organization(
    organization_id: int,
    body: OrganizationUpdate,
    db: Session = Depends(get_db),
    ctx: PermissionContext = Depends(require_admin),
) -> OrganizationOutput:
    return OrganizationService(db).update(organization_id, body.model_dump(exclude_unset=True))


@router.delete("/organizations/{organization_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_organization(
    organization_id: int,
    db: Session = Depends(get_db),
    ctx: PermissionContext = Depends(require_admin),
) -> None:
    """Delete an organization. Refused while it still has users."""
    OrganizationService(db).delete(organization_id)
