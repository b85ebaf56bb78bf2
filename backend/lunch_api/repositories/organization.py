"""
Organization Repository.
"""

from sqlalchemy import Select, select
from sqlalchemy.orm import Session

from lunch_api.models import Organization
from .base import BaseRepository


class OrganizationRepository(BaseRepository[Organization]):

    @property
    def model(self) -> type[Organization]:
        return Organization

    def _base_query(self) -> Select:
        return select(Organization).order_by(Organization.id)

    def find_by_name(self, name: str) -> Organization | None:
        return self._db.scalar(select(Organization).where(Organization.name == name))


def get_organization_repository(db: Session) -> OrganizationRepository:
    return OrganizationRepository(db)
