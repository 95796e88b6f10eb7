"""Persistence layer for roles."""

from __future__ import annotations

from sqlalchemy.orm import Session

from account_admin.domain.entities import Role
from account_admin.infrastructure.models import RoleModel


class RoleRepository:
    """Look up roles and create them on first use."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get_by_alias(self, alias: str) -> Role | None:
        model = (
            self.session.query(RoleModel).filter(RoleModel.alias.ilike(alias)).first()
        )
        return self._to_entity(model) if model else None

    def get_or_create(self, alias: str, name: str | None = None) -> Role:
        role = self.get_by_alias(alias)
        if role is not None:
            return role
        model = RoleModel(name=name or alias.capitalize(), alias=alias)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    @staticmethod
    def _to_entity(model: RoleModel) -> Role:
        return Role(id=model.id, name=model.name, alias=model.alias)
