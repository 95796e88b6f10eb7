"""Persistence layer for user data."""

from __future__ import annotations

import logging

from sqlalchemy import delete
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, joinedload

from account_admin.domain.entities import Role, User
from account_admin.infrastructure.models import UserModel

logger = logging.getLogger(__name__)


class UserRepository:
    """Provide the lookups and mutations needed for account management."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def get(self, user_id: int) -> User | None:
        model = self._get_model(id=user_id)
        return self._to_entity(model) if model else None

    def get_by_username(self, username: str) -> User | None:
        model = self._get_model(username=username)
        return self._to_entity(model) if model else None

    def create(self, user: User) -> User:
        model = UserModel()
        self._apply_entity_to_model(model, user)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def update(self, user: User) -> User:
        model = self._get_model(id=user.id)
        if not model:
            msg = f"User with id {user.id} not found"
            raise ValueError(msg)
        self._apply_entity_to_model(model, user)
        self.session.add(model)
        self.session.commit()
        self.session.refresh(model)
        return self._to_entity(model)

    def delete_by_username(self, username: str) -> int:
        """Remove every row whose ``username`` matches and return the row count."""

        statement = delete(UserModel).where(UserModel.username == username)
        try:
            result = self.session.execute(
                statement, execution_options={"synchronize_session": False}
            )
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            raise
        deleted = result.rowcount or 0
        logger.debug("Delete by username %s affected %s row(s)", username, deleted)
        return deleted

    @staticmethod
    def _to_entity(model: UserModel) -> User:
        return User(
            id=model.id,
            role=UserRepository._role_to_entity(model.role),
            username=model.username,
            password=model.password,
            is_active=model.is_active,
            created_at=model.created_at,
            last_login=model.last_login,
        )

    def _get_model(self, **filters) -> UserModel | None:
        query = self.session.query(UserModel).options(joinedload(UserModel.role))
        return query.filter_by(**filters).first()

    @staticmethod
    def _apply_entity_to_model(model: UserModel, user: User) -> None:
        model.role_id = user.role.id
        model.username = user.username
        model.password = user.password
        model.is_active = user.is_active
        model.last_login = user.last_login

    @staticmethod
    def _role_to_entity(model_role) -> Role:
        if model_role is None:
            msg = "User role is not set"
            raise ValueError(msg)
        return Role(id=model_role.id, name=model_role.name, alias=model_role.alias)
