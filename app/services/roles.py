"""Role persistence. Roles are seeded lookup data with plain CRUD on top."""

import logging

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import FieldValidationError
from app.models import Role

logger = logging.getLogger(__name__)

NAME_TAKEN = "The name has already been taken."


def list_roles(db: Session) -> list[Role]:
    return db.query(Role).order_by(Role.id).all()


def get_role(db: Session, role_id: int) -> Role | None:
    return db.get(Role, role_id)


def _ensure_name_available(db: Session, name: str, exclude_id: int | None = None) -> None:
    query = db.query(Role.id).filter(Role.name == name)
    if exclude_id is not None:
        query = query.filter(Role.id != exclude_id)
    if query.first() is not None:
        raise FieldValidationError.single("name", NAME_TAKEN)


def _commit(db: Session) -> None:
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise FieldValidationError.single("name", NAME_TAKEN) from e


def create_role(
    db: Session, name: str, display_name: str, description: str | None = None
) -> Role:
    name = name.strip()
    _ensure_name_available(db, name)
    role = Role(name=name, display_name=display_name.strip(), description=description)
    db.add(role)
    _commit(db)
    db.refresh(role)
    logger.info("Role created: id=%s name=%s", role.id, role.name)
    return role


def update_role(db: Session, role: Role, changes: dict) -> Role:
    """Apply a partial update; name uniqueness ignores the role's own row."""
    if changes.get("name") is not None:
        name = changes["name"].strip()
        if name != role.name:
            _ensure_name_available(db, name, exclude_id=role.id)
            role.name = name
    if changes.get("display_name") is not None:
        role.display_name = changes["display_name"].strip()
    if "description" in changes:
        role.description = changes["description"]
    _commit(db)
    db.refresh(role)
    logger.info("Role updated: id=%s", role.id)
    return role


def delete_role(db: Session, role: Role) -> None:
    """Delete the role; recommendation rows cascade and users lose the role."""
    role_id = role.id
    db.delete(role)
    db.commit()
    logger.info("Role deleted: id=%s", role_id)
