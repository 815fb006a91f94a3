"""Role endpoints: standard CRUD over the role lookup table."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.models import Role
from app.schemas.common import DB_INT_MAX, MessageResponse
from app.schemas.role import RoleCreate, RoleListResponse, RoleOut, RoleResponse, RoleUpdate
from app.services import roles as role_service

router = APIRouter()


def get_role_or_404(
    role_id: Annotated[int, Path(ge=1, le=DB_INT_MAX)],
    db: Annotated[Session, Depends(get_db)],
) -> Role:
    role = role_service.get_role(db, role_id)
    if role is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Role not found.")
    return role


@router.get("", response_model=RoleListResponse)
def list_roles(
    db: Annotated[Session, Depends(get_db)],
) -> RoleListResponse:
    return RoleListResponse(
        roles=[RoleOut.model_validate(r) for r in role_service.list_roles(db)]
    )


@router.post("", response_model=RoleResponse, status_code=status.HTTP_201_CREATED)
def create_role(
    body: RoleCreate,
    db: Annotated[Session, Depends(get_db)],
) -> RoleResponse:
    role = role_service.create_role(db, body.name, body.display_name, body.description)
    return RoleResponse(role=RoleOut.model_validate(role), message="Role created successfully")


@router.get("/{role_id}", response_model=RoleResponse)
def show_role(
    role: Annotated[Role, Depends(get_role_or_404)],
) -> RoleResponse:
    return RoleResponse(role=RoleOut.model_validate(role))


@router.put("/{role_id}", response_model=RoleResponse)
def update_role(
    body: RoleUpdate,
    role: Annotated[Role, Depends(get_role_or_404)],
    db: Annotated[Session, Depends(get_db)],
) -> RoleResponse:
    role = role_service.update_role(db, role, body.model_dump(exclude_unset=True))
    return RoleResponse(role=RoleOut.model_validate(role), message="Role updated successfully")


@router.delete("/{role_id}", response_model=MessageResponse)
def delete_role(
    role: Annotated[Role, Depends(get_role_or_404)],
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    role_service.delete_role(db, role)
    return MessageResponse(message="Role deleted successfully")
