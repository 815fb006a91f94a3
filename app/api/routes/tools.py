"""Tool endpoints: filtered, paginated listing and owner-guarded CRUD."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Query, status
from sqlalchemy.orm import Session

from app.api.routes.auth import get_current_user
from app.core.config import get_settings
from app.core.database import get_db
from app.models import Tool, User
from app.schemas.common import DB_INT_MAX, MessageResponse
from app.schemas.tool import ToolCreate, ToolOut, ToolPage, ToolResponse, ToolUpdate
from app.services import tools as tool_service
from app.services.tools import ToolFilters

logger = logging.getLogger(__name__)
router = APIRouter()

FORBIDDEN_MESSAGE = "This action is unauthorized."


def get_tool_or_404(
    tool_id: Annotated[int, Path(ge=1, le=DB_INT_MAX)],
    db: Annotated[Session, Depends(get_db)],
) -> Tool:
    tool = tool_service.get_tool(db, tool_id)
    if tool is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Tool not found.")
    return tool


def get_owned_tool(
    tool: Annotated[Tool, Depends(get_tool_or_404)],
    user: Annotated[User, Depends(get_current_user)],
) -> Tool:
    """Dependency: the requested tool, only if the current user created it. Raises 403 otherwise."""
    if tool.user_id is None or tool.user_id != user.id:
        logger.info("Forbidden tool mutation: tool_id=%s user_id=%s", tool.id, user.id)
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=FORBIDDEN_MESSAGE)
    return tool


@router.get("", response_model=ToolPage)
def list_tools(
    db: Annotated[Session, Depends(get_db)],
    search: Annotated[str | None, Query(max_length=255)] = None,
    category_id: Annotated[int | None, Query(ge=1, le=DB_INT_MAX)] = None,
    role_id: Annotated[int | None, Query(ge=1, le=DB_INT_MAX)] = None,
    tags: Annotated[list[str] | None, Query()] = None,
    bracket_tags: Annotated[list[str] | None, Query(alias="tags[]")] = None,
    page: Annotated[int, Query(ge=1, le=DB_INT_MAX)] = 1,
) -> ToolPage:
    """
    List tools newest first, one page at a time.

    Filters combine with AND: search (substring of name or description),
    category_id, role_id and tags. Repeat tags (or tags[]) to require every
    value to be present on the tool.
    """
    filters = ToolFilters(
        search=search,
        category_id=category_id,
        role_id=role_id,
        tags=[*(tags or []), *(bracket_tags or [])],
    )
    result = tool_service.list_tools(
        db, filters, page=page, per_page=get_settings().TOOLS_PER_PAGE
    )
    return ToolPage(
        data=[ToolOut.model_validate(t) for t in result.items],
        current_page=result.current_page,
        last_page=result.last_page,
        per_page=result.per_page,
        total=result.total,
    )


@router.post("", response_model=ToolResponse, status_code=status.HTTP_201_CREATED)
def create_tool(
    body: ToolCreate,
    db: Annotated[Session, Depends(get_db)],
    user: Annotated[User, Depends(get_current_user)],
) -> ToolResponse:
    """
    Create a tool owned by the caller.

    category_ids must name at least one existing category; role_ids, when given,
    must all exist. Returns the tool with categories, owner and roles loaded.
    """
    tool = tool_service.create_tool(db, user, body.model_dump())
    return ToolResponse(tool=ToolOut.model_validate(tool), message="Tool created successfully")


@router.get("/{tool_id}", response_model=ToolResponse)
def show_tool(tool: Annotated[Tool, Depends(get_tool_or_404)]) -> ToolResponse:
    return ToolResponse(tool=ToolOut.model_validate(tool))


@router.put("/{tool_id}", response_model=ToolResponse)
def update_tool(
    body: ToolUpdate,
    tool: Annotated[Tool, Depends(get_owned_tool)],
    db: Annotated[Session, Depends(get_db)],
) -> ToolResponse:
    """Owner-only partial update. Sent category_ids / role_ids replace the existing links."""
    tool = tool_service.update_tool(db, tool, body.model_dump(exclude_unset=True))
    return ToolResponse(tool=ToolOut.model_validate(tool), message="Tool updated successfully")


@router.delete("/{tool_id}", response_model=MessageResponse)
def delete_tool(
    tool: Annotated[Tool, Depends(get_owned_tool)],
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    """Owner-only delete. A repeat request for the same id returns 404."""
    tool_service.delete_tool(db, tool)
    return MessageResponse(message="Tool deleted successfully")
