"""Tool catalog: filtered/paginated listing, creation, partial updates, pivot sync."""

import logging
import math
from dataclasses import dataclass, field

from sqlalchemy import cast, func, select
from sqlalchemy.dialects.postgresql import JSONB
from sqlalchemy.orm import Query, Session, selectinload

from app.core.errors import FieldValidationError
from app.models import Category, Role, Tool, User

logger = logging.getLogger(__name__)

# Relationships every tool response carries.
TOOL_RELATIONS = (
    selectinload(Tool.categories),
    selectinload(Tool.user).joinedload(User.role),
    selectinload(Tool.recommended_for_roles),
)

# Plain columns a client may set on create/update.
TOOL_FIELDS = (
    "name",
    "link",
    "description",
    "official_documentation",
    "how_to_use",
    "real_examples",
    "tags",
    "images",
)


@dataclass
class ToolFilters:
    """Optional list filters; every one that is set must hold (logical AND)."""

    search: str | None = None
    category_id: int | None = None
    role_id: int | None = None
    tags: list[str] = field(default_factory=list)


@dataclass
class ToolPageResult:
    items: list[Tool]
    current_page: int
    last_page: int
    per_page: int
    total: int


def _tag_contains(db: Session, tag: str):
    """
    SQL condition: the tool's tags array contains tag.

    PostgreSQL uses JSONB containment; other stores (SQLite) expand the array
    with json_each and test for a matching element.
    """
    if db.get_bind().dialect.name == "postgresql":
        return cast(Tool.tags, JSONB).contains([tag])
    elements = func.json_each(Tool.tags).table_valued("value").alias("tag_elements")
    return select(elements.c.value).where(elements.c.value == tag).exists()


def apply_filters(db: Session, query: Query, filters: ToolFilters) -> Query:
    """Narrow a Tool query by search term, category, role and tags."""
    if filters.search is not None:
        term = filters.search
        query = query.filter(
            Tool.name.contains(term, autoescape=True)
            | Tool.description.contains(term, autoescape=True)
        )
    if filters.category_id is not None:
        query = query.filter(Tool.categories.any(Category.id == filters.category_id))
    if filters.role_id is not None:
        query = query.filter(Tool.recommended_for_roles.any(Role.id == filters.role_id))
    for tag in filters.tags:
        query = query.filter(_tag_contains(db, tag))
    return query


def list_tools(db: Session, filters: ToolFilters, page: int, per_page: int) -> ToolPageResult:
    """Return one page of matching tools, newest first."""
    base = apply_filters(db, db.query(Tool), filters)
    total = base.order_by(None).count()
    last_page = max(1, math.ceil(total / per_page))
    offset = (page - 1) * per_page
    items: list[Tool] = []
    if offset < total:
        items = (
            base.options(*TOOL_RELATIONS)
            .order_by(Tool.created_at.desc(), Tool.id.desc())
            .offset(offset)
            .limit(per_page)
            .all()
        )
    return ToolPageResult(
        items=items,
        current_page=page,
        last_page=last_page,
        per_page=per_page,
        total=total,
    )


def get_tool(db: Session, tool_id: int) -> Tool | None:
    """Load a tool with categories, owner and recommended roles attached."""
    return db.query(Tool).options(*TOOL_RELATIONS).filter(Tool.id == tool_id).first()


def _resolve_ids(db: Session, model: type, ids: list[int], field_name: str) -> list:
    """
    Fetch rows for ids (duplicates collapsed, order kept).

    Raises FieldValidationError keyed '<field_name>.<index>' for every unknown id.
    """
    unique_ids = list(dict.fromkeys(ids))
    if not unique_ids:
        return []
    rows = db.query(model).filter(model.id.in_(unique_ids)).all()
    by_id = {row.id: row for row in rows}
    errors: dict[str, list[str]] = {}
    for index, value in enumerate(ids):
        if value not in by_id:
            key = f"{field_name}.{index}"
            errors[key] = [f"The selected {key} is invalid."]
    if errors:
        raise FieldValidationError(errors)
    return [by_id[i] for i in unique_ids]


def create_tool(db: Session, owner: User, data: dict) -> Tool:
    """
    Create a tool owned by owner and attach its categories and roles.

    data is the validated request body; category_ids must be non-empty.
    """
    categories = _resolve_ids(db, Category, data["category_ids"], "category_ids")
    roles = _resolve_ids(db, Role, data.get("role_ids") or [], "role_ids")

    tool = Tool(user_id=owner.id, **{k: data.get(k) for k in TOOL_FIELDS})
    tool.categories = categories
    tool.recommended_for_roles = roles
    db.add(tool)
    db.commit()
    logger.info(
        "Tool created: id=%s owner=%s categories=%s roles=%s",
        tool.id,
        owner.id,
        [c.id for c in categories],
        [r.id for r in roles],
    )
    return get_tool(db, tool.id)


def update_tool(db: Session, tool: Tool, changes: dict) -> Tool:
    """
    Apply a partial update. changes holds only the fields the client sent.

    category_ids / role_ids replace the full association set when present;
    a null role_ids is treated as absent.
    """
    categories = None
    roles = None
    if "category_ids" in changes:
        categories = _resolve_ids(db, Category, changes["category_ids"], "category_ids")
    if changes.get("role_ids") is not None:
        roles = _resolve_ids(db, Role, changes["role_ids"], "role_ids")

    if categories is not None:
        tool.categories = categories
    if roles is not None:
        tool.recommended_for_roles = roles
    for key in TOOL_FIELDS:
        if key in changes:
            setattr(tool, key, changes[key])
    db.commit()
    logger.info("Tool updated: id=%s fields=%s", tool.id, sorted(changes))
    return get_tool(db, tool.id)


def delete_tool(db: Session, tool: Tool) -> None:
    """Delete the tool and its pivot rows."""
    tool_id = tool.id
    db.delete(tool)
    db.commit()
    logger.info("Tool deleted: id=%s", tool_id)
