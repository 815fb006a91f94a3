"""Category persistence: listing with tool counts, uniqueness checks, slug upkeep."""

import logging

from sqlalchemy import func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.errors import FieldValidationError
from app.models import Category, category_tool
from app.services.slugs import slugify

logger = logging.getLogger(__name__)

NAME_TAKEN = "The name has already been taken."


def list_categories_with_counts(db: Session) -> list[tuple[Category, int]]:
    """Return every category with the number of tools associated with it."""
    rows = (
        db.query(Category, func.count(category_tool.c.tool_id))
        .outerjoin(category_tool, category_tool.c.category_id == Category.id)
        .group_by(Category.id)
        .order_by(Category.id)
        .all()
    )
    return [(category, int(count)) for category, count in rows]


def get_category(db: Session, category_id: int) -> Category | None:
    return db.get(Category, category_id)


def _ensure_name_available(db: Session, name: str, slug: str, exclude_id: int | None = None) -> None:
    """Raise a field error when another category already uses this name or slug."""
    if not slug:
        raise FieldValidationError.single(
            "name", "The name must contain at least one letter or digit."
        )
    query = db.query(Category.id).filter((Category.name == name) | (Category.slug == slug))
    if exclude_id is not None:
        query = query.filter(Category.id != exclude_id)
    if query.first() is not None:
        raise FieldValidationError.single("name", NAME_TAKEN)


def _commit(db: Session) -> None:
    """Commit, turning a lost uniqueness race into the same field error."""
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        raise FieldValidationError.single("name", NAME_TAKEN) from e


def create_category(db: Session, name: str, description: str | None = None) -> Category:
    name = name.strip()
    slug = slugify(name)
    _ensure_name_available(db, name, slug)
    category = Category(name=name, slug=slug, description=description)
    db.add(category)
    _commit(db)
    db.refresh(category)
    logger.info("Category created: id=%s slug=%s", category.id, category.slug)
    return category


def update_category(db: Session, category: Category, changes: dict) -> Category:
    """
    Apply a partial update. changes holds only the fields the client sent.

    The slug follows the name, so it is re-derived only when the name changes.
    """
    if "name" in changes and changes["name"] is not None:
        name = changes["name"].strip()
        if name != category.name:
            slug = slugify(name)
            _ensure_name_available(db, name, slug, exclude_id=category.id)
            category.name = name
            category.slug = slug
    if "description" in changes:
        category.description = changes["description"]
    _commit(db)
    db.refresh(category)
    logger.info("Category updated: id=%s", category.id)
    return category


def delete_category(db: Session, category: Category) -> None:
    """Delete the category; its pivot rows go with it, its tools stay."""
    category_id = category.id
    db.delete(category)
    db.commit()
    logger.info("Category deleted: id=%s", category_id)
