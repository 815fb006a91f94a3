"""Category endpoints: list with tool counts, create, read, update, delete."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, status
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.models import Category
from app.schemas.category import (
    CategoryCreate,
    CategoryListResponse,
    CategoryOut,
    CategoryResponse,
    CategoryUpdate,
    CategoryWithCount,
)
from app.schemas.common import DB_INT_MAX, MessageResponse
from app.services import categories as category_service

router = APIRouter()


def get_category_or_404(
    category_id: Annotated[int, Path(ge=1, le=DB_INT_MAX)],
    db: Annotated[Session, Depends(get_db)],
) -> Category:
    category = category_service.get_category(db, category_id)
    if category is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Category not found.")
    return category


@router.get("", response_model=CategoryListResponse)
def list_categories(
    db: Annotated[Session, Depends(get_db)],
) -> CategoryListResponse:
    """Return all categories, each with tools_count."""
    rows = category_service.list_categories_with_counts(db)
    return CategoryListResponse(
        categories=[
            CategoryWithCount(
                **CategoryOut.model_validate(category).model_dump(),
                tools_count=count,
            )
            for category, count in rows
        ]
    )


@router.post("", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED)
def create_category(
    body: CategoryCreate,
    db: Annotated[Session, Depends(get_db)],
) -> CategoryResponse:
    """Create a category. The slug is derived from the name; names must be unique."""
    category = category_service.create_category(db, body.name, body.description)
    return CategoryResponse(
        category=CategoryOut.model_validate(category),
        message="Category created successfully",
    )


@router.get("/{category_id}", response_model=CategoryResponse)
def show_category(
    category: Annotated[Category, Depends(get_category_or_404)],
) -> CategoryResponse:
    return CategoryResponse(category=CategoryOut.model_validate(category))


@router.put("/{category_id}", response_model=CategoryResponse)
def update_category(
    body: CategoryUpdate,
    category: Annotated[Category, Depends(get_category_or_404)],
    db: Annotated[Session, Depends(get_db)],
) -> CategoryResponse:
    """Partially update a category; only fields present in the body change."""
    category = category_service.update_category(
        db, category, body.model_dump(exclude_unset=True)
    )
    return CategoryResponse(
        category=CategoryOut.model_validate(category),
        message="Category updated successfully",
    )


@router.delete("/{category_id}", response_model=MessageResponse)
def delete_category(
    category: Annotated[Category, Depends(get_category_or_404)],
    db: Annotated[Session, Depends(get_db)],
) -> MessageResponse:
    """Delete a category. Tools filed under it are kept; only the links go."""
    category_service.delete_category(db, category)
    return MessageResponse(message="Category deleted successfully")
