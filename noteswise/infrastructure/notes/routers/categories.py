"""API routes for category management."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Query, status

from noteswise.application.notes.use_cases.category_use_case import CategoryUseCase
from noteswise.core import container
from noteswise.domain.common.exceptions import DomainError
from noteswise.exceptions import NotesWiseError
from noteswise.infrastructure.common.di import inject_use_case
from noteswise.infrastructure.identity.dependencies import CurrentOwner
from noteswise.infrastructure.notes.schemas import (
    Category,
    CategoryCreateRequest,
    CategoryUpdateRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/categories", tags=["categories"])

UNEXPECTED_ERROR = "An unexpected error occurred. Please try again later."


@router.get("", response_model=list[Category], status_code=status.HTTP_200_OK)
def list_categories(
    owner_id: CurrentOwner,
    use_case: CategoryUseCase = Depends(inject_use_case(container.category_use_case)),
) -> list[Category]:
    """List the caller's categories ordered by name."""
    try:
        categories = use_case.list_categories(owner_id.value)
        return [Category.from_entity(category) for category in categories]
    except (NotesWiseError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to list categories: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e


@router.get("/{category_id}", response_model=Category, status_code=status.HTTP_200_OK)
def get_category(
    category_id: int,
    owner_id: CurrentOwner,
    use_case: CategoryUseCase = Depends(inject_use_case(container.category_use_case)),
) -> Category:
    """
    Get one category.

    Raises:
        HTTPException 404: If the category does not exist for the caller
    """
    try:
        return Category.from_entity(use_case.get_category(category_id, owner_id.value))
    except (NotesWiseError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to get category {category_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e


@router.post("", response_model=Category, status_code=status.HTTP_201_CREATED)
def create_category(
    request: CategoryCreateRequest,
    owner_id: CurrentOwner,
    use_case: CategoryUseCase = Depends(inject_use_case(container.category_use_case)),
) -> Category:
    """
    Create a category owned by the caller.

    Args:
        request: Name and optional color
        owner_id: Authenticated owner
        use_case: CategoryUseCase injected via dependency container

    Returns:
        The created category
    """
    try:
        category = use_case.create_category(owner_id.value, request.name, request.color)
        return Category.from_entity(category)
    except (NotesWiseError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to create category: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e


@router.put("/{category_id}", response_model=Category, status_code=status.HTTP_200_OK)
def update_category(
    category_id: int,
    request: CategoryUpdateRequest,
    owner_id: CurrentOwner,
    use_case: CategoryUseCase = Depends(inject_use_case(container.category_use_case)),
) -> Category:
    """
    Update a category's name and/or color.

    Sending ``color: null`` explicitly removes the color.

    Raises:
        HTTPException 404: If the category does not exist for the caller
        HTTPException 400: If the request changes nothing
    """
    try:
        category = use_case.update_category(
            category_id=category_id,
            owner_id=owner_id.value,
            name=request.name,
            color=request.color,
            clear_color="color" in request.model_fields_set and request.color is None,
        )
        return Category.from_entity(category)
    except (NotesWiseError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to update category {category_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_category(
    category_id: int,
    owner_id: CurrentOwner,
    cascade: bool = Query(False, description="Also delete the notes in this category"),
    use_case: CategoryUseCase = Depends(inject_use_case(container.category_use_case)),
) -> None:
    """
    Delete a category.

    Notes in the category are kept and lose their category unless
    ``cascade=true`` is passed, in which case they are deleted with their
    flashcards.
    """
    try:
        use_case.delete_category(category_id, owner_id.value, delete_notes=cascade)
    except (NotesWiseError, DomainError):
        raise
    except Exception as e:
        logger.error(f"Failed to delete category {category_id}: {e!s}", exc_info=True)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=UNEXPECTED_ERROR
        ) from e
