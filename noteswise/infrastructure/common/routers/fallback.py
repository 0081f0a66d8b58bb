from fastapi import APIRouter, HTTPException, status

from noteswise.infrastructure.identity.dependencies import CurrentOwner

router = APIRouter(include_in_schema=False)


@router.api_route(
    "/{path:path}",
    methods=["GET", "POST", "PUT", "PATCH", "DELETE", "HEAD", "OPTIONS"],
    response_model=None,
)
def unknown_route(path: str, owner_id: CurrentOwner) -> None:
    """Unknown API paths are gated too: 401 without a valid token, 404 with one."""
    raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")
