"""FastAPI dependencies for identity and authentication."""

from typing import Annotated

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from starlette.concurrency import run_in_threadpool

from noteswise.core import container
from noteswise.domain.common.value_objects import OwnerId
from noteswise.exceptions import CredentialsException

bearer_scheme = HTTPBearer(auto_error=False)


def verify_credentials(credentials: HTTPAuthorizationCredentials | None) -> OwnerId | None:
    """Verify a parsed Authorization header, None if absent or invalid."""
    if credentials is None or not credentials.credentials:
        return None
    return container.identity_verifier().verify(credentials.credentials)


def get_current_owner(
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(bearer_scheme)],
) -> OwnerId:
    """
    Get the authenticated owner from the bearer token.

    Args:
        credentials: Parsed Authorization header, None if absent or not a Bearer scheme

    Returns:
        OwnerId of the caller

    Raises:
        CredentialsException: If the header is missing or the token fails verification
    """
    owner_id = verify_credentials(credentials)
    if owner_id is None:
        raise CredentialsException
    return owner_id


async def authenticate_request(request: Request) -> OwnerId | None:
    """
    Run the bearer check outside dependency resolution.

    FastAPI decodes the JSON body before resolving dependencies, so error
    handlers use this to answer 401 ahead of a body error.
    """
    credentials = await bearer_scheme(request)
    return await run_in_threadpool(verify_credentials, credentials)


CurrentOwner = Annotated[OwnerId, Depends(get_current_owner)]
