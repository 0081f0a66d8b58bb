from typing import Protocol

from noteswise.domain.common.value_objects import OwnerId


class IdentityVerifierProtocol(Protocol):
    def verify(self, token: str) -> OwnerId | None:
        """Return the owner identified by a bearer token, or None if the token is not valid."""
        ...
