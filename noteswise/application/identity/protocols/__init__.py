from .identity_verifier import IdentityVerifierProtocol

__all__ = ["IdentityVerifierProtocol"]
