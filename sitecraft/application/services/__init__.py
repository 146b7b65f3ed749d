"""Application services shared by handlers."""

from sitecraft.application.services.ownership_verifier import OwnershipVerifier

__all__ = ["OwnershipVerifier"]
