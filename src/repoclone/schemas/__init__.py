"""Module containing the schemas for the repoclone package."""

from repoclone.schemas.cloning import CloneRequest, Credential, TokenCredential, UsernamePasswordCredential

__all__ = ["CloneRequest", "Credential", "TokenCredential", "UsernamePasswordCredential"]
