"""repoclone: clone Git repositories, optionally with credentials embedded in the URL."""

import os

# Let a missing git executable surface as a clone failure rather than an import error.
os.environ.setdefault("GIT_PYTHON_REFRESH", "quiet")

from repoclone.clone import (  # noqa: E402
    RepositoryCloner,
    clone_from_request,
    clone_repo,
    clone_repo_with_password,
    clone_repo_with_token,
)
from repoclone.schemas import CloneRequest, TokenCredential, UsernamePasswordCredential  # noqa: E402
from repoclone.utils.exceptions import CloneFailedError, MalformedURLError  # noqa: E402

__all__ = [
    "CloneFailedError",
    "CloneRequest",
    "MalformedURLError",
    "RepositoryCloner",
    "TokenCredential",
    "UsernamePasswordCredential",
    "clone_from_request",
    "clone_repo",
    "clone_repo_with_password",
    "clone_repo_with_token",
]
