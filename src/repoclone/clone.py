"""Module containing functions for cloning a Git repository to a local path."""

from __future__ import annotations

from typing import TYPE_CHECKING

import git

from repoclone.schemas import TokenCredential, UsernamePasswordCredential
from repoclone.utils.diagnostics import format_clone_error
from repoclone.utils.exceptions import CloneFailedError, MalformedURLError
from repoclone.utils.git_utils import (
    build_clone_args,
    embed_credentials_in_url,
    embed_token_in_url,
    has_scheme_separator,
    redact_url,
    run_git_clone,
)
from repoclone.utils.logging_config import get_logger

if TYPE_CHECKING:
    from os import PathLike

    from repoclone.schemas import CloneRequest
    from repoclone.utils.git_utils import CloneRunner

# Initialize logger for this module
logger = get_logger(__name__)


class RepositoryCloner:
    """Clone repositories by running ``git clone`` through a runner.

    Parameters
    ----------
    runner : CloneRunner | None
        Callable that executes git with the given arguments and returns ``(exit_status, combined_output)``
        (default: ``run_git_clone``, which uses GitPython).
    strict_urls : bool
        If ``True``, raise ``MalformedURLError`` when credentials cannot be embedded into the URL
        instead of cloning with the unmodified URL (default: ``False``).

    """

    def __init__(self, runner: CloneRunner | None = None, *, strict_urls: bool = False) -> None:
        self._runner = runner or run_git_clone
        self.strict_urls = strict_urls

    def clone(self, url: str, local_path: str | PathLike[str], branch: str = "") -> None:
        """Clone ``url`` into ``local_path``.

        Parameters
        ----------
        url : str
            The URL of the Git repository to clone.
        local_path : str | PathLike[str]
            The directory to clone into. Git creates it; it must not already hold a repository.
        branch : str
            The branch to clone; an empty string selects the remote's default branch.

        Raises
        ------
        CloneFailedError
            If git exits with a non-zero status or cannot be started.

        """
        self._clone(url, local_path, branch)

    def _clone(self, url: str, local_path: str | PathLike[str], branch: str, *userinfo: str) -> None:
        args = build_clone_args(url, local_path, branch)
        shown_url = redact_url(url, *userinfo)

        logger.info(
            "Starting git clone operation",
            extra={"url": shown_url, "local_path": str(local_path), "branch": branch or "<default>"},
        )

        try:
            status, output = self._runner(args)
        except (git.GitCommandNotFound, OSError) as exc:
            message = format_clone_error(str(exc), *userinfo)
            logger.error("Git executable could not be started", extra={"error": message})
            raise CloneFailedError(message) from exc

        if status != 0:
            message = format_clone_error(output, *userinfo)
            logger.error("Git clone failed", extra={"url": shown_url, "status": status})
            raise CloneFailedError(message)

        logger.info("Git clone completed successfully", extra={"local_path": str(local_path)})

    def clone_with_password(
        self,
        url: str,
        local_path: str | PathLike[str],
        username: str,
        password: str,
        branch: str = "",
    ) -> None:
        """Clone ``url`` into ``local_path`` with ``username:password@`` embedded in the URL.

        Parameters
        ----------
        url : str
            The URL of the Git repository to clone.
        local_path : str | PathLike[str]
            The directory to clone into.
        username : str
            The user name for basic authentication.
        password : str
            The password for basic authentication.
        branch : str
            The branch to clone; an empty string selects the remote's default branch.

        Raises
        ------
        CloneFailedError
            If git exits with a non-zero status or cannot be started.
        MalformedURLError
            If ``strict_urls`` is set and ``url`` has no ``//`` separator.

        """
        self._check_url(url)
        self._clone(embed_credentials_in_url(url, username, password), local_path, branch, f"{username}:{password}")

    def clone_with_token(self, url: str, local_path: str | PathLike[str], token: str, branch: str = "") -> None:
        """Clone ``url`` into ``local_path`` with ``token@`` embedded in the URL.

        Parameters
        ----------
        url : str
            The URL of the Git repository to clone.
        local_path : str | PathLike[str]
            The directory to clone into.
        token : str
            The personal access token.
        branch : str
            The branch to clone; an empty string selects the remote's default branch.

        Raises
        ------
        CloneFailedError
            If git exits with a non-zero status or cannot be started.
        MalformedURLError
            If ``strict_urls`` is set and ``url`` has no ``//`` separator.

        """
        self._check_url(url)
        self._clone(embed_token_in_url(url, token), local_path, branch, token)

    def clone_request(self, request: CloneRequest) -> None:
        """Clone according to ``request``, embedding its credential if it has one."""
        credential = request.credential
        if isinstance(credential, UsernamePasswordCredential):
            self.clone_with_password(
                request.url,
                request.local_path,
                credential.username,
                credential.password.get_secret_value(),
                request.branch,
            )
        elif isinstance(credential, TokenCredential):
            self.clone_with_token(request.url, request.local_path, credential.token.get_secret_value(), request.branch)
        else:
            self.clone(request.url, request.local_path, request.branch)

    def _check_url(self, url: str) -> None:
        if self.strict_urls and not has_scheme_separator(url):
            raise MalformedURLError(url)


_default_cloner = RepositoryCloner()


def clone_repo(url: str, local_path: str | PathLike[str], branch: str = "") -> None:
    """Clone ``url`` into ``local_path`` with the default cloner. See ``RepositoryCloner.clone``."""
    _default_cloner.clone(url, local_path, branch)


def clone_repo_with_password(
    url: str,
    local_path: str | PathLike[str],
    username: str,
    password: str,
    branch: str = "",
) -> None:
    """Clone with basic-auth credentials embedded in the URL. See ``RepositoryCloner.clone_with_password``."""
    _default_cloner.clone_with_password(url, local_path, username, password, branch)


def clone_repo_with_token(url: str, local_path: str | PathLike[str], token: str, branch: str = "") -> None:
    """Clone with an access token embedded in the URL. See ``RepositoryCloner.clone_with_token``."""
    _default_cloner.clone_with_token(url, local_path, token, branch)


def clone_from_request(request: CloneRequest) -> None:
    """Clone according to ``request`` with the default cloner."""
    _default_cloner.clone_request(request)
