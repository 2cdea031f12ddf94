"""Utility functions for building and running ``git clone`` commands."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING, Callable, Final, Sequence, Tuple

import git

from repoclone.config import GIT_EXECUTABLE, GIT_TERMINAL_PROMPT, REDACTED
from repoclone.utils.logging_config import get_logger

if TYPE_CHECKING:
    from os import PathLike

# Initialize logger for this module
logger = get_logger(__name__)

# A runner takes the git arguments (without the executable) and returns (exit status, combined output).
CloneRunner = Callable[[Sequence[str]], Tuple[int, str]]

_SCHEME_SEPARATOR: Final[str] = "//"

# scheme://userinfo@  →  scheme://***@, up to the last "@" before whitespace or a quote
_USERINFO_PATTERN: Final[re.Pattern[str]] = re.compile(r"(?P<scheme>[A-Za-z][A-Za-z0-9+.\-]*://)[^\s'\"]*@")


def embed_credentials_in_url(url: str, username: str, password: str) -> str:
    """Embed a username and password right after the ``//`` of a URL.

    ``https://host/owner/repo.git`` becomes ``https://<username>:<password>@host/owner/repo.git``.
    The values are inserted verbatim; no percent-encoding is applied.

    Parameters
    ----------
    url : str
        The repository URL.
    username : str
        The user name for basic authentication.
    password : str
        The password for basic authentication.

    Returns
    -------
    str
        The URL with the credentials embedded, or ``url`` unchanged if it contains no ``//``.

    """
    parts = _split_at_scheme_separator(url)
    if parts is None:
        return url

    prefix, remainder = parts
    return f"{prefix}//{username}:{password}@{remainder}"


def embed_token_in_url(url: str, token: str) -> str:
    """Embed a personal access token right after the ``//`` of a URL.

    ``https://host/owner/repo.git`` becomes ``https://<token>@host/owner/repo.git``.

    Parameters
    ----------
    url : str
        The repository URL.
    token : str
        The access token.

    Returns
    -------
    str
        The URL with the token embedded, or ``url`` unchanged if it contains no ``//``.

    """
    parts = _split_at_scheme_separator(url)
    if parts is None:
        return url

    prefix, remainder = parts
    return f"{prefix}//{token}@{remainder}"


def has_scheme_separator(url: str) -> bool:
    """Return ``True`` if credentials can be embedded into ``url``."""
    return _SCHEME_SEPARATOR in url


def _split_at_scheme_separator(url: str) -> tuple[str, str] | None:
    """Split ``url`` at its first ``//`` into (prefix, remainder), or return ``None`` if there is none."""
    prefix, separator, remainder = url.partition(_SCHEME_SEPARATOR)
    if not separator:
        logger.warning(
            "URL has no '//' separator, credentials were not embedded",
            extra={"url": mask_url(url)},
        )
        return None
    return prefix, remainder


def redact_url(url: str, *userinfo: str) -> str:
    """Replace any ``user:password@`` or ``token@`` part of a URL with ``***@``.

    The pattern-based redaction stops at whitespace and quotes. Credentials that contain
    either are only hidden when they are passed as ``userinfo``.

    Parameters
    ----------
    url : str
        A URL, or any text that may contain URLs.
    *userinfo : str
        Exact ``user:password`` or token strings that were embedded after a ``//``.

    Returns
    -------
    str
        The text with every URL userinfo part redacted.

    """
    for secret in userinfo:
        if secret:
            url = url.replace(f"//{secret}@", f"//{REDACTED}@")
    return _USERINFO_PATTERN.sub(rf"\g<scheme>{REDACTED}@", url)


def mask_url(url: str) -> str:
    """Redact a single URL, including scp-style ``user:secret@host:path`` forms that have no ``//``."""
    if has_scheme_separator(url) or "@" not in url:
        return redact_url(url)
    return f"{REDACTED}@{url.rpartition('@')[2]}"


def build_clone_args(url: str, local_path: str | PathLike[str], branch: str = "") -> list[str]:
    """Build the arguments of a ``git clone`` invocation, without the executable.

    Parameters
    ----------
    url : str
        The (possibly credential-bearing) URL to clone from.
    local_path : str | PathLike[str]
        The directory to clone into.
    branch : str
        The branch to check out; an empty string selects the remote's default branch.

    Returns
    -------
    list[str]
        ``["clone", url, local_path]``, followed by ``["--branch", branch]`` when a branch is given.

    """
    args = ["clone", url, str(local_path)]
    if branch:
        args += ["--branch", branch]
    return args


def run_git_clone(args: Sequence[str]) -> tuple[int, str]:
    """Run git with ``args`` through GitPython and collect its combined output.

    The child process runs with ``GIT_TERMINAL_PROMPT=0`` so that missing credentials
    fail immediately instead of waiting for input.

    Parameters
    ----------
    args : Sequence[str]
        The git arguments, without the executable.

    Returns
    -------
    tuple[int, str]
        The exit status and the concatenated stdout and stderr of the process.

    Raises
    ------
    git.GitCommandNotFound
        If the git executable does not exist.
    OSError
        If the git executable exists but cannot be started.

    """
    git_cmd = git.Git()
    status, stdout, stderr = git_cmd.execute(
        [GIT_EXECUTABLE, *args],
        with_extended_output=True,
        with_exceptions=False,
        env={"GIT_TERMINAL_PROMPT": GIT_TERMINAL_PROMPT},
    )
    combined = "\n".join(part for part in (stdout, stderr) if part)
    return status, combined
