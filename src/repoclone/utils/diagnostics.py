"""Formatting of git output into error messages."""

from __future__ import annotations

from repoclone.config import EMPTY_OUTPUT_MESSAGE
from repoclone.utils.git_utils import redact_url


def format_clone_error(output: str, *userinfo: str) -> str:
    """Turn the captured output of a failed ``git clone`` into an error message.

    Line endings are normalised, trailing whitespace is stripped and credentials embedded in
    URLs are redacted. No other text is removed.

    Parameters
    ----------
    output : str
        The combined stdout and stderr of the git process.
    *userinfo : str
        Exact credential strings embedded into the clone URL, redacted wherever git echoes them.

    Returns
    -------
    str
        The error message, never empty.

    """
    message = output.replace("\r\n", "\n").replace("\r", "\n").rstrip()
    if not message:
        return EMPTY_OUTPUT_MESSAGE
    return redact_url(message, *userinfo)
