"""Command-line interface (CLI) for repoclone."""

# pylint: disable=no-value-for-parameter
from __future__ import annotations

from typing import TypedDict

import click
from click.core import ParameterSource
from dotenv import find_dotenv, load_dotenv
from typing_extensions import Unpack

from repoclone.clone import RepositoryCloner
from repoclone.config import LOG_LEVEL
from repoclone.utils.exceptions import CloneFailedError, MalformedURLError
from repoclone.utils.git_utils import redact_url
from repoclone.utils.logging_config import configure_logging, get_logger

# Initialize logger for this module
logger = get_logger(__name__)


def _load_env_file() -> None:
    """Load a ``.env`` file from the current working directory or one of its parents."""
    load_dotenv(find_dotenv(usecwd=True))


_load_env_file()


class _CLIArgs(TypedDict):
    url: str
    directory: str
    branch: str
    username: str | None
    password: str | None
    token: str | None
    strict_urls: bool
    log_level: str


@click.command()
@click.argument("url", type=str)
@click.argument("directory", type=click.Path(file_okay=False))
@click.option("--branch", "-b", default="", help="Branch to clone (default: the remote's default branch)")
@click.option("--username", "-u", default=None, help="User name for basic authentication")
@click.option(
    "--password",
    "-p",
    envvar="REPOCLONE_PASSWORD",
    default=None,
    help="Password for basic authentication. If omitted, the REPOCLONE_PASSWORD environment variable is used.",
)
@click.option(
    "--token",
    "-t",
    envvar="REPOCLONE_TOKEN",
    default=None,
    help="Personal access token. If omitted, the REPOCLONE_TOKEN environment variable is used.",
)
@click.option(
    "--strict-urls",
    is_flag=True,
    default=False,
    help="Fail instead of cloning without credentials when the URL has no '//' separator",
)
@click.option(
    "--log-level",
    default=LOG_LEVEL,
    show_default=True,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Log level",
)
def main(**cli_kwargs: Unpack[_CLIArgs]) -> None:
    """Clone URL into DIRECTORY, optionally embedding credentials into the URL.

    Parameters
    ----------
    **cli_kwargs : Unpack[_CLIArgs]
        A dictionary of keyword arguments forwarded to ``_run``.

    Examples
    --------
    Basic usage:
        $ repoclone https://github.com/user/repo.git ./repo
        $ repoclone https://github.com/user/repo.git ./repo --branch dev

    Private repositories:
        $ repoclone https://github.com/user/private-repo.git ./repo -t ghp_token
        $ REPOCLONE_TOKEN=ghp_token repoclone https://github.com/user/private-repo.git ./repo
        $ REPOCLONE_PASSWORD=secret repoclone https://git.example.com/team/app.git ./app -u alice

    """
    _ignore_unpaired_environment_credentials(click.get_current_context(), cli_kwargs)
    _run(**cli_kwargs)


def _ignore_unpaired_environment_credentials(ctx: click.Context, cli_kwargs: _CLIArgs) -> None:
    """Drop credentials that came from the environment and conflict with the options on the command line.

    A ``REPOCLONE_PASSWORD`` is ignored when ``--username`` is not given, and a ``REPOCLONE_TOKEN``
    is ignored when a username or password remains. Values passed as options are never dropped.
    """
    if not cli_kwargs["username"] and _from_environment(ctx, "password"):
        cli_kwargs["password"] = None
    if (cli_kwargs["username"] or cli_kwargs["password"]) and _from_environment(ctx, "token"):
        cli_kwargs["token"] = None


def _from_environment(ctx: click.Context, name: str) -> bool:
    return ctx.get_parameter_source(name) == ParameterSource.ENVIRONMENT


def _run(
    url: str,
    directory: str,
    *,
    branch: str = "",
    username: str | None = None,
    password: str | None = None,
    token: str | None = None,
    strict_urls: bool = False,
    log_level: str = LOG_LEVEL,
) -> None:
    """Validate the credential options and run the clone.

    Raises
    ------
    click.UsageError
        If the credential options are inconsistent.
    click.Abort
        If the clone fails.

    """
    configure_logging(log_level)

    if token and (username or password):
        msg = "Use either --token or --username/--password, not both."
        raise click.UsageError(msg)
    if bool(username) != bool(password):
        msg = "--username and --password must be given together."
        raise click.UsageError(msg)

    auth = "token" if token else "password" if username else "none"
    logger.debug("Parsed CLI arguments", extra={"url": redact_url(url), "directory": directory, "auth": auth})

    cloner = RepositoryCloner(strict_urls=strict_urls)
    try:
        if token:
            cloner.clone_with_token(url, directory, token, branch)
        elif username and password:
            cloner.clone_with_password(url, directory, username, password, branch)
        else:
            cloner.clone(url, directory, branch)
    except (CloneFailedError, MalformedURLError) as exc:
        click.echo(f"Error: {exc}", err=True)
        raise click.Abort from exc

    click.echo(f"Cloned {redact_url(url)} into {directory}")


if __name__ == "__main__":
    main()
