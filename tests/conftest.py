"""Fixtures for tests.

This file provides a recording fake clone runner, GitPython mocks for the default runner,
and a local bare repository that real ``git clone`` calls can use without network access.
"""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Iterator, Sequence
from unittest.mock import MagicMock

import pytest

from repoclone.utils.logging_config import ROOT_LOGGER_NAME

if TYPE_CHECKING:
    from pytest_mock import MockerFixture


@dataclass
class FakeRunner:
    """Stand-in for the git runner that records every argument list it receives."""

    status: int = 0
    output: str = ""
    calls: list[list[str]] = field(default_factory=list)

    def __call__(self, args: Sequence[str]) -> tuple[int, str]:
        self.calls.append(list(args))
        return self.status, self.output

    @property
    def last_url(self) -> str:
        """Return the URL passed to the most recent ``git clone``."""
        return self.calls[-1][1]


@pytest.fixture(autouse=True)
def reset_package_logger() -> Iterator[None]:
    """Remove the handler installed by ``configure_logging`` and restore the logger level after each test."""
    package_logger = logging.getLogger(ROOT_LOGGER_NAME)
    level = package_logger.level
    yield
    for handler in [h for h in package_logger.handlers if h.get_name() == ROOT_LOGGER_NAME]:
        package_logger.removeHandler(handler)
    package_logger.setLevel(level)


@pytest.fixture
def fake_runner() -> FakeRunner:
    """Provide a runner that succeeds without running git."""
    return FakeRunner()


@pytest.fixture
def failing_runner() -> FakeRunner:
    """Provide a runner that fails the way git does for an unknown branch."""
    return FakeRunner(
        status=128,
        output="Cloning into '/tmp/repo'...\nfatal: Remote branch nope not found in upstream origin\n",
    )


@pytest.fixture
def git_cmd_mock(mocker: MockerFixture) -> MagicMock:
    """Patch ``git.Git`` in ``repoclone.utils.git_utils`` and return the mocked command object.

    ``execute`` returns a successful clone by default; tests can override ``return_value`` or ``side_effect``.
    """
    mock_git_cmd = MagicMock()
    mock_git_cmd.execute.return_value = (0, "", "Cloning into 'repo'...")
    mocker.patch("repoclone.utils.git_utils.git.Git", return_value=mock_git_cmd)
    return mock_git_cmd


@pytest.fixture
def bare_repo(tmp_path: Path) -> Path:
    """Create a bare repository with one commit on ``main`` and a ``feature`` branch.

    Returns
    -------
    Path
        The path of the bare repository.

    """
    if shutil.which("git") is None:
        pytest.skip("git is not installed")

    import git

    work_dir = tmp_path / "work"
    repo = git.Repo.init(work_dir)
    repo.git.symbolic_ref("HEAD", "refs/heads/main")
    with repo.config_writer() as writer:
        writer.set_value("user", "name", "Test User")
        writer.set_value("user", "email", "test@example.com")

    (work_dir / "README.md").write_text("# demo\n")
    repo.index.add(["README.md"])
    repo.index.commit("Initial commit")
    repo.create_head("feature")

    bare_path = tmp_path / "remote.git"
    repo.clone(str(bare_path), bare=True)
    return bare_path
