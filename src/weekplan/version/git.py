# SPDX-License-Identifier: MIT

import logging
import shutil
import subprocess
from enum import Enum
from pathlib import Path
from typing import Optional

logger = logging.getLogger(__name__)


class GitUnavailable(RuntimeError):
    pass


class GitCommand(Enum):
    INIT = 0
    COMMIT_ALL = 1


class Git:
    """Thin wrapper over the git executable for checkpointing the data directory."""

    def is_git_repo(self, folder: Path) -> bool:
        # only the data directory itself counts, not an enclosing checkout
        return (folder / ".git").is_dir()

    def init(self, folder: Path) -> None:
        self.__run(GitCommand.INIT, folder)

    def update(self, folder: Path, message: str) -> None:
        self.__run(GitCommand.COMMIT_ALL, folder, message=message)

    def __run(
        self, command: GitCommand, folder: Path, message: Optional[str] = None
    ) -> bool:
        if shutil.which("git") is None:
            raise GitUnavailable("Git is not available on the system")

        base = ["git", "-C", str(folder.resolve())]
        steps: list[list[str]]
        match command:
            case GitCommand.INIT:
                steps = [base + ["init", "--quiet"]]
            case GitCommand.COMMIT_ALL:
                steps = [
                    base + ["add", "-A"],
                    base + ["commit", "--quiet", "-m", message or ""],
                ]

        succeeded = True
        for step in steps:
            result = subprocess.run(step, text=True, capture_output=True)
            if result.returncode != 0:
                # `commit` exits non-zero when nothing changed
                logger.debug("%s: %s", " ".join(step[3:]), result.stderr.strip())
                succeeded = False
        return succeeded
