# SPDX-License-Identifier: MIT

import logging
from textwrap import dedent

from weekplan import configuration
from weekplan.cleanup import flush_and_sync
from weekplan.repository.configuration import CONFIGURATION_REPO
from weekplan.version.git import Git

logger = logging.getLogger(__name__)


class Version:
    def __init__(self) -> None:
        self.git = Git()

    def initialize_data_versioning(self) -> None:
        if not self.git.is_git_repo(configuration.DATA_PATH):
            self.git.init(configuration.DATA_PATH)
            gitignore_path = configuration.DATA_PATH / ".gitignore"
            gitignore_path.touch()
            gitignore_path.write_text(
                dedent("""
                    tags.yaml
                """)
            )
            logger.info("initialized data versioning in %s", configuration.DATA_PATH)

    def create_data_checkpoint(self, message: str) -> None:
        if self.git.is_git_repo(configuration.DATA_PATH):
            self.git.update(configuration.DATA_PATH, message)
            logger.debug("created data checkpoint: %s", message)


def checkpoint(message: str) -> None:
    """Write pending changes and, when versioning is enabled, commit them."""
    flush_and_sync()
    if CONFIGURATION_REPO.get_config()["use_git_versioning"]:
        Version().create_data_checkpoint(message)
