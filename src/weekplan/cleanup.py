# SPDX-License-Identifier: MIT

import atexit

from weekplan.repository.configuration import CONFIGURATION_REPO
from weekplan.repository.entry import ENTRY_REPO
from weekplan.repository.tag import TAG_REPO


def flush_and_sync() -> None:
    CONFIGURATION_REPO.flush()
    ENTRY_REPO.flush()
    TAG_REPO.flush()


def register_cleanup() -> None:
    atexit.register(flush_and_sync)
