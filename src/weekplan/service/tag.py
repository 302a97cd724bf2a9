# SPDX-License-Identifier: MIT

from weekplan.repository.entry import ENTRY_REPO
from weekplan.repository.tag import TAG_REPO


def sync_tags() -> list[str]:
    """
    Rebuild the tag cache from the tags of every stored entry.

    Tags of deleted entries drop out of shell completion after a sync.
    """
    all_tags: set[str] = set()
    for entry in ENTRY_REPO.get_all_entries():
        all_tags.update(entry["tags"])

    TAG_REPO.set_all_tags(sorted(all_tags))
    return TAG_REPO.get_all_tags()
