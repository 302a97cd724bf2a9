# SPDX-License-Identifier: MIT

from weekplan.parse import NEXT_WEEK_PREFIX
from weekplan.repository.tag import TAG_REPO
from weekplan.week import DAYS


def complete_tag(incomplete: str) -> list[str]:
    """Return list of available tags for shell completion."""

    all_tags = TAG_REPO.get_all_tags()
    return [tag for tag in all_tags if tag.startswith(incomplete.lower())]


def complete_day(incomplete: str) -> list[str]:
    """Return day tokens (today, weekdays and +weekdays) for shell completion."""
    candidates = ["today"] + DAYS + [f"{NEXT_WEEK_PREFIX}{day}" for day in DAYS]
    return [day for day in candidates if day.startswith(incomplete.lower())]
