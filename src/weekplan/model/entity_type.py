# SPDX-License-Identifier: MIT

from typing import Final


class EntryKind:
    BLOCK: Final = "block"
    NOTE: Final = "note"
    UNPLANNED: Final = "unplanned"
