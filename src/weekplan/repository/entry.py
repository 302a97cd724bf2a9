# SPDX-License-Identifier: MIT

import logging
from copy import deepcopy
from typing import Any, Optional, cast

from yaml import dump, load

try:
    from yaml import CDumper as Dumper
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Dumper, Loader  # type: ignore[assignment]

from weekplan import configuration, time
from weekplan.model.entity_id import EntityId, generate_entity_id
from weekplan.model.entity_type import EntryKind
from weekplan.model.entry import Entry
from weekplan.repository.tag import TAG_REPO

logger = logging.getLogger(__name__)


class EntryRepository:
    """
    Entries stored one YAML file per entry under the data directory.

    Ids that were ever issued, including those of deleted entries, are never
    handed out again.
    """

    def __init__(self) -> None:
        self._entries: Optional[list[Entry]] = None
        self._retired_ids: Optional[set[EntityId]] = None
        self.is_dirty = False
        self._dirty_ids: set[str] = set()
        self._deleted_ids: set[str] = set()

    @property
    def entries(self) -> list[Entry]:
        if self._entries is None:
            self.__load_data()
        if self._entries is None:
            raise ValueError()
        return self._entries

    @property
    def retired_ids(self) -> set[EntityId]:
        if self._retired_ids is None:
            self.__load_retired_ids()
        if self._retired_ids is None:
            raise ValueError()
        return self._retired_ids

    def __load_data(self) -> None:
        self._entries = []
        for file_path in configuration.DATA_ENTRIES_DIR.iterdir():
            if file_path.suffix != ".yaml":
                continue
            raw_entry = load(file_path.read_text(), Loader=Loader)
            if raw_entry is not None:
                self._entries.append(
                    self.__convert_entry_for_deserialization(raw_entry)
                )
        logger.debug(
            "loaded %d entries from %s",
            len(self._entries),
            configuration.DATA_ENTRIES_DIR,
        )

    def __load_retired_ids(self) -> None:
        self._retired_ids = set()
        if configuration.DATA_RETIRED_IDS_PATH.is_file():
            retired = load(configuration.DATA_RETIRED_IDS_PATH.read_text(), Loader=Loader)
            if retired is not None:
                self._retired_ids = set(retired["retired_ids"])

    def __save_data(self) -> None:
        # Write dirty entities
        for entry in self.entries:
            if entry["id"] in self._dirty_ids:
                serializable_entry = self.__convert_entry_for_serialization(
                    deepcopy(entry)
                )
                file_path = configuration.DATA_ENTRIES_DIR / f"{entry['id']}.yaml"
                file_path.write_text(dump(serializable_entry, Dumper=Dumper))

        # Remove hard-deleted entity files
        for entity_id in self._deleted_ids:
            file_path = configuration.DATA_ENTRIES_DIR / f"{entity_id}.yaml"
            if file_path.exists():
                file_path.unlink()

        if self._retired_ids is not None:
            configuration.DATA_RETIRED_IDS_PATH.write_text(
                dump({"retired_ids": sorted(self._retired_ids)}, Dumper=Dumper)
            )

        logger.debug(
            "flushed %d written and %d deleted entries",
            len(self._dirty_ids),
            len(self._deleted_ids),
        )

        # Clear tracking sets
        self._dirty_ids.clear()
        self._deleted_ids.clear()

    def flush(self) -> bool:
        if self._entries is not None and self.is_dirty:
            self.__save_data()
            self.is_dirty = False
            return True
        return False

    def __convert_entry_for_serialization(self, entry: Entry) -> dict[str, Any]:
        serializable_entry = cast(dict[str, Any], entry)
        serializable_entry["created"] = time.datetime_to_iso_str(
            serializable_entry["created"]
        )
        return serializable_entry

    def __convert_entry_for_deserialization(self, entry: dict[str, Any]) -> Entry:
        deserializable_entry = entry
        deserializable_entry["created"] = time.datetime_from_str(
            deserializable_entry["created"]
        )
        if deserializable_entry["tags"] is None:
            deserializable_entry["tags"] = []
        return cast(Entry, deserializable_entry)

    def __find(self, id: EntityId) -> Optional[Entry]:
        for entry in self.entries:
            if entry["id"] == id:
                return entry
        return None

    def __mark_dirty(self, id: EntityId) -> None:
        self.is_dirty = True
        self._dirty_ids.add(id)

    def __new_id(self) -> EntityId:
        taken = {entry["id"] for entry in self.entries} | self.retired_ids
        id = generate_entity_id()
        while id in taken:
            id = generate_entity_id()
        return id

    def insert_entry(self, entry: Entry) -> EntityId:
        entry["id"] = self.__new_id()
        # Deduplicate tags
        entry["tags"] = list(dict.fromkeys(entry["tags"]))

        self.entries.append(entry)
        self.retired_ids.add(entry["id"])
        self.__mark_dirty(entry["id"])

        # Update tag cache (additive only)
        TAG_REPO.add_tags(entry["tags"])

        logger.debug("inserted %s entry %s", entry["kind"], entry["id"])
        return entry["id"]

    def update_actual_time(self, id: EntityId, start: str, end: str) -> int:
        entry = self.__find(id)
        if entry is None:
            return 0
        if entry["kind"] == EntryKind.NOTE:
            # notes never carry times
            return 0
        entry["actual_start"] = start
        entry["actual_end"] = end
        self.__mark_dirty(id)
        return 1

    def set_done(self, id: EntityId, done: bool) -> int:
        entry = self.__find(id)
        if entry is None:
            return 0
        entry["done"] = done
        self.__mark_dirty(id)
        return 1

    def delete(self, id: EntityId) -> int:
        entry = self.__find(id)
        if entry is None:
            return 0
        self.entries.remove(entry)
        self.is_dirty = True
        self._dirty_ids.discard(id)
        self._deleted_ids.add(id)
        return 1

    def refresh(self) -> None:
        """Drop cached entries so the next read sees the files on disk."""
        if not self.is_dirty:
            self._entries = None

    def get_entry(self, id: EntityId) -> Optional[Entry]:
        return deepcopy(self.__find(id))

    def get_all_entries(self) -> list[Entry]:
        return deepcopy(self.entries)

    def query_by_week_day(self, week: str, day: str) -> list[Entry]:
        return deepcopy(
            [
                entry
                for entry in self.entries
                if entry["week"] == week and entry["day"] == day
            ]
        )


ENTRY_REPO = EntryRepository()
