# SPDX-License-Identifier: MIT

from yaml import dump

try:
    from yaml import CDumper as Dumper
except ImportError:
    from yaml import Dumper  # type: ignore[assignment]

from weekplan import configuration
from weekplan.logger import configure_logging
from weekplan.model.tag import Tags
from weekplan.repository.configuration import CONFIGURATION_REPO
from weekplan.version.version import Version
from weekplan.view import state as view_state


def initialize() -> None:
    configuration.CONFIG_PATH.mkdir(parents=True, exist_ok=True)
    __ensure_config_files()

    configuration.load_data_path_configuration()
    configuration.DATA_PATH.mkdir(parents=True, exist_ok=True)
    __ensure_data_files()

    config = CONFIGURATION_REPO.get_config()
    configure_logging(config["log_level"])
    if config["use_git_versioning"]:
        version = Version()
        version.initialize_data_versioning()
    view_state.set_show_header(config["show_header"])


def __ensure_config_files() -> None:
    if not configuration.APP_CONFIG_PATH.is_file():
        configuration.APP_CONFIG_PATH.write_text(
            dump(configuration.DEFAULT_CONFIGURATION, Dumper=Dumper)
        )


def __ensure_data_files() -> None:
    if not configuration.DATA_TAGS_PATH.is_file():
        tags: Tags = {"tags": []}
        configuration.DATA_TAGS_PATH.write_text(dump(tags, Dumper=Dumper))

    # Directory-based entry store (one file per entry)
    if not configuration.DATA_ENTRIES_DIR.is_dir():
        configuration.DATA_ENTRIES_DIR.mkdir(parents=True, exist_ok=True)
        (configuration.DATA_ENTRIES_DIR / ".gitkeep").touch()
