# SPDX-License-Identifier: MIT

import os
from pathlib import Path
from typing import Optional, TypedDict

from yaml import load

try:
    from yaml import CLoader as Loader
except ImportError:
    from yaml import Loader  # type: ignore[assignment]
import platformdirs

APP_NAME = "weekplan"

CONFIG_DIR_ENV_VAR = "WEEKPLAN_CONFIG_DIR"

CONFIG_PATH = Path(
    os.environ.get(CONFIG_DIR_ENV_VAR) or platformdirs.user_config_path(APP_NAME)
)
APP_CONFIG_PATH = CONFIG_PATH / "config.yaml"

# These will be set dynamically by load_data_path_configuration()
DATA_PATH: Path = platformdirs.user_data_path(APP_NAME)
DATA_ENTRIES_DIR: Path = DATA_PATH / "entries"
DATA_TAGS_PATH: Path = DATA_PATH / "tags.yaml"
DATA_RETIRED_IDS_PATH: Path = DATA_PATH / "retired_ids.yaml"


class Configuration(TypedDict):
    data_path: Optional[str]
    use_git_versioning: bool
    show_header: bool
    serve_host: str
    serve_port: int
    log_level: str


DEFAULT_CONFIGURATION: Configuration = {
    "data_path": None,
    "use_git_versioning": False,
    "show_header": True,
    "serve_host": "127.0.0.1",
    "serve_port": 8080,
    "log_level": "WARNING",
}


def set_data_path(data_path: Path) -> None:
    global DATA_PATH, DATA_ENTRIES_DIR, DATA_TAGS_PATH, DATA_RETIRED_IDS_PATH

    DATA_PATH = data_path
    DATA_ENTRIES_DIR = DATA_PATH / "entries"
    DATA_TAGS_PATH = DATA_PATH / "tags.yaml"
    DATA_RETIRED_IDS_PATH = DATA_PATH / "retired_ids.yaml"


def load_data_path_configuration() -> None:
    """
    Load the configuration and set the DATA_PATH variables dynamically.

    This must be called after the config file exists and before any
    repositories are used.
    """
    if not APP_CONFIG_PATH.is_file():
        # Config doesn't exist yet, use defaults
        return

    config: Optional[Configuration] = load(APP_CONFIG_PATH.read_text(), Loader=Loader)
    if config is None:
        return

    data_path_setting = config.get("data_path")
    if data_path_setting is not None:
        set_data_path(Path(data_path_setting).expanduser())
