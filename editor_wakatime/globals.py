import os
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .customTypes import SettingsType

VERSION = '1.0.0'

home_variable = os.environ.get('WAKATIME_HOME')
HOME_FOLDER: Path = Path(home_variable).resolve() if home_variable else Path.home()

CONFIG_FILE = HOME_FOLDER / '.wakatime.cfg'
CONFIG_SECTION = 'settings'

SETTINGS: 'SettingsType' = {
    "debug": False,
}

API_URL = 'https://api.wakatime.com/api/v1/users/current/heartbeats'
USER_AGENT = f'editor-wakatime/{VERSION}'

DEFAULT_TIMEOUT = 30
"""seconds to wait for the API before giving up on a heartbeat"""

HIDDEN_ENTITY = 'HIDDEN'
"""sent instead of the file path when hide_file_names is set"""

PROJECT_INDICATORS = ('.git', '.hg', '.svn', 'Cargo.toml', 'package.json', 'pyproject.toml')
