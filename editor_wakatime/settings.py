"""
Reading the WakaTime config file into a WakaTimeConfig

[settings]
api_key = waka_XXXXXXXX-XXXX-XXXX-XXXX-XXXXXXXXXXXX
api_url = https://api.wakatime.com/api/v1/users/current/heartbeats
timeout = 30
project = my-project
hide_file_names = false
hide_project_names = false
proxy = proxy.example.com:3128
debug = false
disabled = false
"""
from configparser import ConfigParser
from pathlib import Path
from typing import Optional

from . import globals as g
from .customTypes import WakaTimeConfig
from .helpers import LogLevel, log, parseConfigFile


def load_config(configFile: Optional[Path]=None) -> WakaTimeConfig:
    """
    A missing or unreadable file gives a disabled config
    :param configFile: defaults to g.CONFIG_FILE
    :return:
    """
    configFile = configFile or g.CONFIG_FILE
    if not configFile.exists():
        log(LogLevel.DEBUG, f'No config file at {configFile}, tracking disabled')
        return WakaTimeConfig()

    configs = parseConfigFile(configFile)
    if configs is None or not configs.has_section(g.CONFIG_SECTION):
        return WakaTimeConfig()

    g.SETTINGS['debug'] = _getBool(configs, 'debug', False)

    defaults = WakaTimeConfig()
    return WakaTimeConfig(
        enabled=not _getBool(configs, 'disabled', False),
        api_key=_getStr(configs, 'api_key'),
        api_url=_getStr(configs, 'api_url') or defaults.api_url,
        timeout=_getInt(configs, 'timeout', defaults.timeout),
        project=_getStr(configs, 'project'),
        hide_file_names=_getBool(configs, 'hide_file_names', False),
        hide_project_names=_getBool(configs, 'hide_project_names', False),
        proxy=_getStr(configs, 'proxy'),
    )


def _getStr(configs: ConfigParser, option: str) -> Optional[str]:
    value = configs.get(g.CONFIG_SECTION, option, fallback='').strip()
    return value or None


def _getBool(configs: ConfigParser, option: str, default: bool) -> bool:
    try:
        return configs.getboolean(g.CONFIG_SECTION, option, fallback=default)
    except ValueError:
        log(LogLevel.WARNING, f'Invalid boolean for {option} in config file, using {default}')
        return default


def _getInt(configs: ConfigParser, option: str, default: int) -> int:
    try:
        value = configs.getint(g.CONFIG_SECTION, option, fallback=default)
    except ValueError:
        log(LogLevel.WARNING, f'Invalid number for {option} in config file, using {default}')
        return default
    if value <= 0:
        log(LogLevel.WARNING, f'{option} must be positive, using {default}')
        return default
    return value
