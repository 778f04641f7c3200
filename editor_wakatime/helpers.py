"""
Helper functions
"""
import time
import traceback
from configparser import ConfigParser
from enum import Enum
from pathlib import Path
from typing import Any, Optional
from urllib.error import HTTPError
from urllib.request import Request, urlopen

from . import globals as g


# Log Levels
class LogLevel(Enum):
    DEBUG = 'DEBUG'
    INFO = 'INFO'
    WARNING = 'WARNING'
    ERROR = 'ERROR'


def log(lvl: LogLevel, message: Any, *args: Any, **kwargs: Any) -> None:
    """
    Logging messages
    :param lvl:
    :param message:
    :param args:
    :param kwargs:
    :return:
    """
    if lvl == LogLevel.DEBUG and not g.SETTINGS.get('debug'):
        return
    msg = message
    if len(args) > 0:
        msg = message.format(*args)
    elif len(kwargs) > 0:
        msg = message.format(**kwargs)
    print(f'[WakaTime] [{lvl.name}] {msg}')


def obfuscate_apikey(api_key: str) -> str:
    """
    Hides the API key when printing request details to the console
    :param api_key:
    :return: masked key, only the last four characters are kept
    """
    return 'XXXXXXXX-XXXX-XXXX-XXXX-XXXXXXXX' + api_key[-4:]


def parseConfigFile(configFile: Path) -> Optional[ConfigParser]:
    """
    Returns a configparser.ConfigParser instance with configs
    read from the config file. Default location of the config file is
    at ~/.wakatime.cfg.
    :param configFile: Path
    :return: ConfigParser object if successful, None if the file is malformed
    """

    kwargs: dict[str, Any] = {'strict': False, 'interpolation': None}
    configs = ConfigParser(**kwargs)
    try:
        with configFile.open(mode='r', encoding='utf-8') as f:
            try:
                configs.read_file(f)
                return configs
            except Exception:
                log(LogLevel.ERROR, traceback.format_exc())
                return None
    except IOError:
        log(LogLevel.DEBUG, f"Error: Could not read from config file {configFile}")
        return configs


def current_timestamp() -> float:
    """Seconds since the epoch, with the fractional part"""
    return time.time()


def request(url: str, body: bytes, headers: dict[str, str], timeout: int, proxy: Optional[str]=None) -> int:
    """
    POSTs body to url
    HTTP errors are returned as their status code, network errors are raised
    :param url:
    :param body: encoded request body
    :param headers:
    :param timeout: seconds
    :param proxy:
    :return: status code
    """
    req = Request(url, data=body, method='POST')
    for name, value in headers.items():
        req.add_header(name, value)

    if proxy:
        req.set_proxy(proxy, 'https')

    try:
        with urlopen(req, timeout=timeout) as resp:
            resp.read()
            return resp.getcode()
    except HTTPError as err:
        log(LogLevel.DEBUG, err.read().decode(errors='replace'))
        return err.code
