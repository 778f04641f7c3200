# -*- coding: utf-8 -*-
""" ==========================================================
File:        wakaTime.py
Description: Automatic time tracking for the editor
License:     BSD 3, see LICENSE for more details.
Debug:       https://wakatime.com/plugins/status
==========================================================="""

import json
import threading
import traceback
from queue import Queue
from typing import Callable, Optional, Union

from . import globals as g
from .customTypes import Category, Document, EntityType, Heartbeat, WakaTimeConfig
from .helpers import LogLevel, log, obfuscate_apikey, current_timestamp, request
from .heuristics import get_language_name, get_project_name

Transport = Callable[[str, bytes, dict[str, str], int, Optional[str]], int]


class _Stop(object):
    """Queued by Handler.close(), the worker exits when it reaches it"""


STOP = _Stop()

QueueItem = Union[Heartbeat, _Stop]


class ConfigCell(object):
    """
    Shared by the handler and its worker
    The config is immutable, so set() swaps the reference and get() hands out a snapshot
    """

    def __init__(self) -> None:
        self._config: Optional[WakaTimeConfig] = None
        self._lock = threading.Lock()

    def get(self) -> Optional[WakaTimeConfig]:
        return self._config

    def set(self, config: WakaTimeConfig) -> None:
        with self._lock:
            self._config = config


class Handler(object):
    """
    Entry point for the editor hooks
    Every public method returns immediately, network I/O only happens on the worker thread
    """

    def __init__(self, transport: Optional[Transport]=request) -> None:
        self.queue: Queue[QueueItem] = Queue()
        self._config = ConfigCell()
        self._closed = False
        self._lock = threading.Lock()

        self.worker = Worker(self.queue, self._config, transport)
        self.worker.start()

    @property
    def config(self) -> Optional[WakaTimeConfig]:
        return self._config.get()

    def update_config(self, config: WakaTimeConfig) -> None:
        """Applies to every heartbeat dequeued after this call"""
        self._config.set(config)

    def record_activity(self, doc: Document, cursor: int, is_write: bool, config: WakaTimeConfig) -> None:
        """
        :param doc: document the activity happened in
        :param cursor: character offset of the primary cursor
        :param is_write: True when triggered by a save
        :param config: editor config at the time of the event
        """
        try:
            if not config.enabled or doc.path() is None:
                return
            heartbeat = build_heartbeat(doc, cursor, is_write, config)
        except Exception:
            log(LogLevel.ERROR, traceback.format_exc())
            return
        self.send_heartbeat(heartbeat)

    def send_heartbeat(self, heartbeat: Heartbeat) -> None:
        with self._lock:
            if self._closed:
                log(LogLevel.WARNING, 'Failed to send WakaTime heartbeat: worker has shut down')
                return
            self.queue.put_nowait(heartbeat)

    def close(self, timeout: Optional[float]=None) -> None:
        """
        Stops accepting heartbeats; the worker still sends everything queued so far
        :param timeout: seconds to wait for the worker, None waits until it is done
        """
        with self._lock:
            if self._closed:
                return
            self._closed = True
            self.queue.put_nowait(STOP)
        self.worker.join(timeout)


class Worker(threading.Thread):
    """
    Non-blocking thread for sending heartbeats to the api, one at a time and in order.
    A heartbeat that could not be sent is logged and dropped.
    """

    def __init__(self, queue: 'Queue[QueueItem]', config: ConfigCell, transport: Optional[Transport]) -> None:
        threading.Thread.__init__(self, name='wakatime-worker', daemon=True)
        self.queue = queue
        self.config = config
        self.transport = transport

    def run(self) -> None:
        """Running in background thread."""

        while True:
            item = self.queue.get()
            try:
                if isinstance(item, _Stop):
                    log(LogLevel.DEBUG, 'WakaTime worker stopped')
                    return
                self.process_heartbeat(item)
            except Exception:
                log(LogLevel.ERROR, traceback.format_exc())
            finally:
                self.queue.task_done()

    def process_heartbeat(self, heartbeat: Heartbeat) -> None:
        config = self.config.get()
        if config is None:
            log(LogLevel.DEBUG, 'WakaTime config not available, skipping heartbeat')
            return

        if not config.enabled:
            log(LogLevel.DEBUG, 'WakaTime is disabled, skipping heartbeat')
            return

        if not config.api_key:
            log(LogLevel.WARNING, 'WakaTime API key not configured')
            return

        payload = heartbeat.to_payload()
        if self.transport is None:
            log(LogLevel.DEBUG, f'Sending heartbeats is not available, would send: {payload}')
            return

        self.send(self.transport, payload, config)

    def send(self, transport: Transport, payload: dict, config: WakaTimeConfig) -> None:
        api_key = config.api_key or ''
        headers = {
            'Authorization': f'Bearer {api_key}',
            'Content-Type': 'application/json',
            'User-Agent': g.USER_AGENT,
        }
        log(LogLevel.DEBUG, f'POST {config.api_url} key={obfuscate_apikey(api_key)} {payload}')

        try:
            status = transport(config.api_url, json.dumps(payload).encode('utf-8'),
                               headers, config.timeout, config.proxy)
        except Exception as err:
            log(LogLevel.WARNING, f'Failed to send WakaTime heartbeat: {err}')
            return

        if 200 <= status < 300:
            log(LogLevel.DEBUG, 'WakaTime heartbeat sent successfully')
        else:
            log(LogLevel.WARNING, f'WakaTime API returned status: {status}')


def build_heartbeat(doc: Document, cursor: int, is_write: bool, config: WakaTimeConfig) -> Heartbeat:
    """Returns the heartbeat for the document, with the config's redactions applied."""
    path = doc.path()
    if path is None:
        raise ValueError('document has no path')

    project = config.project or get_project_name(path)
    line_idx = doc.char_to_line(cursor)

    return Heartbeat(
        entity=g.HIDDEN_ENTITY if config.hide_file_names else str(path),
        type=EntityType.FILE,
        category=Category.CODING,
        time=current_timestamp(),
        project=None if config.hide_project_names else project,
        language=get_language_name(doc),
        is_write=is_write,
        lines=doc.line_count(),
        lineno=line_idx + 1,
        cursorpos=cursor,
    )
