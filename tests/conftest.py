"""
Shared fakes for the editor side and the network
"""
import threading
from typing import Optional

import pytest

from editor_wakatime import globals as g


class FakeDocument:
    def __init__(self, path: Optional[str], text: str = '', language: Optional[str] = None):
        self._path = path
        self.text = text
        self._language = language

    def path(self) -> Optional[str]:
        return self._path

    def language_id(self) -> Optional[str]:
        return self._language

    def line_count(self) -> int:
        return len(self.text.splitlines())

    def char_to_line(self, pos: int) -> int:
        return self.text.count('\n', 0, pos)


class RecordingTransport:
    """Stands in for helpers.request, keeps every call"""

    def __init__(self, status: int = 201):
        self.status = status
        self.calls: list[dict] = []
        self.lock = threading.Lock()

    def __call__(self, url, body, headers, timeout, proxy=None):
        with self.lock:
            self.calls.append({
                'url': url,
                'body': body,
                'headers': headers,
                'timeout': timeout,
                'proxy': proxy,
            })
        return self.status


@pytest.fixture(autouse=True)
def debug_logging(monkeypatch):
    monkeypatch.setitem(g.SETTINGS, 'debug', True)


@pytest.fixture
def transport():
    return RecordingTransport()


@pytest.fixture
def make_handler():
    from editor_wakatime.wakaTime import Handler

    handlers = []

    def _make(transport):
        handler = Handler(transport=transport)
        handlers.append(handler)
        return handler

    yield _make
    for handler in handlers:
        handler.close(timeout=5)
