"""
Binds the editor's document hooks to a Handler
"""
import traceback
from typing import Any, Callable, Optional, Protocol

from .customTypes import EditorContext
from .helpers import LogLevel, log
from .wakaTime import Handler

HookCallback = Callable[[EditorContext, Any], None]


class HookPoint(Protocol):
    """A list of callbacks the editor runs when the event fires"""

    def append(self, callback: HookCallback) -> None: ...


def handle_document_event(handler: Handler, editor: EditorContext, doc_id: Any, is_write: bool) -> None:
    """Never raises, a failing hook must not reach the editor"""
    try:
        config = editor.wakatime_config()
        if config is None:
            log(LogLevel.DEBUG, 'No WakaTime config in the editor, skipping document event')
            return

        doc = editor.get_document(doc_id)
        if doc is None:
            log(LogLevel.DEBUG, f'Document {doc_id} not found')
            return

        cursor = editor.primary_cursor(doc)
        handler.record_activity(doc, cursor, is_write, config)
    except Exception:
        log(LogLevel.ERROR, traceback.format_exc())


def register_hooks(handler: Handler, document_did_open: HookPoint,
                   document_did_save: Optional[HookPoint]=None) -> None:
    # Opening a document like 'viewing a file'
    document_did_open.append(lambda editor, doc_id: handle_document_event(handler, editor, doc_id, False))

    # Saving like 'writing to a file'
    if document_did_save is not None:
        document_did_save.append(lambda editor, doc_id: handle_document_event(handler, editor, doc_id, True))
