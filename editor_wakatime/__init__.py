"""
WakaTime heartbeats for the editor

    handler = Handler()
    handler.update_config(load_config())
    register_hooks(handler, editor_hooks.document_did_open, editor_hooks.document_did_save)
"""
from .customTypes import Category, Document, EditorContext, EntityType, Heartbeat, WakaTimeConfig
from .globals import VERSION as __version__
from .heuristics import get_language_name, get_project_name
from .hooks import register_hooks
from .settings import load_config
from .wakaTime import Handler, build_heartbeat

__all__ = [
    'Category',
    'Document',
    'EditorContext',
    'EntityType',
    'Handler',
    'Heartbeat',
    'WakaTimeConfig',
    'build_heartbeat',
    'get_language_name',
    'get_project_name',
    'load_config',
    'register_hooks',
]
