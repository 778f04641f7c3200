"""
Tests for the editor hook adapter.
"""
from unittest.mock import Mock

from editor_wakatime.customTypes import WakaTimeConfig
from editor_wakatime.hooks import register_hooks

from .conftest import FakeDocument

CONFIG = WakaTimeConfig(enabled=True, api_key='waka_key')


class FakeEditor:
    def __init__(self, documents, cursor=0, config=CONFIG):
        self.documents = documents
        self.cursor = cursor
        self.config = config

    def get_document(self, doc_id):
        return self.documents.get(doc_id)

    def primary_cursor(self, doc):
        return self.cursor

    def wakatime_config(self):
        return self.config


class TestRegisterHooks:
    def test_open_hook_records_read(self):
        handler = Mock()
        did_open = []
        register_hooks(handler, did_open)
        doc = FakeDocument('/a.py', 'a\nb\n')

        did_open[0](FakeEditor({1: doc}, cursor=2), 1)

        handler.record_activity.assert_called_once_with(doc, 2, False, CONFIG)

    def test_save_hook_records_write(self):
        handler = Mock()
        did_open, did_save = [], []
        register_hooks(handler, did_open, did_save)
        doc = FakeDocument('/a.py', 'a\n')

        did_save[0](FakeEditor({1: doc}), 1)

        handler.record_activity.assert_called_once_with(doc, 0, True, CONFIG)

    def test_save_hook_is_optional(self):
        did_open = []
        register_hooks(Mock(), did_open)

        assert len(did_open) == 1

    def test_missing_document(self, capsys):
        handler = Mock()
        did_open = []
        register_hooks(handler, did_open)

        did_open[0](FakeEditor({}), 42)

        handler.record_activity.assert_not_called()
        assert 'Document 42 not found' in capsys.readouterr().out

    def test_missing_config(self):
        handler = Mock()
        did_open = []
        register_hooks(handler, did_open)

        did_open[0](FakeEditor({1: FakeDocument('/a.py')}, config=None), 1)

        handler.record_activity.assert_not_called()

    def test_errors_do_not_reach_the_editor(self, capsys):
        handler = Mock()
        handler.record_activity.side_effect = RuntimeError('boom')
        did_open = []
        register_hooks(handler, did_open)

        did_open[0](FakeEditor({1: FakeDocument('/a.py')}), 1)

        assert 'RuntimeError: boom' in capsys.readouterr().out

    def test_end_to_end(self, make_handler, transport):
        handler = make_handler(transport)
        handler.update_config(CONFIG)
        did_open = []
        register_hooks(handler, did_open)

        did_open[0](FakeEditor({1: FakeDocument('/a.py', 'a\n')}), 1)
        handler.close(timeout=5)

        assert len(transport.calls) == 1
