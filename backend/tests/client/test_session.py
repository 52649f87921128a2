"""Tests for credential persistence."""

import json
import stat

from client.session import SessionStore


class TestSessionStore:

    def test_load_without_file(self, tmp_path):
        assert SessionStore(tmp_path / "session.json").load() is None

    def test_save_and_load(self, tmp_path):
        store = SessionStore(tmp_path / "nested" / "session.json")
        store.save("token-abc")
        assert store.load() == "token-abc"
        assert json.loads(store.path.read_text()) == {"token": "token-abc"}

    def test_file_is_private(self, tmp_path):
        store = SessionStore(tmp_path / "session.json")
        store.save("token-abc")
        assert stat.S_IMODE(store.path.stat().st_mode) == 0o600

    def test_clear(self, tmp_path):
        store = SessionStore(tmp_path / "session.json")
        store.save("token-abc")
        store.clear()
        assert store.load() is None
        assert not store.path.exists()

    def test_clear_without_file(self, tmp_path):
        SessionStore(tmp_path / "session.json").clear()

    def test_unreadable_file(self, tmp_path):
        path = tmp_path / "session.json"
        path.write_text("{not json")
        assert SessionStore(path).load() is None

    def test_unexpected_shape(self, tmp_path):
        path = tmp_path / "session.json"
        path.write_text(json.dumps(["token"]))
        assert SessionStore(path).load() is None

    def test_expands_user(self, monkeypatch, tmp_path):
        monkeypatch.setenv("HOME", str(tmp_path))
        store = SessionStore("~/.orderdesk/session.json")
        assert store.path == tmp_path / ".orderdesk" / "session.json"
