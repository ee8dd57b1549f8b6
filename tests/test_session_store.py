import contextlib
import io
import json
import tempfile
import unittest
from pathlib import Path

from recruiting_web.navigation import Navigator
from recruiting_web.session_data import (
    REDIRECT_AFTER_LOGIN_KEY,
    TOKEN_KEY,
    FileSessionStore,
    SessionStore,
)


class SessionStoreTests(unittest.TestCase):
    def test_token_lifecycle(self) -> None:
        store = SessionStore()
        self.assertIsNone(store.token)

        store.set_token("abc123")
        self.assertEqual(store.get_item(TOKEN_KEY), "abc123")

        store.clear_token()
        self.assertIsNone(store.token)

    def test_pop_redirect_after_login_consumes_value(self) -> None:
        store = SessionStore({REDIRECT_AFTER_LOGIN_KEY: "/jobs/7"})

        self.assertEqual(store.pop_redirect_after_login(), "/jobs/7")
        self.assertIsNone(store.pop_redirect_after_login())

    def test_snapshot_uses_storage_keys(self) -> None:
        store = SessionStore({TOKEN_KEY: "abc123", REDIRECT_AFTER_LOGIN_KEY: "/hr"})

        snapshot = store.snapshot()

        self.assertEqual(snapshot.token, "abc123")
        self.assertEqual(snapshot.redirect_after_login, "/hr")
        self.assertEqual(snapshot.model_dump(by_alias=True), {"token": "abc123", "redirectAfterLogin": "/hr"})


class FileSessionStoreTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.path = Path(self._tmp.name) / "nested" / "session.json"

    def test_changes_survive_reload(self) -> None:
        store = FileSessionStore(self.path)
        store.set_token("abc123")
        store.set_redirect_after_login("/profile")

        reloaded = FileSessionStore(self.path)

        self.assertEqual(reloaded.token, "abc123")
        self.assertEqual(reloaded.redirect_after_login, "/profile")
        self.assertEqual(
            json.loads(self.path.read_text(encoding="utf-8")),
            {"redirectAfterLogin": "/profile", "token": "abc123"},
        )

    def test_removal_is_persisted(self) -> None:
        store = FileSessionStore(self.path)
        store.set_token("abc123")
        store.clear_token()

        self.assertIsNone(FileSessionStore(self.path).token)

    def test_rejects_non_object_file(self) -> None:
        self.path.parent.mkdir(parents=True)
        self.path.write_text("[1, 2]", encoding="utf-8")

        with self.assertRaises(ValueError):
            FileSessionStore(self.path)


class NavigatorTests(unittest.TestCase):
    def test_navigate_records_history_and_notifies(self) -> None:
        seen = []
        navigator = Navigator(current_path="/jobs", on_navigate=seen.append)

        navigator.navigate("/login")

        self.assertEqual(navigator.history, ["/jobs", "/login"])
        self.assertTrue(navigator.is_on_login_view())
        self.assertEqual(seen, ["/login"])

    def test_navigate_is_quiet_when_trace_disabled(self) -> None:
        navigator = Navigator(current_path="/jobs", trace=False)

        output = io.StringIO()
        with contextlib.redirect_stdout(output):
            navigator.navigate("/login")

        self.assertEqual(output.getvalue(), "")
        self.assertEqual(navigator.current_path, "/login")


if __name__ == "__main__":
    unittest.main()
