# src/recruiting_web/session_data.py

import json
import typing
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

# Fixed keys shared with the browser build's localStorage layout.
TOKEN_KEY = "token"
REDIRECT_AFTER_LOGIN_KEY = "redirectAfterLogin"


class SessionData(BaseModel):
    """
    Represents the data held client-side for a user session.
    Only the bearer token and the post-login redirect target are kept.
    """
    model_config = ConfigDict(populate_by_name=True)

    token: typing.Optional[str] = None
    redirect_after_login: typing.Optional[str] = Field(default=None, alias=REDIRECT_AFTER_LOGIN_KEY)


class SessionStore:
    """
    Process-local key/value store for the session.

    The client reads the token from here on every request, so a token
    written after the client was built is picked up by the next call.
    """

    def __init__(self, initial: typing.Optional[typing.Dict[str, str]] = None):
        self._data: typing.Dict[str, str] = dict(initial or {})

    # --- key/value interface ---

    def get_item(self, key: str) -> typing.Optional[str]:
        return self._data.get(key)

    def set_item(self, key: str, value: str) -> None:
        self._data[key] = str(value)
        self._persist()

    def remove_item(self, key: str) -> None:
        if self._data.pop(key, None) is not None:
            self._persist()

    def clear(self) -> None:
        self._data.clear()
        self._persist()

    def _persist(self) -> None:
        pass

    # --- session helpers ---

    @property
    def token(self) -> typing.Optional[str]:
        return self.get_item(TOKEN_KEY)

    def set_token(self, token: str) -> None:
        self.set_item(TOKEN_KEY, token)

    def clear_token(self) -> None:
        self.remove_item(TOKEN_KEY)

    @property
    def redirect_after_login(self) -> typing.Optional[str]:
        return self.get_item(REDIRECT_AFTER_LOGIN_KEY)

    def set_redirect_after_login(self, path: str) -> None:
        self.set_item(REDIRECT_AFTER_LOGIN_KEY, path)

    def pop_redirect_after_login(self) -> typing.Optional[str]:
        path = self.get_item(REDIRECT_AFTER_LOGIN_KEY)
        self.remove_item(REDIRECT_AFTER_LOGIN_KEY)
        return path

    def snapshot(self) -> SessionData:
        return SessionData.model_validate(dict(self._data))


class FileSessionStore(SessionStore):
    """Session store persisted as a JSON object, rewritten on every change."""

    def __init__(self, path: typing.Union[str, Path]):
        self.path = Path(path)
        initial = {}
        if self.path.exists():
            raw = self.path.read_text(encoding="utf-8").strip()
            if raw:
                loaded = json.loads(raw)
                if not isinstance(loaded, dict):
                    raise ValueError(f"Session file {self.path} does not contain a JSON object.")
                initial = {str(k): str(v) for k, v in loaded.items() if v is not None}
        super().__init__(initial)

    def _persist(self) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(self._data, indent=2, sort_keys=True), encoding="utf-8")
