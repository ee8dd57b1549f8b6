# src/recruiting_web/navigation.py

import typing

LOGIN_PATH = "/login"


class Navigator:
    """
    Tracks the current view path and moves between views.

    A UI shell passes `on_navigate` to follow along; tests read `history`.
    """

    def __init__(
            self,
            current_path: str = "/",
            on_navigate: typing.Optional[typing.Callable[[str], None]] = None,
            trace: bool = True,
    ):
        self.current_path = current_path
        self.history: typing.List[str] = [current_path]
        self._on_navigate = on_navigate
        self.trace = trace

    def is_on_login_view(self) -> bool:
        return LOGIN_PATH in self.current_path

    def navigate(self, path: str) -> None:
        if self.trace:
            print(f"NAVIGATION: {self.current_path} -> {path}")
        self.current_path = path
        self.history.append(path)
        if self._on_navigate is not None:
            self._on_navigate(path)
