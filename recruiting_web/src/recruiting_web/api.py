# src/recruiting_web/api.py

import typing

import httpx

from .config import settings, resolve_base_url
from .navigation import LOGIN_PATH, Navigator
from .session_data import FileSessionStore, SessionStore


# --- Errors surfaced to callers ---

class ApiError(Exception):
    """Base class for every failure raised by ApiClient."""


class ApiNetworkError(ApiError):
    """The request never produced a response (DNS, connect, timeout...)."""

    def __init__(self, message: str, request: typing.Optional[httpx.Request] = None):
        self.request = request
        super().__init__(message)


class ApiHTTPError(ApiError):
    """The server answered with a status of 400 or above."""

    def __init__(self, response: httpx.Response):
        self.response = response
        self.status_code = response.status_code
        self.detail = _error_detail(response)
        request = response.request
        super().__init__(f"HTTP {self.status_code} for {request.method} {request.url}: {self.detail}")


class ApiAuthenticationError(ApiHTTPError):
    """The server rejected the bearer token (401)."""


def _error_detail(response: httpx.Response) -> typing.Any:
    try:
        body = response.json()
    except ValueError:
        return response.text
    if isinstance(body, dict):
        return body.get("detail", body.get("message", body))
    return body


# --- Client ---

class ApiClient:
    """
    Configured async HTTP client for the recruiting API.

    Every request goes through `_attach_token` before it is sent and every
    response through `_handle_response` before it reaches the caller.
    """

    def __init__(
            self,
            base_url: str,
            session: SessionStore,
            navigator: Navigator,
            timeout: float,
            transport: typing.Optional[httpx.AsyncBaseTransport] = None,
            trace: bool = True,
    ):
        self.base_url = base_url
        self.session = session
        self.navigator = navigator
        self.trace = trace
        self._http = httpx.AsyncClient(
            base_url=base_url,
            headers={"Content-Type": "application/json"},
            timeout=timeout,
            transport=transport,
            event_hooks={
                "request": [self._attach_token],
                "response": [self._handle_response],
            },
        )

    async def __aenter__(self) -> "ApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    @property
    def headers(self) -> httpx.Headers:
        return self._http.headers

    def _log(self, message: str) -> None:
        if self.trace:
            print(f"API_CLIENT: {message}")

    # --- Interceptors ---

    async def _attach_token(self, request: httpx.Request) -> None:
        # Read at send time so a token stored after construction is honored.
        current_token = self.session.token
        if current_token:
            request.headers["Authorization"] = f"Bearer {current_token}"
        self._log(f"Making API request: {request.method} {request.url}")

    async def _handle_response(self, response: httpx.Response) -> None:
        request = response.request
        if response.status_code < 400:
            self._log(f"API response received for {request.url}: {response.status_code}")
            return

        # Body must be read here; httpx closes the response once the hook raises.
        await response.aread()
        print(f"API_CLIENT: API Error: {response.status_code} for {request.method} {request.url}")

        if response.status_code == 401:
            self._recover_unauthenticated(request)

        response.raise_for_status()

    def _recover_unauthenticated(self, request: httpx.Request) -> None:
        self._log("Unauthorized access, redirecting to login")
        current_path = self.navigator.current_path
        # Bad credentials on the login endpoint, or a 401 while already on
        # the login view, must not wipe the stored redirect target.
        if self.navigator.is_on_login_view() or LOGIN_PATH in request.url.path:
            self._log(f"Already in login context ({current_path}, {request.url.path}); not redirecting")
            return

        self.session.clear_token()
        self.session.set_redirect_after_login(current_path)
        self.navigator.navigate(LOGIN_PATH)

    # --- Requests ---

    async def request(self, method: str, url: str, **kwargs) -> httpx.Response:
        try:
            return await self._http.request(method, url, **kwargs)
        except httpx.HTTPStatusError as e:
            if e.response.status_code == 401:
                raise ApiAuthenticationError(e.response) from e
            raise ApiHTTPError(e.response) from e
        except httpx.RequestError as e:
            print(f"API_CLIENT: API Error: {type(e).__name__} for {e.request.method} {e.request.url}: {e}")
            raise ApiNetworkError(f"Could not reach {e.request.url}: {e}", request=e.request) from e

    async def get(self, url: str, **kwargs) -> httpx.Response:
        return await self.request("GET", url, **kwargs)

    async def post(self, url: str, **kwargs) -> httpx.Response:
        return await self.request("POST", url, **kwargs)

    async def put(self, url: str, **kwargs) -> httpx.Response:
        return await self.request("PUT", url, **kwargs)

    async def patch(self, url: str, **kwargs) -> httpx.Response:
        return await self.request("PATCH", url, **kwargs)

    async def delete(self, url: str, **kwargs) -> httpx.Response:
        return await self.request("DELETE", url, **kwargs)


def default_session_store() -> SessionStore:
    if settings.SESSION_FILE:
        return FileSessionStore(settings.SESSION_FILE)
    return SessionStore()


def create_client(
        base_url: typing.Optional[str] = None,
        session: typing.Optional[SessionStore] = None,
        navigator: typing.Optional[Navigator] = None,
        *,
        timeout: typing.Optional[float] = None,
        transport: typing.Optional[httpx.AsyncBaseTransport] = None,
        trace: typing.Optional[bool] = None,
) -> ApiClient:
    """
    Builds an ApiClient. Nothing is sent until the first request.
    """
    trace = settings.API_TRACE if trace is None else trace
    return ApiClient(
        base_url=resolve_base_url(base_url),
        session=session if session is not None else default_session_store(),
        navigator=navigator if navigator is not None else Navigator(trace=trace),
        timeout=timeout if timeout is not None else settings.API_TIMEOUT_SECONDS,
        transport=transport,
        trace=trace,
    )
