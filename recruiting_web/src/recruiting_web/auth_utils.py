# src/recruiting_web/auth_utils.py
import typing

from .api import ApiClient, ApiError
from .navigation import LOGIN_PATH

LOGIN_ENDPOINT = "/api/auth/login"
CURRENT_USER_ENDPOINT = "/api/auth/me"


async def login(client: ApiClient, email: str, password: str) -> str:
    """
    Exchanges credentials for a bearer token and stores it in the session.
    Consumes the redirect target saved when the previous session expired,
    navigates there (or to the root) and returns that path.
    A rejected login raises ApiAuthenticationError and leaves the session as it was.
    """
    response = await client.post(LOGIN_ENDPOINT, json={"email": email, "password": password})
    body = response.json()
    token = body.get("token") if isinstance(body, dict) else None
    if not token:
        raise ApiError(f"Login response from {LOGIN_ENDPOINT} did not include a token.")

    client.session.set_token(token)
    redirect_path = client.session.pop_redirect_after_login() or "/"
    if LOGIN_PATH in redirect_path:
        redirect_path = "/"  # Never bounce back onto the login view
    print(f"AUTH_UTILS: login - Token stored. Redirecting to: {redirect_path}")
    client.navigator.navigate(redirect_path)
    return redirect_path


def logout(client: ApiClient) -> None:
    client.session.clear_token()
    print("AUTH_UTILS: logout - Token cleared.")
    client.navigator.navigate(LOGIN_PATH)


async def current_user(client: ApiClient) -> typing.Dict[str, typing.Any]:
    response = await client.get(CURRENT_USER_ENDPOINT)
    return response.json()
