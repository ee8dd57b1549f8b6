# src/recruiting_api/auth_routes.py

from typing import Dict, Optional

from fastapi import APIRouter, Depends, HTTPException, Request, status
from pydantic import BaseModel
from werkzeug.security import check_password_hash, generate_password_hash

from .auth_utils import TokenData, create_access_token, get_current_user

router = APIRouter()

PASSWORD_HASH_METHOD = "pbkdf2:sha256:600000"


# --- Pydantic Models for Request/Response ---
class LoginRequest(BaseModel):
    email: str
    password: str


class UserInfo(BaseModel):
    email: str
    name: Optional[str] = None
    role: str = "applicant"


class LoginResponse(BaseModel):
    token: str
    user: UserInfo


# --- User directory ---
class UserDirectory:
    """
    In-memory account registry consulted by POST /login.
    Account management belongs to the auth collaborators; this only
    answers "do these credentials belong to someone".
    """

    def __init__(self):
        self._users: Dict[str, Dict[str, str]] = {}

    def add_user(self, email: str, password: str, name: Optional[str] = None, role: str = "applicant") -> UserInfo:
        key = email.strip().lower()
        self._users[key] = {
            "email": key,
            "name": name or key,
            "role": role,
            "password_hash": generate_password_hash(password, method=PASSWORD_HASH_METHOD),
        }
        return UserInfo(email=key, name=name or key, role=role)

    def authenticate(self, email: str, password: str) -> Optional[UserInfo]:
        record = self._users.get(email.strip().lower())
        if record is None or not check_password_hash(record["password_hash"], password):
            return None
        return UserInfo(email=record["email"], name=record["name"], role=record["role"])


def get_user_directory(request: Request) -> UserDirectory:
    return request.app.state.user_directory


# --- Routes ---
@router.post("/login", response_model=LoginResponse)
async def login(payload: LoginRequest, directory: UserDirectory = Depends(get_user_directory)) -> LoginResponse:
    user = directory.authenticate(payload.email, payload.password)
    if user is None:
        print(f"AUTH: /login - Rejected credentials for {payload.email}")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    token = create_access_token(user.email, {"email": user.email, "name": user.name, "role": user.role})
    print(f"AUTH: /login - Issued token for {user.email} ({user.role})")
    return LoginResponse(token=token, user=user)


@router.get("/me", response_model=TokenData)
async def me(current_user: TokenData = Depends(get_current_user)) -> TokenData:
    return current_user
