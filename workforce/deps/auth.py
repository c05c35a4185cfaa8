from dataclasses import dataclass

from fastapi import HTTPException, Request

from workforce.services.auth_service import verify_token


@dataclass(frozen=True)
class CurrentUser:
    user_id: str
    profile_id: str
    role: str

    @property
    def is_admin(self) -> bool:
        return self.role == "admin"

    @property
    def is_manager_or_admin(self) -> bool:
        return self.role in ("admin", "manager")


def _parse_bearer_token(request: Request) -> str:
    auth_header = request.headers.get("Authorization")
    if not auth_header:
        raise HTTPException(status_code=401, detail="Authentication required")

    parts = auth_header.split(" ", 1)
    if len(parts) != 2 or parts[0].lower() != "bearer" or not parts[1].strip():
        raise HTTPException(status_code=401, detail="Authentication required")

    return parts[1].strip()


def require_auth(request: Request) -> CurrentUser:
    token = _parse_bearer_token(request)

    try:
        claims = verify_token(token)
    except ValueError as exc:
        raise HTTPException(status_code=403, detail=str(exc)) from exc

    user = CurrentUser(
        user_id=str(claims["sub"]),
        profile_id=str(claims["profile_id"]),
        role=str(claims["role"]),
    )

    request.state.user_id = user.user_id
    request.state.profile_id = user.profile_id
    request.state.role = user.role

    return user
