from enum import Enum

from fastapi import Depends, HTTPException

from workforce.deps.auth import CurrentUser, require_auth


class Role(Enum):
    ADMIN = "admin"
    MANAGER = "manager"
    EMPLOYEE = "employee"


def require_role(*roles: Role, detail: str = "Insufficient role"):
    """Route dependency that admits only callers holding one of ``roles``.

    Roles are not ranked: an admin-only route rejects managers and a
    manager route must list ``Role.ADMIN`` explicitly to admit admins.
    """
    allowed = {role.value for role in roles}

    def dependency(user: CurrentUser = Depends(require_auth)) -> CurrentUser:
        if user.role not in allowed:
            raise HTTPException(status_code=403, detail=detail)
        return user

    return dependency


require_admin = require_role(Role.ADMIN, detail="Admin access required")
