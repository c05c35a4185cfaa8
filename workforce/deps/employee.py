from fastapi import Depends, HTTPException
from sqlalchemy.orm import Session

from workforce.database import get_db
from workforce.deps.auth import CurrentUser, require_auth
from workforce.models.employee import Employee


def require_employee(
    user: CurrentUser = Depends(require_auth),
    db: Session = Depends(get_db),
) -> Employee:
    """Employee row attached to the caller's profile, or 404."""
    employee = db.query(Employee).filter(Employee.profile_id == user.profile_id).first()
    if employee is None:
        raise HTTPException(status_code=404, detail="Employee record not found")
    return employee
