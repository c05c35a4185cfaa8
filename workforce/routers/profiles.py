from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session, joinedload

from workforce.database import get_db
from workforce.deps.auth import CurrentUser, require_auth
from workforce.models.profile import Profile
from workforce.schemas.profile import ProfileResponse, ProfileUpdate, ProfileWithEmployee
from workforce.services import account_service

router = APIRouter(prefix="/profiles", tags=["Profiles"])

_NULLABLE_FIELDS = {"phone"}


def _own_profile(db: Session, user: CurrentUser) -> Profile:
    profile = (
        db.query(Profile)
        .options(joinedload(Profile.employee))
        .filter(Profile.id == user.profile_id)
        .first()
    )
    if profile is None:
        raise HTTPException(status_code=404, detail="Profile not found")
    return profile


@router.get("/me", response_model=ProfileWithEmployee)
def get_my_profile(
    user: CurrentUser = Depends(require_auth),
    db: Session = Depends(get_db),
):
    return _own_profile(db, user)


@router.put("/me", response_model=ProfileResponse)
def update_my_profile(
    payload: ProfileUpdate,
    user: CurrentUser = Depends(require_auth),
    db: Session = Depends(get_db),
):
    profile = _own_profile(db, user)
    changes = {
        k: v
        for k, v in payload.model_dump(exclude_unset=True).items()
        if v is not None or k in _NULLABLE_FIELDS
    }
    try:
        account_service.update_profile(profile, changes, db=db)
        db.commit()
        db.refresh(profile)
        return profile
    except Exception:
        db.rollback()
        raise
