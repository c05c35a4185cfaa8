from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from workforce.database import get_db
from workforce.models.profile import Profile
from workforce.schemas.auth import AuthResponse, LoginRequest, RegisterRequest
from workforce.services import account_service
from workforce.services.auth_service import create_access_token

router = APIRouter(prefix="/auth", tags=["Auth"])


def _auth_response(profile: Profile) -> dict:
    token = create_access_token(
        user_id=profile.user_id,
        profile_id=profile.id,
        role=profile.role,
    )
    return {
        "token": token,
        "user": {
            "id": profile.id,
            "email": profile.email,
            "first_name": profile.first_name,
            "last_name": profile.last_name,
            "role": profile.role,
        },
    }


@router.post("/login", response_model=AuthResponse)
def login(payload: LoginRequest, db: Session = Depends(get_db)):
    profile = account_service.authenticate(email=payload.email, password=payload.password, db=db)
    if profile is None:
        raise HTTPException(status_code=401, detail="Invalid credentials")
    return _auth_response(profile)


@router.post("/register", response_model=AuthResponse)
def register(payload: RegisterRequest, db: Session = Depends(get_db)):
    try:
        profile = account_service.register(
            email=payload.email,
            password=payload.password,
            first_name=payload.first_name,
            last_name=payload.last_name,
            db=db,
        )
        response = _auth_response(profile)
        db.commit()
        return response
    except Exception:
        db.rollback()
        raise
