from pydantic import BaseModel, EmailStr, Field


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=1)


class RegisterRequest(BaseModel):
    email: EmailStr
    password: str = Field(min_length=6)
    first_name: str = Field(min_length=1)
    last_name: str = Field(min_length=1)


class AuthUser(BaseModel):
    id: str
    email: str
    first_name: str
    last_name: str
    role: str


class AuthResponse(BaseModel):
    token: str
    user: AuthUser
