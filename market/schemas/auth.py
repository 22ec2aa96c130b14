from datetime import datetime

from pydantic import BaseModel


class SignupRequest(BaseModel):
    login_handle: str
    password: str
    email: str
    display_name: str
    nickname: str
    phone: str | None = None

class SignupResponse(BaseModel):
    member_id: int
    login_handle: str
    display_name: str
    nickname: str
    message: str

class LoginRequest(BaseModel):
    login_handle: str
    password: str

class RefreshRequest(BaseModel):
    refresh_token: str | None = None

class MemberProfile(BaseModel):
    member_id: int
    login_handle: str
    nickname: str
    email: str
    role: str
    status: str
    last_login_at: datetime | None = None

class TokenResponse(BaseModel):
    access_token: str
    refresh_token: str
    token_type: str = "bearer"
    access_expires_at: datetime
    refresh_expires_at: datetime

class LoginResponse(TokenResponse):
    member: MemberProfile

class ChangePasswordRequest(BaseModel):
    current_password: str
    new_password: str
    confirm_password: str
