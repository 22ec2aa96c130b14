from pydantic import BaseModel

from market.core.enums import MemberStatus


class AvailabilityResponse(BaseModel):
    is_available: bool
    message: str

class PasswordExpiredResponse(BaseModel):
    expired: bool

class StatusUpdate(BaseModel):
    status: MemberStatus
