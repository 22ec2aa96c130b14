# Base.metadata 에 모든 테이블을 등록하기 위한 import
from market.models.member import Member, MemberStatus, Role
from market.models.refresh_token import RefreshToken

__all__ = ["Member", "MemberStatus", "Role", "RefreshToken"]
