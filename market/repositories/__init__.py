from .member import MemberRepository
from .refresh_token import RefreshTokenStore

__all__ = ["MemberRepository", "RefreshTokenStore"]
