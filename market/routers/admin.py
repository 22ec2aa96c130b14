from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from market.core.deps import ROLE_LEVEL, get_current_admin, get_db
from market.core.errors import AppError, ErrorCode
from market.models.member import Member
from market.repositories import MemberRepository
from market.schemas.auth import MemberProfile
from market.schemas.member import StatusUpdate
from market.services.member import change_status, to_profile


router = APIRouter(prefix="/api/admin", tags=["admin"])

# 관리자가 회원 상태(ACTIVE / INACTIVE / SUSPENDED / BANNED)를 변경하는 엔드포인트
@router.patch("/members/{member_id}/status")
def set_status(
    member_id: int,
    data: StatusUpdate,
    db: Session = Depends(get_db),
    current_admin: Member = Depends(get_current_admin),
):
    member = MemberRepository(db).find_by_id(member_id)

    # 해당 회원이 존재하지 않는 경우
    if not member:
        raise AppError(ErrorCode.MEMBER_NOT_FOUND)

    # 자기 자신 상태 변경 금지
    if member.id == current_admin.id:
        raise AppError(ErrorCode.HANDLE_ACCESS_DENIED, "자기 자신의 상태는 변경할 수 없습니다.")

    # 같은 등급 이상의 관리자는 변경 불가
    if ROLE_LEVEL[member.role] >= ROLE_LEVEL[current_admin.role]:
        raise AppError(ErrorCode.HANDLE_ACCESS_DENIED)

    try:
        change_status(member, data.status)
        db.commit()
        db.refresh(member)
    except Exception:
        db.rollback()
        raise

    return {"data": MemberProfile(**to_profile(member)).model_dump(mode="json")}
