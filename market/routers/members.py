"""
members.py

회원(Member) API 모음.

가입 폼에서 쓰는 중복 확인 API와
로그인 회원 본인의 비밀번호 관리 API를 담당한다.

주요 기능:
- 아이디 / 이메일 / 닉네임 사용 가능 여부 확인 (인증 불필요)
- 비밀번호 변경 (현재 비밀번호 확인 필수)
- 비밀번호 변경 주기 만료 여부 조회

관련 파일:
- market.services.member     : 중복 확인 / 만료 판단
- market.services.auth       : 비밀번호 변경
- market.core.deps           : 인증 의존성(get_current_member)
"""

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from market.core.deps import get_auth_service, get_current_member, get_db
from market.models.member import Member
from market.schemas.auth import ChangePasswordRequest
from market.schemas.member import AvailabilityResponse, PasswordExpiredResponse
from market.services import member as member_service
from market.services.auth import AuthService
from market.services.validation import raise_for_errors, validate_change_password

router = APIRouter(prefix="/api/members", tags=["members"])


@router.get("/check-login-handle")
def check_login_handle(login_handle: str | None = None, db: Session = Depends(get_db)):
    result = member_service.check_login_handle(db, login_handle)
    return {"data": AvailabilityResponse(**result).model_dump()}


@router.get("/check-email")
def check_email(email: str | None = None, db: Session = Depends(get_db)):
    result = member_service.check_email(db, email)
    return {"data": AvailabilityResponse(**result).model_dump()}


@router.get("/check-nickname")
def check_nickname(nickname: str | None = None, db: Session = Depends(get_db)):
    result = member_service.check_nickname(db, nickname)
    return {"data": AvailabilityResponse(**result).model_dump()}


"""
비밀번호 변경 API

- 로그인한 회원 본인만 변경 가능 (회원 ID 는 Access Token 에서 결정)
- 현재 비밀번호 확인 → 새 비밀번호 확인 일치 → 정책 검사 순서
- 성공 시 204

"""

@router.patch("/me/password", status_code=status.HTTP_204_NO_CONTENT)
def change_password(
    data: ChangePasswordRequest,
    current_member: Member = Depends(get_current_member),
    service: AuthService = Depends(get_auth_service),
):
    raise_for_errors(validate_change_password(data))

    service.change_password(
        current_member.id,
        data.current_password,
        data.new_password,
        data.confirm_password,
    )
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/me/password-expired")
def password_expired(current_member: Member = Depends(get_current_member)):
    expired = member_service.is_password_expired(current_member)
    return {"data": PasswordExpiredResponse(expired=expired).model_dump()}
