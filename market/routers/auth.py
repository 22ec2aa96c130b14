"""
auth.py

인증(Authentication) API 모음.

회원 가입, 로그인, 토큰 재발급, 로그아웃, 내 정보 조회를 담당한다.
JWT 기반 인증 방식을 사용하며, Access Token + Refresh Token 구조를 따른다.

주요 기능:
- 회원 가입 (토큰 발급 없음)
- 로그인 및 토큰 쌍 발급
- Refresh Token 기반 토큰 재발급 (회전)
- 로그아웃 (Refresh Token 무효화, 여러 번 호출해도 204)
- Access Token 으로 내 정보 조회

설계 원칙:
- Access Token은 Authorization Header(Bearer)로 전달
- Refresh Token은 요청 바디(refresh_token)로 전달
- 필드 검증 → AuthService 호출 → {"data": ...} 응답
- 실패는 AppError 로 발생시키고 전역 예외 처리기가 JSON 으로 변환

관련 파일:
- market.services.auth       : 인증 비즈니스 로직
- market.services.validation : 요청 필드 검증
- market.core.deps           : 인증 의존성(get_current_member)

"""

from fastapi import APIRouter, Depends, Response, status

from market.core.deps import get_auth_service, get_current_member
from market.core.security import TokenPair
from market.models.member import Member
from market.schemas.auth import (
    LoginRequest, LoginResponse, MemberProfile,
    RefreshRequest, SignupRequest, SignupResponse, TokenResponse,
)
from market.services.auth import AuthService
from market.services.member import to_profile
from market.services.validation import raise_for_errors, validate_login, validate_signup

router = APIRouter(prefix="/api/auth", tags=["auth"])


def _token_body(pair: TokenPair) -> dict:
    return TokenResponse(
        access_token=pair.access_token,
        refresh_token=pair.refresh_token,
        access_expires_at=pair.access_expires_at,
        refresh_expires_at=pair.refresh_expires_at,
    ).model_dump(mode="json")


"""
회원 가입 API

- 아이디(4~20자) / 이메일 형식 / 필수 값 검증
- 아이디 / 이메일 / 닉네임 중복이면 409
- 비밀번호 정책 위반이면 400 (reason 으로 위반 사유 전달)
- 성공 시 201 + 생성된 회원 식별 정보

"""

@router.post("/signup", status_code=status.HTTP_201_CREATED)
def signup(data: SignupRequest, service: AuthService = Depends(get_auth_service)):
    raise_for_errors(validate_signup(data))

    member = service.signup(data)
    body = SignupResponse(
        member_id=member.id,
        login_handle=member.login_handle,
        display_name=member.display_name,
        nickname=member.nickname,
        message=f"회원 가입에 성공하였습니다. 반갑습니다 {member.nickname}님!",
    )
    return {"data": body.model_dump()}


"""
로그인 API

- 아이디 / 비밀번호 인증 (어느 쪽이 틀렸는지는 알려주지 않음)
- Access / Refresh Token 과 공개 프로필 반환

"""

@router.post("/login")
def login(data: LoginRequest, service: AuthService = Depends(get_auth_service)):
    raise_for_errors(validate_login(data))

    result = service.login(data.login_handle, data.password)
    body = LoginResponse(
        **_token_body(result.tokens),
        member=MemberProfile(**to_profile(result.member)),
    )
    return {"data": body.model_dump(mode="json")}


"""
토큰 재발급 API

- 저장된 Refresh Token 과 일치해야 재발급
- 재발급 시 Refresh Token 을 회전하므로 이전 토큰은 즉시 무효

"""

@router.post("/refresh")
def refresh(data: RefreshRequest, service: AuthService = Depends(get_auth_service)):
    pair = service.refresh(data.refresh_token)
    return {"data": _token_body(pair)}


"""
로그아웃 API

- 저장된 Refresh Token 삭제
- 이미 로그아웃한 토큰으로 다시 호출해도 204

"""

@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
def logout(data: RefreshRequest, service: AuthService = Depends(get_auth_service)):
    service.logout(data.refresh_token)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/me")
def me(current_member: Member = Depends(get_current_member)):
    return {"data": MemberProfile(**to_profile(current_member)).model_dump(mode="json")}
