"""
services/member.py

회원(Member) 관련 부가 비즈니스 로직 모음.

인증 흐름 밖에서 회원 정보를 다루는 기능을 담당한다.

주요 기능:
- 아이디 / 이메일 / 닉네임 사용 가능 여부 확인 (가입 폼 실시간 검사)
- 비밀번호 변경 주기 만료 여부 판단
- 로그인 회원 공개 프로필 구성
- 관리자에 의한 회원 상태 변경 (BANNED 는 되돌릴 수 없음)

관련 파일:
- market.repositories.member  : 회원 저장소
- market.routers.members      : 회원 API
- market.routers.admin        : 관리자 API

"""

import calendar
import datetime

from sqlalchemy.orm import Session

from market.core.config import settings
from market.core.errors import AppError, ErrorCode
from market.core.logging_config import get_logger
from market.models.member import Member, MemberStatus
from market.repositories import MemberRepository
from market.services.validation import check_email_format, check_login_handle_format


log = get_logger(__name__)


def _add_months(value: datetime.datetime, months: int) -> datetime.datetime:
    # 말일 보정: 8/31 + 6개월 → 2/28(29)
    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return value.replace(year=year, month=month, day=day)


def _availability(taken: bool, available_msg: str, taken_msg: str) -> dict:
    return {
        "is_available": not taken,
        "message": taken_msg if taken else available_msg,
    }


def check_login_handle(db: Session, login_handle: str | None) -> dict:
    message = check_login_handle_format(login_handle)
    if message:
        raise AppError(ErrorCode.INVALID_INPUT_VALUE, errors={"login_handle": message})

    taken = MemberRepository(db).exists_by_login_handle(login_handle)
    log.info("login_handle_checked", login_handle=login_handle, is_available=not taken)
    return _availability(taken, "사용 가능한 아이디 입니다.", "이미 사용 중인 아이디 입니다.")


def check_email(db: Session, email: str | None) -> dict:
    message = check_email_format(email)
    if message:
        raise AppError(ErrorCode.INVALID_INPUT_VALUE, errors={"email": message})

    taken = MemberRepository(db).exists_by_email(email)
    return _availability(taken, "사용 가능한 이메일입니다.", "이미 가입되어있는 이메일입니다.")


def check_nickname(db: Session, nickname: str | None) -> dict:
    if nickname is None or not nickname.strip():
        raise AppError(ErrorCode.INVALID_INPUT_VALUE, errors={"nickname": "닉네임은 필수 항목입니다."})

    taken = MemberRepository(db).exists_by_nickname(nickname)
    return _availability(taken, "사용 가능한 닉네임 입니다.", "이미 사용 중인 닉네임 입니다.")


"""
비밀번호 변경 주기 만료 여부

- 변경 이력이 없으면 만료로 간주
- 마지막 변경 후 PASSWORD_EXPIRE_MONTHS(기본 6개월)가 지나면 만료

"""

def is_password_expired(member: Member, now: datetime.datetime | None = None) -> bool:
    changed_at = member.password_changed_at
    if changed_at is None:
        return True
    if changed_at.tzinfo is None:
        changed_at = changed_at.replace(tzinfo=datetime.timezone.utc)

    now = now or datetime.datetime.now(datetime.timezone.utc)
    return now > _add_months(changed_at, settings.PASSWORD_EXPIRE_MONTHS)


def to_profile(member: Member) -> dict:
    return {
        "member_id": member.id,
        "login_handle": member.login_handle,
        "nickname": member.nickname,
        "email": member.email,
        "role": member.role.value,
        "status": member.status.value,
        "last_login_at": member.last_login_at,
    }


"""
회원 상태 변경 (관리자)

- BANNED 회원은 다른 상태로 변경 불가
- 현재와 같은 상태로의 변경 요청은 거부

NOTE:
- db.commit()은 호출 측(라우터)에서 수행

"""

def change_status(member: Member, new_status: MemberStatus) -> Member:
    if member.status == MemberStatus.BANNED:
        raise AppError(ErrorCode.MEMBER_STATUS_LOCKED)
    if member.status == new_status:
        raise AppError(ErrorCode.INVALID_INPUT_VALUE, f"이미 {new_status.value} 상태입니다.")

    before = member.status
    member.status = new_status
    log.info("member_status_changed", member_id=member.id, before=before.value, after=new_status.value)
    return member
