"""

BOSS(최고 관리자) 초기 계정 생성 스크립트.

- 서버 최초 세팅 시 단 한 번 실행하는 용도
- .env에 정의된 BOSS_* 환경 변수를 읽어 BOSS 계정을 생성한다.
- 이미 BOSS 계정이 존재하면 생성하지 않고 종료한다.
- 비밀번호도 회원 가입과 같은 정책을 통과해야 한다.

사용 방법
- 가상환경 접속
- (.venv) ~\backend~$ python -m scripts.create_admin

"""

import os
from dotenv import load_dotenv
load_dotenv()

from sqlalchemy import select
from market.core.password_policy import check_password
from market.core.security import get_password_hash
from market.db.session import SessionLocal
from market.models.member import Member, MemberStatus, Role
from market.repositories import MemberRepository


def main():
    db = SessionLocal()
    try:
        exists = db.scalar(select(Member).where(Member.role == Role.BOSS))
        if exists:
            print("✅ BOSS already exists. Skip creation.")
            return

        login_handle = os.environ["BOSS_LOGIN_HANDLE"]
        password = os.environ["BOSS_PASSWORD"]
        email = os.environ["BOSS_EMAIL"]
        display_name = os.environ.get("BOSS_NAME", "Market Boss")
        nickname = os.environ.get("BOSS_NICKNAME", "boss")

        check_password(password)

        members = MemberRepository(db)
        if members.exists_by_login_handle(login_handle) or members.exists_by_email(email):
            raise RuntimeError("Login handle or email already exists but is not BOSS")

        members.save(Member(
            login_handle=login_handle,
            password_hash=get_password_hash(password),
            email=email,
            display_name=display_name,
            nickname=nickname,
            status=MemberStatus.ACTIVE,
            role=Role.BOSS,
        ))
        db.commit()

        print(f"🚀 BOSS created: {login_handle}")

    finally:
        db.close()


if __name__ == "__main__":
    main()
