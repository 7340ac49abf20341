"""Users 도메인 리포지토리

사용자 서비스가 필요로 하는 연산만 노출하는 데이터 접근 계층입니다.
"""

from typing import Any, Optional, Sequence, cast

from sqlalchemy import delete, select, update
from sqlalchemy.engine import CursorResult
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from app.domains.users.models import User


class UserRepository:
    """사용자 리포지토리"""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, user_id: int) -> Optional[User]:
        """ID로 사용자 조회

        세션에 캐시된 객체가 있더라도 DB 값으로 갱신해서 반환합니다.

        Args:
            user_id: 사용자 ID

        Returns:
            사용자 객체 또는 None
        """
        query = (
            select(User)
            .where(User.id == user_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(query)
        return cast(Optional[User], result.scalar_one_or_none())

    async def get_by_email(self, email: str) -> Optional[User]:
        """이메일로 사용자 조회"""
        result = await self.session.execute(
            select(User).where(User.email == email)
        )
        return cast(Optional[User], result.scalar_one_or_none())

    async def get_list(self) -> Sequence[User]:
        """전체 사용자 목록 조회 (생성 순서)"""
        result = await self.session.execute(select(User).order_by(User.id))
        return cast(Sequence[User], result.scalars().all())

    async def create(self, user: User) -> User:
        """사용자 생성

        Args:
            user: 생성할 사용자 객체

        Returns:
            ID가 채워진 사용자 객체

        Raises:
            IntegrityError: 저장소 제약(이메일 UNIQUE 등) 위반. 세션은 롤백됩니다.
        """
        self.session.add(user)
        try:
            await self.session.flush()
        except IntegrityError:
            await self.session.rollback()
            raise
        await self.session.refresh(user)
        return user

    async def update_by_id(self, user_id: int, values: dict[str, Any]) -> int:
        """ID로 사용자 필드 수정

        Args:
            user_id: 사용자 ID
            values: 변경할 컬럼과 값

        Returns:
            변경된 행 수

        Raises:
            IntegrityError: 저장소 제약 위반. 세션은 롤백됩니다.
        """
        stmt = update(User).where(User.id == user_id).values(**values)
        try:
            result = cast(CursorResult, await self.session.execute(stmt))
        except IntegrityError:
            await self.session.rollback()
            raise
        return int(result.rowcount)

    async def delete_by_id(self, user_id: int) -> int:
        """ID로 사용자 삭제

        Returns:
            삭제된 행 수 (0이면 대상 없음)
        """
        result = cast(
            CursorResult,
            await self.session.execute(delete(User).where(User.id == user_id)),
        )
        return int(result.rowcount)
