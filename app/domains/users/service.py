"""Users 도메인 서비스

사용자 CRUD의 비즈니스 규칙(이메일 중복, 존재 여부)을 담당합니다.
"""

from sqlalchemy.exc import IntegrityError

from app.core.logging import get_logger
from app.core.middlewares.context import get_request_id
from app.domains.users.exceptions import (
    EmailAlreadyExistsException,
    UserNotFoundException,
)
from app.domains.users.models import User
from app.domains.users.repository import UserRepository
from app.domains.users.schemas import UserCreate, UserUpdate

logger = get_logger(__name__)


class UserService:
    """사용자 서비스

    요청 간 상태를 갖지 않으며, 리포지토리는 생성자로 명시적으로 주입받습니다.
    """

    def __init__(self, repository: UserRepository):
        self.repository = repository

    async def create(self, user_data: UserCreate) -> User:
        """사용자 생성

        이메일 사전 조회는 빠른 경로일 뿐이며, 저장소의 UNIQUE 제약 위반이
        최종 중복 판정입니다.

        Args:
            user_data: 생성 요청 데이터

        Returns:
            생성된 사용자 객체

        Raises:
            EmailAlreadyExistsException: 이메일이 이미 존재하는 경우
        """
        if await self.repository.get_by_email(user_data.email):
            self._log_duplicate(user_data.email, action="create")
            raise EmailAlreadyExistsException(email=user_data.email)

        try:
            user = await self.repository.create(User(**user_data.model_dump()))
        except IntegrityError as e:
            self._log_duplicate(user_data.email, action="create")
            raise EmailAlreadyExistsException(email=user_data.email) from e

        logger.info(
            "User created",
            extra={
                "request_id": get_request_id(),
                "user_id": user.id,
                "action": "created",
            },
        )
        return user

    async def find_all(self) -> list[User]:
        """전체 사용자 목록 조회 (생성 순서)"""
        return list(await self.repository.get_list())

    async def find_one(self, user_id: int) -> User:
        """사용자 조회

        Raises:
            UserNotFoundException: 사용자를 찾을 수 없는 경우
        """
        user = await self.repository.get_by_id(user_id)
        if not user:
            raise UserNotFoundException(user_id=user_id)
        return user

    async def update(self, user_id: int, user_data: UserUpdate) -> User:
        """사용자 부분 수정

        요청에 포함된 필드만 변경하고, 저장된 최신 값을 다시 조회해 반환합니다.
        생성과 동일하게 다른 사용자의 이메일로는 변경할 수 없습니다.

        Args:
            user_id: 사용자 ID
            user_data: 변경할 필드

        Returns:
            수정 후 사용자 객체

        Raises:
            UserNotFoundException: 사용자를 찾을 수 없는 경우
            EmailAlreadyExistsException: 다른 사용자가 이미 쓰는 이메일인 경우
        """
        await self.find_one(user_id)

        changes = user_data.changes()
        if changes:
            email = changes.get("email")
            if email is not None:
                owner = await self.repository.get_by_email(email)
                if owner is not None and owner.id != user_id:
                    self._log_duplicate(email, action="update")
                    raise EmailAlreadyExistsException(email=email)

            try:
                await self.repository.update_by_id(user_id, changes)
            except IntegrityError as e:
                self._log_duplicate(email, action="update")
                raise EmailAlreadyExistsException(email=email) from e

            logger.info(
                "User updated",
                extra={
                    "request_id": get_request_id(),
                    "user_id": user_id,
                    "action": "updated",
                    "fields": sorted(changes),
                },
            )

        return await self.find_one(user_id)

    async def remove(self, user_id: int) -> None:
        """사용자 삭제

        Raises:
            UserNotFoundException: 삭제된 행이 없는 경우
        """
        deleted = await self.repository.delete_by_id(user_id)
        if deleted == 0:
            raise UserNotFoundException(user_id=user_id)

        logger.info(
            "User deleted",
            extra={
                "request_id": get_request_id(),
                "user_id": user_id,
                "action": "deleted",
            },
        )

    def _log_duplicate(self, email: str | None, action: str) -> None:
        logger.warning(
            "Duplicate email rejected",
            extra={
                "request_id": get_request_id(),
                "email": email,
                "action": action,
            },
        )
