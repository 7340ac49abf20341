"""Users 도메인 예외 정의"""

from enum import Enum

from app.core.exceptions import BadRequestException, NotFoundException


class UserErrorCode(str, Enum):
    """사용자 도메인 에러 코드"""

    USER_NOT_FOUND = "USER_NOT_FOUND"
    EMAIL_ALREADY_EXISTS = "EMAIL_ALREADY_EXISTS"


class UserNotFoundException(NotFoundException):
    """사용자를 찾을 수 없는 경우"""

    def __init__(self, user_id: int | None = None):
        detail = {"user_id": user_id} if user_id is not None else {}
        super().__init__(
            message="User not found",
            error_code=UserErrorCode.USER_NOT_FOUND,
            detail=detail,
        )


class EmailAlreadyExistsException(BadRequestException):
    """이미 다른 사용자가 사용 중인 이메일인 경우"""

    def __init__(self, email: str | None = None):
        detail = {"email": email} if email else {}
        super().__init__(
            message="Email already exists",
            error_code=UserErrorCode.EMAIL_ALREADY_EXISTS,
            detail=detail,
        )
