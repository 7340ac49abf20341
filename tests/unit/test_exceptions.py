"""예외 단위 테스트"""

from app.core.exceptions import (
    BadRequestException,
    ErrorCode,
    NotFoundException,
)
from app.domains.users.exceptions import (
    EmailAlreadyExistsException,
    UserErrorCode,
    UserNotFoundException,
)


class TestGlobalExceptions:
    """전역 예외 테스트"""

    def test_not_found_exception(self):
        """NotFoundException 기본값"""
        exc = NotFoundException()

        assert exc.status_code == 404
        assert exc.error_code == ErrorCode.NOT_FOUND
        assert exc.message == "리소스를 찾을 수 없습니다."
        assert exc.detail_info == {}

    def test_not_found_exception_custom(self):
        """NotFoundException 커스텀 메시지"""
        exc = NotFoundException(
            message="게시글을 찾을 수 없습니다.",
            detail={"post_id": 123},
        )

        assert exc.message == "게시글을 찾을 수 없습니다."
        assert exc.detail == "게시글을 찾을 수 없습니다."
        assert exc.detail_info == {"post_id": 123}

    def test_bad_request_exception(self):
        """BadRequestException"""
        exc = BadRequestException(message="잘못된 입력입니다.")

        assert exc.status_code == 400
        assert exc.error_code == ErrorCode.BAD_REQUEST

class TestDomainExceptions:
    """도메인 예외 테스트"""

    def test_user_not_found_exception(self):
        """UserNotFoundException"""
        exc = UserNotFoundException(user_id=123)

        assert isinstance(exc, NotFoundException)
        assert exc.status_code == 404
        assert exc.error_code == UserErrorCode.USER_NOT_FOUND
        assert exc.message == "User not found"
        assert exc.detail_info == {"user_id": 123}

    def test_user_not_found_exception_without_id(self):
        """UserNotFoundException (ID 없이)"""
        exc = UserNotFoundException()

        assert exc.detail_info == {}

    def test_email_already_exists_exception(self):
        """EmailAlreadyExistsException은 400"""
        exc = EmailAlreadyExistsException(email="a@x.com")

        assert isinstance(exc, BadRequestException)
        assert exc.status_code == 400
        assert exc.error_code == UserErrorCode.EMAIL_ALREADY_EXISTS
        assert exc.message == "Email already exists"
        assert exc.detail_info == {"email": "a@x.com"}
