"""스키마 단위 테스트"""

from app.core.schemas import (
    APIResponse,
    ErrorDetail,
    ErrorResponse,
    create_response,
)


class TestAPIResponse:
    """APIResponse 테스트"""

    def test_success_response_with_data(self):
        """데이터가 있는 성공 응답"""
        response = APIResponse(
            success=True,
            data={"id": 1, "name": "test"},
            message="조회 성공",
        )

        assert response.success is True
        assert response.message == "조회 성공"
        assert response.data == {"id": 1, "name": "test"}

    def test_success_response_without_data(self):
        """데이터가 없는 성공 응답"""
        response = APIResponse(success=True, message="삭제 성공")

        assert response.data is None

    def test_default_message(self):
        """기본 메시지"""
        response = APIResponse(success=True)

        assert response.message == "요청이 성공적으로 처리되었습니다."

    def test_create_response_with_list(self):
        """목록 데이터 응답 팩토리"""
        response = create_response(data=[{"id": 1}, {"id": 2}])

        assert response.success is True
        assert len(response.data) == 2


class TestErrorResponse:
    """ErrorResponse 테스트"""

    def test_error_response_structure(self):
        response = ErrorResponse(
            message="User not found",
            error=ErrorDetail(
                code="USER_NOT_FOUND",
                message="User not found",
                detail={"user_id": 1},
            ),
        )

        dumped = response.model_dump()
        assert dumped["success"] is False
        assert dumped["error"]["code"] == "USER_NOT_FOUND"
        assert dumped["error"]["detail"] == {"user_id": 1}
