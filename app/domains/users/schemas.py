"""Users 도메인 스키마 정의"""

from typing import Optional

from pydantic import BaseModel, Field

from app.core.schemas import BaseSchema, TimestampMixin


class UserCreate(BaseModel):
    """사용자 생성 요청 스키마"""

    name: str = Field(..., description="이름")
    email: str = Field(..., description="이메일 (고유)")
    password: str = Field(..., description="비밀번호")


class UserUpdate(BaseModel):
    """사용자 부분 수정 요청 스키마

    요청에 포함된 필드만 변경합니다. 비밀번호는 수정 대상이 아닙니다.
    """

    name: Optional[str] = Field(default=None, description="이름")
    email: Optional[str] = Field(default=None, description="이메일 (고유)")

    def changes(self) -> dict[str, str]:
        """명시적으로 전달된 필드만 반환 (null 값은 무시)"""
        return {
            key: value
            for key, value in self.model_dump(exclude_unset=True).items()
            if value is not None
        }


class UserResponse(BaseSchema, TimestampMixin):
    """사용자 응답 스키마 (비밀번호 제외)"""

    id: int
    name: str
    email: str
