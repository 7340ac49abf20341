"""Users 도메인 모듈

구조:
    - models.py: SQLAlchemy 모델 정의 (User)
    - schemas.py: Pydantic 스키마 (UserCreate, UserUpdate, UserResponse)
    - repository.py: 데이터 접근 계층
    - service.py: 비즈니스 로직 (이메일 중복, 존재 여부 검사)
    - router.py: API 엔드포인트
    - exceptions.py: 도메인 예외
"""

from app.domains.users.exceptions import (
    EmailAlreadyExistsException,
    UserErrorCode,
    UserNotFoundException,
)
from app.domains.users.models import User
from app.domains.users.repository import UserRepository
from app.domains.users.router import router
from app.domains.users.schemas import UserCreate, UserResponse, UserUpdate
from app.domains.users.service import UserService

__all__ = [
    "User",
    "UserRepository",
    "UserService",
    "UserCreate",
    "UserUpdate",
    "UserResponse",
    "router",
    "UserErrorCode",
    "UserNotFoundException",
    "EmailAlreadyExistsException",
]
