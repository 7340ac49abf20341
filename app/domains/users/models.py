"""Users 도메인 모델 정의"""

from datetime import datetime
from typing import Optional

from sqlalchemy import DateTime, String, UniqueConstraint, func
from sqlalchemy.orm import Mapped, mapped_column

from app.core.database import Base


class User(Base):
    """사용자 모델

    email은 저장소 수준의 UNIQUE 제약(uq_users_email)으로 중복을 막습니다.
    비밀번호는 입력값 그대로 저장합니다.
    """

    __tablename__ = "users"
    __table_args__ = (UniqueConstraint("email", name="uq_users_email"),)

    id: Mapped[int] = mapped_column(
        primary_key=True,
        autoincrement=True,
        comment="사용자 ID",
    )
    name: Mapped[str] = mapped_column(
        String(255), nullable=False, comment="이름"
    )
    email: Mapped[str] = mapped_column(
        String(255), nullable=False, comment="이메일 (고유)"
    )
    password: Mapped[str] = mapped_column(
        String(255), nullable=False, comment="비밀번호"
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
        comment="생성 일시",
    )
    updated_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime(timezone=True),
        onupdate=func.now(),
        nullable=True,
        comment="수정 일시",
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email!r})>"
