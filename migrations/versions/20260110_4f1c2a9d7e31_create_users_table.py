"""create_users_table

Revision ID: 4f1c2a9d7e31
Revises:
Create Date: 2026-01-10 10:00:00.000000

"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

# revision identifiers, used by Alembic.
revision: str = "4f1c2a9d7e31"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """업그레이드 마이그레이션: users 테이블 생성 (email UNIQUE)"""
    op.create_table(
        "users",
        sa.Column(
            "id",
            sa.Integer(),
            nullable=False,
            autoincrement=True,
            comment="사용자 ID",
        ),
        sa.Column(
            "name", sa.String(length=255), nullable=False, comment="이름"
        ),
        sa.Column(
            "email",
            sa.String(length=255),
            nullable=False,
            comment="이메일 (고유)",
        ),
        sa.Column(
            "password",
            sa.String(length=255),
            nullable=False,
            comment="비밀번호",
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
            comment="생성 일시",
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            nullable=True,
            comment="수정 일시",
        ),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("email", name="uq_users_email"),
    )


def downgrade() -> None:
    """다운그레이드 마이그레이션: users 테이블 삭제"""
    op.drop_table("users")
