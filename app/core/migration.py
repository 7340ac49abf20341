"""마이그레이션 자동 실행 유틸리티

서버 시작 시 Alembic 마이그레이션을 확인하고 필요하면 head까지 올립니다.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from alembic import command
from alembic.config import Config
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory
from alembic.util import CommandError
from sqlalchemy import create_engine
from sqlalchemy.exc import SQLAlchemyError

from app.core.config import settings
from app.core.logging import get_logger

logger = get_logger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parents[2]


@dataclass(frozen=True)
class MigrationStatus:
    """현재/최신 리비전 정보"""

    current: Optional[str]
    head: Optional[str]

    @property
    def is_up_to_date(self) -> bool:
        return self.current is not None and self.current == self.head


def get_alembic_config() -> Config:
    """Alembic 설정 객체 반환 (alembic은 sync 드라이버로 연결)"""
    config = Config(str(PROJECT_ROOT / "alembic.ini"))
    config.set_main_option("script_location", str(PROJECT_ROOT / "migrations"))
    config.set_main_option("sqlalchemy.url", settings.sync_database_url)
    config.attributes["configure_logger"] = False
    return config


def get_current_revision() -> Optional[str]:
    """현재 데이터베이스의 마이그레이션 버전 조회"""
    engine = create_engine(settings.sync_database_url)
    try:
        with engine.connect() as conn:
            rev = MigrationContext.configure(conn).get_current_revision()
            return str(rev) if rev else None
    finally:
        engine.dispose()


def get_head_revision() -> Optional[str]:
    """최신 마이그레이션 버전 조회"""
    script = ScriptDirectory.from_config(get_alembic_config())
    head = script.get_current_head()
    return str(head) if head else None


def check_migration_status() -> MigrationStatus:
    return MigrationStatus(
        current=get_current_revision(), head=get_head_revision()
    )


def run_migrations_on_startup(auto_migrate: bool = True) -> None:
    """서버 시작 시 마이그레이션 확인 및 실행

    Args:
        auto_migrate: True면 자동 마이그레이션, False면 상태만 확인

    Raises:
        RuntimeError: 프로덕션에서 상태 확인 또는 업그레이드가 실패한 경우
    """
    try:
        status = check_migration_status()

        if status.is_up_to_date:
            logger.info(f"✅ 마이그레이션 상태: 최신 (revision: {status.current})")
            return

        logger.warning(
            "⚠️ 마이그레이션이 최신 상태가 아닙니다. "
            f"(현재: {status.current}, 최신: {status.head})"
        )
        if auto_migrate:
            command.upgrade(get_alembic_config(), "head")
            logger.info(f"✅ 마이그레이션 완료 (revision: {status.head})")

    except (SQLAlchemyError, CommandError) as e:
        logger.error(f"❌ 마이그레이션 확인/실행 실패: {e}")
        # 개발 환경에서는 DB 없이도 서버를 띄울 수 있도록 허용
        if settings.is_production:
            raise RuntimeError("프로덕션 환경에서 마이그레이션 실패") from e
        logger.warning("⚠️ 개발 환경이므로 서버를 계속 시작합니다.")
