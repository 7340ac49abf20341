"""Config 설정 검증 테스트"""

import pytest
from pydantic import ValidationError

from app.core.config import DEFAULT_DATABASE_URL, Settings

VALID_PRODUCTION_DB = "postgresql+asyncpg://app:pw@db.internal:5432/users"


class TestDevelopmentConfig:
    """개발 환경 설정 테스트"""

    def test_development_allows_defaults(self):
        """개발 환경에서는 기본 DB URL 허용"""
        config = Settings(app_env="development", debug=True)

        assert config.is_development
        assert config.database_url == DEFAULT_DATABASE_URL

    def test_sync_database_url(self):
        """Alembic용 동기 URL 변환"""
        config = Settings(database_url=VALID_PRODUCTION_DB)

        assert config.sync_database_url == (
            "postgresql+psycopg2://app:pw@db.internal:5432/users"
        )


class TestParsing:
    """환경 변수 파싱 테스트"""

    def test_cors_origins_from_json(self):
        config = Settings(cors_origins='["http://a.com", "http://b.com"]')

        assert config.cors_origins == ["http://a.com", "http://b.com"]

    def test_cors_origins_from_comma_separated(self):
        config = Settings(cors_origins="http://a.com, http://b.com")

        assert config.cors_origins == ["http://a.com", "http://b.com"]

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("/api/v1", "/api/v1"),
            ("api/v2/", "/api/v2"),
            ("", ""),
        ],
    )
    def test_api_prefix_normalized(self, raw, expected):
        assert Settings(api_v1_prefix=raw).api_v1_prefix == expected


class TestProductionConfig:
    """프로덕션 환경 설정 검증 테스트"""

    def test_production_rejects_debug(self):
        """프로덕션에서 DEBUG 거부"""
        with pytest.raises(ValidationError) as exc_info:
            Settings(
                app_env="production",
                debug=True,
                database_url=VALID_PRODUCTION_DB,
            )

        assert "DEBUG" in str(exc_info.value)

    def test_production_rejects_default_database_url(self):
        """프로덕션에서 기본 DB URL 거부"""
        with pytest.raises(ValidationError) as exc_info:
            Settings(
                app_env="production",
                debug=False,
                database_url=DEFAULT_DATABASE_URL,
            )

        assert "DATABASE_URL" in str(exc_info.value)

    def test_production_accepts_valid_settings(self):
        """프로덕션에서 유효한 설정 허용"""
        config = Settings(
            app_env="production",
            debug=False,
            database_url=VALID_PRODUCTION_DB,
        )

        assert config.is_production
        assert not config.is_development
