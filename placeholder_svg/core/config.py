from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from placeholder_svg import __version__

DEV_ENVIRONMENT = "DEV"
DEV_CACHE_CONTROL = "no-cache"
PROD_CACHE_CONTROL = "public, max-age=86400"


class Settings(BaseSettings):
    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8080
    ENVIRONMENT: str = "production"  # "DEV" 이면 캐시 비활성화
    LOG_LEVEL: str = "INFO"
    DOCS_ENABLED: bool = False
    APP_VERSION: str = __version__

    # Sentry
    SENTRY_DSN: str = ""
    SENTRY_ENVIRONMENT: str | None = None
    SENTRY_RELEASE: str | None = None
    SENTRY_TRACES_SAMPLE_RATE: float = 0.0
    SENTRY_SEND_DEFAULT_PII: bool = False
    SENTRY_ENABLE_LOG_EVENTS: bool = True

    @field_validator("LOG_LEVEL", mode="before")
    @classmethod
    def normalize_log_level(cls, v: object) -> str:
        if not v:
            return "INFO"
        return str(v).strip().upper()

    @property
    def is_dev(self) -> bool:
        """개발 모드 여부 (ENVIRONMENT=DEV)"""
        return self.ENVIRONMENT == DEV_ENVIRONMENT

    @property
    def cache_control(self) -> str:
        """SVG 응답에 붙일 Cache-Control 값"""
        return DEV_CACHE_CONTROL if self.is_dev else PROD_CACHE_CONTROL

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,  # 대소문자 구분 안 함
        extra="ignore",  # 추가 필드 무시
        frozen=True,  # 시작 시 한 번 읽고 변경하지 않음
    )


settings = Settings()  # import 하면 전역 singleton
