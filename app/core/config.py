from pydantic import Field, field_validator
from pydantic_settings import BaseSettings
from typing import List, Optional
from urllib.parse import quote_plus


def _parse_bool(v, default: bool) -> bool:
    """빈 문자열/None은 기본값, 문자열은 true/1/yes/on 여부로 변환"""
    if v == '' or v is None:
        return default
    if isinstance(v, str):
        return v.lower() in ('true', '1', 'yes', 'on')
    return bool(v)


class Settings(BaseSettings):
    PROJECT_NAME: str = "Stock API"
    PROJECT_DESCRIPTION: str = "주식 종목 관리 REST API (JWT 인증)"
    PROJECT_VERSION: str = "1.0.0"

    DEBUG: bool = Field(default=False, description="디버그 모드 활성화 여부")
    LOG_LEVEL: str = Field(default="INFO", description="로깅 레벨")

    # React 프론트엔드 (개발 서버 + 운영 도메인)
    CORS_ORIGINS: List[str] = [
        "http://localhost:3000",
        "http://localhost:3001",
        "https://your-production-domain.com",
    ]
    CORS_MAX_AGE: int = Field(default=3600, description="Preflight 응답 캐시 시간(초)")

    # 저장소 설정
    STORAGE_BACKEND: str = Field(
        default="mongodb",
        description="종목 저장소 종류 (mongodb | memory)"
    )
    MONGODB_URL: str = Field(
        default="mongodb://localhost:27017",
        description="MongoDB 연결 URL"
    )
    MONGODB_USER: Optional[str] = Field(default=None, description="MongoDB 사용자")
    MONGODB_PASSWORD: Optional[str] = Field(default=None, description="MongoDB 비밀번호")
    MONGODB_DATABASE: str = Field(default="trading", description="MongoDB 데이터베이스명")
    MONGODB_COLLECTION: str = Field(default="stocks", description="종목 컬렉션명")

    # 인증 (OAuth2 / OIDC 발급자, 예: Okta)
    AUTH_ENABLED: bool = Field(
        default=True,
        description="JWT 인증 활성화 여부 (로컬 개발 시에만 false 권장)"
    )
    AUTH_ISSUER: Optional[str] = Field(
        default=None,
        description="JWT 발급자 (예: https://dev-123456.okta.com/oauth2/default)"
    )
    AUTH_JWKS_URL: Optional[str] = Field(
        default=None,
        description="JWKS URL (없으면 {AUTH_ISSUER}/v1/keys 사용)"
    )
    AUTH_AUDIENCE: Optional[str] = Field(default=None, description="기대하는 audience (선택)")
    AUTH_ALGORITHMS: List[str] = ["RS256"]
    AUTH_JWKS_CACHE_TTL: int = Field(default=3600, description="JWKS 캐시 시간(초)")

    # /api/basic 공개 생성 엔드포인트 (하위 호환용, 정식 경로는 POST /api/stocks)
    PUBLIC_CREATE_ENABLED: bool = Field(
        default=True,
        description="인증 없는 POST /api/basic 종목 생성 허용 여부"
    )

    @field_validator('DEBUG', mode='before')
    @classmethod
    def parse_debug(cls, v):
        """빈 문자열을 False로 변환"""
        return _parse_bool(v, False)

    @field_validator('AUTH_ENABLED', mode='before')
    @classmethod
    def parse_auth_enabled(cls, v):
        """빈 문자열을 True로 변환 (인증은 기본 활성화)"""
        return _parse_bool(v, True)

    @field_validator('PUBLIC_CREATE_ENABLED', mode='before')
    @classmethod
    def parse_public_create_enabled(cls, v):
        """빈 문자열을 True로 변환"""
        return _parse_bool(v, True)

    @field_validator('STORAGE_BACKEND', mode='before')
    @classmethod
    def parse_storage_backend(cls, v):
        if v == '' or v is None:
            return "mongodb"
        v = str(v).strip().lower()
        if v not in ("mongodb", "memory"):
            raise ValueError(f"지원하지 않는 STORAGE_BACKEND: {v}")
        return v

    @property
    def jwks_url(self) -> Optional[str]:
        """사용할 JWKS URL 반환 (Okta 기본 경로: {issuer}/v1/keys)"""
        if self.AUTH_JWKS_URL:
            return self.AUTH_JWKS_URL
        if self.AUTH_ISSUER:
            return f"{self.AUTH_ISSUER.rstrip('/')}/v1/keys"
        return None

    def get_mongodb_url(self) -> str:
        """
        MongoDB 연결 URL을 구성합니다.
        사용자/비밀번호가 있고 URL에 인증 정보가 없으면 URL에 추가합니다.
        """
        mongodb_url = self.MONGODB_URL
        if self.MONGODB_USER and self.MONGODB_PASSWORD:
            credentials = f"{quote_plus(self.MONGODB_USER)}:{quote_plus(self.MONGODB_PASSWORD)}"
            if "://" in mongodb_url:
                if "@" not in mongodb_url:
                    schema, rest = mongodb_url.split("://", 1)
                    mongodb_url = f"{schema}://{credentials}@{rest}"
            else:
                mongodb_url = f"mongodb+srv://{credentials}@{mongodb_url}"
        return mongodb_url

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"


# 기본 설정 객체 (create_app에 설정을 넘기지 않으면 사용)
settings = Settings()
