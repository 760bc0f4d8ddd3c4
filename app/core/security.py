"""
JWT Bearer 토큰 검증

외부 인증 서버(Okta 등 OIDC 발급자)가 공개한 JWKS로 토큰 서명을 로컬에서 검증합니다.
공개키는 PyJWKClient가 캐시하므로 첫 요청 이후에는 인증 서버에 요청하지 않습니다.
"""
import logging
from typing import Any, Dict, List, Optional

import jwt
from jwt import PyJWKClient, PyJWKClientError

from app.core.config import Settings
from app.core.exceptions import AuthenticationError, InvalidTokenError, TokenExpiredError

logger = logging.getLogger(__name__)


class TokenVerifier:
    """
    JWKS 기반 JWT 검증기

    사용법:
        verifier = TokenVerifier.from_settings(settings)
        claims = verifier.verify_token(token)
    """

    def __init__(
        self,
        issuer: Optional[str],
        jwks_url: Optional[str],
        audience: Optional[str] = None,
        algorithms: Optional[List[str]] = None,
        jwks_cache_ttl: int = 3600,
    ):
        self._issuer = issuer
        self._jwks_url = jwks_url
        self._audience = audience
        self._algorithms = algorithms or ["RS256"]
        self._jwks_cache_ttl = jwks_cache_ttl
        self._jwk_client: Optional[PyJWKClient] = None

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenVerifier":
        return cls(
            issuer=settings.AUTH_ISSUER,
            jwks_url=settings.jwks_url,
            audience=settings.AUTH_AUDIENCE,
            algorithms=settings.AUTH_ALGORITHMS,
            jwks_cache_ttl=settings.AUTH_JWKS_CACHE_TTL,
        )

    @property
    def is_configured(self) -> bool:
        return bool(self._issuer and self._jwks_url)

    def _get_jwk_client(self) -> PyJWKClient:
        if self._jwk_client is None:
            if not self.is_configured:
                raise AuthenticationError("JWT 발급자(AUTH_ISSUER)가 설정되지 않았습니다")
            self._jwk_client = PyJWKClient(
                self._jwks_url,
                cache_keys=True,
                lifespan=self._jwks_cache_ttl,
            )
            logger.info(f"JWKS 클라이언트 생성: {self._jwks_url}")
        return self._jwk_client

    def verify_token(self, token: str) -> Dict[str, Any]:
        """
        토큰을 검증하고 클레임을 반환합니다.

        Args:
            token: "Bearer " 접두사를 뗀 JWT

        Returns:
            디코딩된 클레임

        Raises:
            TokenExpiredError: 토큰이 만료된 경우
            InvalidTokenError: 서명/발급자/audience가 맞지 않거나 공개키를 가져오지 못한 경우
        """
        jwk_client = self._get_jwk_client()
        try:
            signing_key = jwk_client.get_signing_key_from_jwt(token)
            return jwt.decode(
                token,
                signing_key.key,
                algorithms=self._algorithms,
                issuer=self._issuer,
                audience=self._audience,
                options={
                    "verify_aud": self._audience is not None,
                    "require": ["exp", "iss"],
                },
            )
        except jwt.ExpiredSignatureError:
            raise TokenExpiredError("Token has expired")
        except PyJWKClientError as e:
            logger.error(f"JWKS 공개키 조회 실패: {e}")
            raise InvalidTokenError(f"Failed to get signing key: {e}")
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}")
