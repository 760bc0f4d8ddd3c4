"""
JWT 인증 미들웨어

공개 경로(/api/basic/**, 헬스 체크, API 문서, CORS preflight)를 제외한 모든 요청에
유효한 Bearer 토큰을 요구합니다. 역할/권한 구분은 없으며 인증만 확인합니다.

검증에 성공하면 디코딩된 클레임을 request.state.user에 넣습니다.
"""

import logging
from typing import Iterable, Optional, Tuple
from fastapi import Request, status
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool
from starlette.middleware.base import BaseHTTPMiddleware
from app.core.exceptions import AuthenticationError
from app.core.security import TokenVerifier

logger = logging.getLogger(__name__)

DEFAULT_PUBLIC_PATHS: Tuple[str, ...] = (
    "/api/basic",
    "/health",
    "/docs",
    "/redoc",
    "/openapi.json",
)


def is_public_path(path: str, public_paths: Iterable[str] = DEFAULT_PUBLIC_PATHS) -> bool:
    """경로가 공개 경로이거나 그 하위 경로인지 확인 (/api/basicx 같은 접두사 일치는 제외)"""
    for public in public_paths:
        if path == public or path.startswith(public.rstrip("/") + "/"):
            return True
    return False


def extract_bearer_token(authorization: Optional[str]) -> Optional[str]:
    """Authorization 헤더에서 Bearer 토큰 추출 (없거나 형식이 다르면 None)"""
    if not authorization:
        return None
    scheme, _, token = authorization.partition(" ")
    if scheme.lower() != "bearer" or not token.strip():
        return None
    return token.strip()


def _unauthorized(detail: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_401_UNAUTHORIZED,
        content={"detail": detail},
        headers={"WWW-Authenticate": "Bearer"},
    )


class AuthMiddleware(BaseHTTPMiddleware):
    """
    Bearer 토큰 인증 미들웨어

    토큰이 없거나 유효하지 않으면 라우터에 도달하기 전에 401을 반환합니다.
    """

    def __init__(
        self,
        app,
        verifier: TokenVerifier,
        enable_auth: bool = True,
        public_paths: Iterable[str] = DEFAULT_PUBLIC_PATHS,
    ):
        """
        Args:
            app: ASGI 애플리케이션
            verifier: 토큰 검증기
            enable_auth: 인증 활성화 여부 (False면 모든 요청 통과)
            public_paths: 인증 없이 허용할 경로 접두사
        """
        super().__init__(app)
        self.verifier = verifier
        self.enable_auth = enable_auth
        self.public_paths = tuple(public_paths)

    async def dispatch(self, request: Request, call_next):
        request.state.user = None

        if (
            not self.enable_auth
            or request.method == "OPTIONS"
            or is_public_path(request.url.path, self.public_paths)
        ):
            return await call_next(request)

        token = extract_bearer_token(request.headers.get("authorization"))
        if token is None:
            logger.debug(f"인증 헤더 없음: {request.method} {request.url.path}")
            return _unauthorized("Not authenticated")

        try:
            # JWKS 최초 조회가 블로킹 I/O이므로 스레드풀에서 실행
            request.state.user = await run_in_threadpool(self.verifier.verify_token, token)
        except AuthenticationError as e:
            logger.debug(f"토큰 검증 실패: {request.method} {request.url.path} - {e}")
            return _unauthorized(str(e))

        return await call_next(request)
