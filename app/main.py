from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from contextlib import asynccontextmanager
from typing import Optional
import logging
from app.api.api import api_router
from app.application.dependencies import create_stock_repository
from app.core.config import Settings, settings as default_settings
from app.core.security import TokenVerifier
from app.domain.repositories.stock_repository import IStockRepository
from app.middleware.auth_middleware import AuthMiddleware
from app.services.stock_service import StockService

logger = logging.getLogger('main')

CORS_ALLOW_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
CORS_ALLOW_HEADERS = ["Authorization", "Content-Type", "X-Requested-With", "Accept"]


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info(f"{app.title} 시작 (저장소: {app.state.settings.STORAGE_BACKEND})")
    yield
    # Shutdown: 저장소 연결 정리
    app.state.stock_service.repository.close()
    logger.info(f"{app.title} 종료")


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """요청 본문/파라미터 검증 실패는 400으로 반환"""
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


async def unhandled_exception_handler(request: Request, exc: Exception):
    logger.error(f"처리되지 않은 오류: {request.method} {request.url.path} - {exc}", exc_info=exc)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Internal Server Error"},
    )


def create_app(
    settings: Optional[Settings] = None,
    repository: Optional[IStockRepository] = None,
    verifier: Optional[TokenVerifier] = None,
) -> FastAPI:
    """
    애플리케이션 생성

    미들웨어 체인(CORS -> 인증 -> 라우터)과 서비스는 여기서 한 번만 구성되며
    전역 객체 대신 app.state를 통해 요청 처리에 전달됩니다.

    Args:
        settings: 설정 (없으면 .env / 환경변수 기본 설정)
        repository: Stock Repository (없으면 STORAGE_BACKEND 설정으로 생성)
        verifier: JWT 검증기 (없으면 AUTH_* 설정으로 생성)
    """
    settings = settings or default_settings
    repository = repository or create_stock_repository(settings)
    verifier = verifier or TokenVerifier.from_settings(settings)

    if not settings.AUTH_ENABLED:
        logger.warning("JWT 인증이 비활성화되어 있습니다 (AUTH_ENABLED=false). 로컬 개발에서만 사용하세요.")
    elif not verifier.is_configured:
        logger.warning("AUTH_ISSUER가 설정되지 않아 보호된 엔드포인트는 모두 401을 반환합니다.")

    app = FastAPI(
        title=settings.PROJECT_NAME,
        description=settings.PROJECT_DESCRIPTION,
        version=settings.PROJECT_VERSION,
        debug=settings.DEBUG,
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.stock_service = StockService(repository)

    # add_middleware는 나중에 추가한 것이 바깥쪽에서 실행됨.
    # CORS를 가장 바깥에 두어 401 응답에도 CORS 헤더가 붙도록 한다.
    app.add_middleware(AuthMiddleware, verifier=verifier, enable_auth=settings.AUTH_ENABLED)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=CORS_ALLOW_METHODS,
        allow_headers=CORS_ALLOW_HEADERS,
        max_age=settings.CORS_MAX_AGE,
    )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    app.include_router(api_router)

    @app.get("/health", tags=["기본"], summary="헬스 체크")
    def health():
        return {"status": "UP"}

    return app
