"""Dependency Injection 설정"""
import logging
from fastapi import Request
from app.core.config import Settings
from app.domain.repositories.stock_repository import IStockRepository
from app.infrastructure.database.mongodb_client import create_sync_mongodb_client
from app.infrastructure.repositories.memory_stock_repository import InMemoryStockRepository
from app.infrastructure.repositories.mongodb_stock_repository import MongoDBStockRepository
from app.services.stock_service import StockService

logger = logging.getLogger(__name__)


def create_stock_repository(settings: Settings) -> IStockRepository:
    """
    설정(STORAGE_BACKEND)에 맞는 Stock Repository를 생성합니다.
    기본값은 MongoDB이며, memory는 로컬 개발/테스트용입니다.
    """
    if settings.STORAGE_BACKEND == "memory":
        logger.warning("메모리 저장소를 사용합니다. 프로세스 종료 시 데이터가 사라집니다.")
        return InMemoryStockRepository()

    client, db = create_sync_mongodb_client(settings)
    return MongoDBStockRepository(db[settings.MONGODB_COLLECTION], client=client)


def get_stock_service(request: Request) -> StockService:
    """
    FastAPI 의존성 함수: 앱 시작 시 생성된 StockService 반환

    사용 예시:
    ```python
    @router.get("")
    def get_all_stocks(service: StockService = Depends(get_stock_service)):
        return service.get_all_stocks()
    ```
    """
    return request.app.state.stock_service
