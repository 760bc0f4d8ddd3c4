"""인증 없이 호출할 수 있는 기본 엔드포인트"""
from fastapi import APIRouter, Depends, HTTPException, Request, Response, status
from app.api.routes.stocks import create_stock_response
from app.application.dependencies import get_stock_service
from app.schemas.stock import StockCreate, StockResponse
from app.services.stock_service import StockService
import logging

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/hello", summary="Hello World")
def hello():
    return {"message": "Hello World"}


@router.get("/health", summary="헬스 체크")
def health():
    return {"status": "UP"}


@router.post(
    "",
    summary="종목 추가 (인증 없음, 사용 중단 예정)",
    status_code=status.HTTP_201_CREATED,
    response_model=StockResponse,
    deprecated=True,
)
def create_stock(
    stock: StockCreate,
    request: Request,
    response: Response,
    service: StockService = Depends(get_stock_service),
):
    """
    POST /api/stocks 와 같은 생성 로직을 인증 없이 노출합니다.

    기존 클라이언트 호환용이며 PUBLIC_CREATE_ENABLED=false 이면 404를 반환합니다.
    새 클라이언트는 인증이 필요한 POST /api/stocks 를 사용하세요.
    """
    if not request.app.state.settings.PUBLIC_CREATE_ENABLED:
        raise HTTPException(status_code=404, detail="Not Found")
    logger.warning(f"인증 없는 종목 생성 엔드포인트 호출: {stock.ticker}")
    return create_stock_response(stock, response, service)
