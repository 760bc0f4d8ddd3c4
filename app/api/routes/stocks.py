from fastapi import APIRouter, Depends, HTTPException, Response, status
from typing import List
from app.application.dependencies import get_stock_service
from app.core.exceptions import StockAlreadyExistsError, StockNotFoundError
from app.schemas.stock import StockCreate, StockResponse, StockUpdate
from app.services.stock_service import StockService
import logging

logger = logging.getLogger(__name__)

router = APIRouter()


def create_stock_response(stock: StockCreate, response: Response, service: StockService) -> StockResponse:
    """
    종목을 생성하고 201 응답 본문을 만듭니다.
    POST /api/stocks 와 POST /api/basic 이 같이 사용합니다.
    """
    try:
        created = service.create_stock(stock.to_entity())
        response.headers["Location"] = f"/api/stocks/{created.ticker}"
        return StockResponse.from_entity(created)
    except StockAlreadyExistsError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except Exception as e:
        logger.error(f"종목 추가 중 오류 발생: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"종목 추가 중 오류 발생: {str(e)}")


@router.post("", summary="종목 추가", status_code=status.HTTP_201_CREATED, response_model=StockResponse)
def create_stock(
    stock: StockCreate,
    response: Response,
    service: StockService = Depends(get_stock_service),
):
    """
    새 종목을 추가합니다.

    - **ticker**: 종목 티커 (필수, 최대 10자, 대문자로 저장)
    - **companyName**: 회사명 (필수)
    - **price**: 주가 (필수, 문자열 권장 예: "189.25")
    - **description**: 설명 (선택, 최대 1000자)

    동일한 ticker가 이미 존재하면 409를 반환합니다.
    """
    return create_stock_response(stock, response, service)


@router.get("", summary="종목 목록 조회", response_model=List[StockResponse])
def get_all_stocks(service: StockService = Depends(get_stock_service)):
    """저장된 모든 종목을 반환합니다."""
    try:
        return [StockResponse.from_entity(s) for s in service.get_all_stocks()]
    except Exception as e:
        logger.error(f"종목 목록 조회 중 오류 발생: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"종목 목록 조회 중 오류 발생: {str(e)}")


@router.get("/{ticker}", summary="특정 종목 조회", response_model=StockResponse)
def get_stock(ticker: str, service: StockService = Depends(get_stock_service)):
    """티커로 종목을 조회합니다 (대소문자 무시)."""
    try:
        stock = service.get_stock_by_ticker(ticker)
    except Exception as e:
        logger.error(f"종목 조회 중 오류 발생: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"종목 조회 중 오류 발생: {str(e)}")
    if stock is None:
        raise HTTPException(status_code=404, detail=f"Stock not found: {ticker}")
    return StockResponse.from_entity(stock)


@router.put("/{ticker}", summary="종목 정보 수정", response_model=StockResponse)
def update_stock(
    ticker: str,
    stock_update: StockUpdate,
    service: StockService = Depends(get_stock_service),
):
    """
    종목 정보를 수정합니다.

    companyName, price, description만 변경되며 ticker는 변경할 수 없습니다.
    본문에 다른 ticker가 있어도 무시됩니다.
    """
    try:
        updated = service.update_stock(ticker, stock_update.to_entity(ticker))
        return StockResponse.from_entity(updated)
    except StockNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error(f"종목 수정 중 오류 발생: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"종목 수정 중 오류 발생: {str(e)}")


@router.delete("/{ticker}", summary="종목 삭제", status_code=status.HTTP_204_NO_CONTENT)
def delete_stock(ticker: str, service: StockService = Depends(get_stock_service)):
    """종목을 삭제합니다 (하드 삭제)."""
    try:
        service.delete_stock(ticker)
    except StockNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error(f"종목 삭제 중 오류 발생: {str(e)}", exc_info=True)
        raise HTTPException(status_code=500, detail=f"종목 삭제 중 오류 발생: {str(e)}")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
