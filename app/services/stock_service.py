"""
종목 관리 서비스

티커 정규화와 존재 여부 확인을 담당하고, 저장은 Repository에 위임합니다.
"""
from typing import List, Optional
import logging
from app.core.exceptions import StockNotFoundError
from app.domain.entities.stock import Stock, normalize_ticker
from app.domain.repositories.stock_repository import IStockRepository

logger = logging.getLogger(__name__)


class StockService:
    """Stock 비즈니스 로직"""

    def __init__(self, repository: IStockRepository):
        self.repository = repository

    def create_stock(self, stock: Stock) -> Stock:
        """
        새 종목을 저장합니다.

        Args:
            stock: 생성할 종목 (ticker는 대문자로 정규화됨)

        Returns:
            저장된 종목

        Raises:
            StockAlreadyExistsError: 같은 티커가 이미 있을 경우
        """
        stock.ticker = normalize_ticker(stock.ticker)
        created = self.repository.insert(stock)
        logger.info(f"종목 추가 성공: {created.ticker} ({created.company_name})")
        return created

    def get_all_stocks(self) -> List[Stock]:
        """모든 종목 조회"""
        return self.repository.get_all()

    def get_stock_by_ticker(self, ticker: str) -> Optional[Stock]:
        """티커로 종목 조회 (대소문자 무시, 없으면 None)"""
        return self.repository.get_by_id(normalize_ticker(ticker))

    def update_stock(self, ticker: str, stock: Stock) -> Stock:
        """
        종목 정보를 수정합니다.

        회사명, 가격, 설명만 바뀌며 ticker는 요청 본문과 관계없이 유지됩니다.

        Raises:
            StockNotFoundError: 종목이 없을 경우
        """
        existing = self._get_existing(ticker)
        existing.apply_update(stock)
        updated = self.repository.save(existing)
        logger.info(f"종목 수정 성공: {updated.ticker}")
        return updated

    def delete_stock(self, ticker: str) -> None:
        """
        종목을 삭제합니다.

        Raises:
            StockNotFoundError: 종목이 없을 경우
        """
        existing = self._get_existing(ticker)
        self.repository.delete(existing)
        logger.info(f"종목 삭제 성공: {existing.ticker}")

    def _get_existing(self, ticker: str) -> Stock:
        existing = self.repository.get_by_id(normalize_ticker(ticker))
        if existing is None:
            raise StockNotFoundError(ticker)
        return existing
