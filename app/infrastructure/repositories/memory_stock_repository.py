"""메모리 기반 Stock Repository 구현 (로컬 개발 / 테스트용)"""
import threading
from typing import Dict, List, Optional
from app.core.exceptions import StockAlreadyExistsError
from app.domain.entities.stock import Stock
from app.domain.repositories.stock_repository import IStockRepository


class InMemoryStockRepository(IStockRepository):
    """
    프로세스 메모리에 종목을 보관하는 Repository

    저장/조회 시 복사본을 주고받으므로 호출하는 쪽에서 엔티티를 수정해도
    save()를 거치지 않으면 저장된 값은 바뀌지 않습니다.
    """

    def __init__(self):
        self._stocks: Dict[str, Stock] = {}
        self._lock = threading.Lock()

    def get_by_id(self, ticker: str) -> Optional[Stock]:
        with self._lock:
            stock = self._stocks.get(ticker)
            return stock.copy() if stock else None

    def get_all(self) -> List[Stock]:
        with self._lock:
            return [self._stocks[t].copy() for t in sorted(self._stocks)]

    def insert(self, stock: Stock) -> Stock:
        with self._lock:
            if stock.ticker in self._stocks:
                raise StockAlreadyExistsError(stock.ticker)
            self._stocks[stock.ticker] = stock.copy()
        return stock

    def save(self, stock: Stock) -> Stock:
        with self._lock:
            self._stocks[stock.ticker] = stock.copy()
        return stock

    def delete(self, stock: Stock) -> None:
        with self._lock:
            self._stocks.pop(stock.ticker, None)
