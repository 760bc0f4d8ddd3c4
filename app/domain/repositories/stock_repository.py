"""Stock Repository 인터페이스"""
from abc import abstractmethod
from typing import List, Optional
from app.domain.entities.stock import Stock
from app.domain.repositories.base import BaseRepository


class IStockRepository(BaseRepository[Stock]):
    """
    Stock Repository 인터페이스

    대문자 티커를 키로 하는 저장소입니다. 구현체는 조회 키를 정규화하지 않으므로
    호출하는 쪽(StockService)에서 티커를 대문자로 넘겨야 합니다.
    """

    @abstractmethod
    def get_by_id(self, ticker: str) -> Optional[Stock]:
        """티커로 종목 조회"""
        pass

    @abstractmethod
    def get_all(self) -> List[Stock]:
        """모든 종목 조회 (순서 보장 없음)"""
        pass

    @abstractmethod
    def insert(self, stock: Stock) -> Stock:
        """
        새 종목 저장 (같은 티커가 있으면 StockAlreadyExistsError)

        존재 확인과 저장이 한 번에 이루어져야 동시 생성 요청 중 하나만 성공합니다.
        """
        pass

    @abstractmethod
    def save(self, stock: Stock) -> Stock:
        """종목 저장 (같은 티커가 있으면 덮어쓰기)"""
        pass

    @abstractmethod
    def delete(self, stock: Stock) -> None:
        """종목 삭제"""
        pass

    def close(self) -> None:
        """저장소 리소스 정리 (필요한 구현체만 재정의)"""
        pass
