"""MongoDB를 사용한 Stock Repository 구현"""
from decimal import Decimal
from typing import Any, Dict, List, Optional
import logging
from bson.decimal128 import Decimal128
from pymongo.collection import Collection
from pymongo.errors import DuplicateKeyError
from app.core.exceptions import StockAlreadyExistsError
from app.domain.entities.stock import Stock
from app.domain.repositories.stock_repository import IStockRepository
from app.infrastructure.database.mongodb_client import close_mongodb_client

logger = logging.getLogger(__name__)


def _to_document(stock: Stock) -> Dict[str, Any]:
    """Stock -> MongoDB 문서 (ticker를 _id로, price는 Decimal128로 저장)"""
    return {
        "_id": stock.ticker,
        "company_name": stock.company_name,
        "price": Decimal128(stock.price),
        "description": stock.description,
    }


def _from_document(doc: Dict[str, Any]) -> Stock:
    price = doc["price"]
    if isinstance(price, Decimal128):
        price = price.to_decimal()
    return Stock(
        ticker=doc["_id"],
        company_name=doc["company_name"],
        price=Decimal(str(price)),
        description=doc.get("description"),
    )


class MongoDBStockRepository(IStockRepository):
    """MongoDB를 사용한 Stock Repository 구현"""

    def __init__(self, collection: Collection, client=None):
        """
        Args:
            collection: 종목 컬렉션
            client: close()에서 닫을 MongoClient (없으면 닫지 않음)
        """
        self._collection = collection
        self._client = client

    def get_by_id(self, ticker: str) -> Optional[Stock]:
        """티커로 종목 조회"""
        try:
            doc = self._collection.find_one({"_id": ticker})
        except Exception as e:
            logger.error(f"종목 조회 중 오류 발생 ({ticker}): {e}", exc_info=True)
            raise
        if doc:
            return _from_document(doc)
        return None

    def get_all(self) -> List[Stock]:
        """모든 종목 조회 (티커 순)"""
        try:
            return [_from_document(doc) for doc in self._collection.find({}).sort("_id", 1)]
        except Exception as e:
            logger.error(f"종목 목록 조회 중 오류 발생: {e}", exc_info=True)
            raise

    def insert(self, stock: Stock) -> Stock:
        """종목 추가 (_id 중복이면 StockAlreadyExistsError)"""
        try:
            self._collection.insert_one(_to_document(stock))
            return stock
        except DuplicateKeyError:
            raise StockAlreadyExistsError(stock.ticker)
        except Exception as e:
            logger.error(f"종목 추가 중 오류 발생 ({stock.ticker}): {e}", exc_info=True)
            raise

    def save(self, stock: Stock) -> Stock:
        """종목 저장 (upsert)"""
        try:
            self._collection.replace_one({"_id": stock.ticker}, _to_document(stock), upsert=True)
            return stock
        except Exception as e:
            logger.error(f"종목 저장 중 오류 발생 ({stock.ticker}): {e}", exc_info=True)
            raise

    def delete(self, stock: Stock) -> None:
        """종목 삭제"""
        try:
            self._collection.delete_one({"_id": stock.ticker})
        except Exception as e:
            logger.error(f"종목 삭제 중 오류 발생 ({stock.ticker}): {e}", exc_info=True)
            raise

    def close(self) -> None:
        if self._client is not None:
            close_mongodb_client(self._client)
            self._client = None
