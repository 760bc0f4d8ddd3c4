"""Stock 엔티티"""
import re
from dataclasses import dataclass, replace
from decimal import Decimal
from typing import Optional

TICKER_MAX_LENGTH = 10
TICKER_PATTERN = re.compile(r"[A-Z0-9.\-]+")
DESCRIPTION_MAX_LENGTH = 1000

# MongoDB Decimal128 표현 범위 (유효숫자 34자리, 지수 -6176 ~ 6111)
PRICE_MAX_DIGITS = 34
PRICE_MIN_EXPONENT = -6176
PRICE_MAX_EXPONENT = 6111


def normalize_ticker(ticker: str) -> str:
    """조회 키로 쓰기 위해 티커를 대문자로 정규화"""
    return ticker.strip().upper()


def validate_ticker(ticker: str) -> str:
    """
    정규화한 티커를 검증합니다.

    URL 경로(/api/stocks/{ticker})에 그대로 쓰이므로 영문/숫자/점/하이픈만 허용하고,
    길이는 공백을 제거한 뒤 기준으로 확인합니다.
    """
    ticker = normalize_ticker(ticker)
    if not ticker:
        raise ValueError("ticker는 비어 있을 수 없습니다")
    if len(ticker) > TICKER_MAX_LENGTH:
        raise ValueError(f"ticker는 최대 {TICKER_MAX_LENGTH}자입니다")
    if not TICKER_PATTERN.fullmatch(ticker):
        raise ValueError("ticker는 영문, 숫자, '.', '-'만 사용할 수 있습니다")
    return ticker


def validate_price(price: Decimal) -> Decimal:
    """
    가격이 반올림 없이 저장될 수 있는지 확인합니다.

    끝자리 0도 유효숫자로 세므로 "1.000" 같은 값도 표기 그대로 저장/반환됩니다.
    """
    _, digits, exponent = price.as_tuple()
    if len(digits) > PRICE_MAX_DIGITS:
        raise ValueError(f"price는 유효숫자 최대 {PRICE_MAX_DIGITS}자리입니다")
    if not PRICE_MIN_EXPONENT <= exponent <= PRICE_MAX_EXPONENT:
        raise ValueError("price 지수가 허용 범위를 벗어났습니다")
    return price


@dataclass
class Stock:
    """주식 종목 엔티티 (ticker가 기본 키)"""
    ticker: str
    company_name: str
    price: Decimal
    description: Optional[str] = None

    def copy(self) -> "Stock":
        return replace(self)

    def apply_update(self, other: "Stock") -> None:
        """ticker를 제외한 필드를 other 값으로 덮어쓴다"""
        self.company_name = other.company_name
        self.price = other.price
        self.description = other.description
