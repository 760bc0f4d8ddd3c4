"""
주식 관련 API 스키마 정의

API 요청/응답용 스키마를 정의합니다. JSON 필드명은 프론트엔드와 맞춰 camelCase를 쓰고,
가격은 부동소수점 손실이 없도록 Decimal로 받아 문자열로 내보냅니다.
"""
from decimal import Decimal
from pydantic import BaseModel, Field, field_serializer, field_validator
from typing import Optional
from app.domain.entities.stock import (
    DESCRIPTION_MAX_LENGTH,
    PRICE_MAX_DIGITS,
    Stock,
    validate_price,
    validate_ticker,
)


class StockBase(BaseModel):
    company_name: str = Field(..., alias="companyName", min_length=1, description="회사명")
    price: Decimal = Field(
        ...,
        allow_inf_nan=False,
        max_digits=PRICE_MAX_DIGITS,
        description="주가 (문자열 또는 숫자, 유효숫자 최대 34자리)",
    )
    description: Optional[str] = Field(
        None, max_length=DESCRIPTION_MAX_LENGTH, description="종목 설명"
    )

    class Config:
        populate_by_name = True

    @field_validator('price')
    @classmethod
    def check_price(cls, v: Decimal) -> Decimal:
        return validate_price(v)


class StockCreate(StockBase):
    """종목 생성 요청 스키마"""
    ticker: str = Field(..., description="종목 티커 (영문/숫자/'.'/'-', 최대 10자)")

    @field_validator('ticker')
    @classmethod
    def normalize(cls, v: str) -> str:
        return validate_ticker(v)

    def to_entity(self) -> Stock:
        return Stock(
            ticker=self.ticker,
            company_name=self.company_name,
            price=self.price,
            description=self.description,
        )


class StockUpdate(StockBase):
    """
    종목 정보 업데이트 요청 스키마

    ticker는 받아도 무시합니다 (경로의 ticker가 기준).
    """
    ticker: Optional[str] = Field(None, description="무시됨")

    def to_entity(self, ticker: str) -> Stock:
        return Stock(
            ticker=ticker,
            company_name=self.company_name,
            price=self.price,
            description=self.description,
        )


class StockResponse(BaseModel):
    """종목 정보 응답 스키마"""
    ticker: str
    company_name: str = Field(..., alias="companyName")
    price: Decimal
    description: Optional[str] = None

    class Config:
        populate_by_name = True

    @field_serializer('price')
    def serialize_price(self, price: Decimal) -> str:
        return str(price)

    @classmethod
    def from_entity(cls, stock: Stock) -> "StockResponse":
        return cls(
            ticker=stock.ticker,
            company_name=stock.company_name,
            price=stock.price,
            description=stock.description,
        )
