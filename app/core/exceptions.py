"""도메인 / 인증 예외 정의"""


class StockNotFoundError(Exception):
    """티커에 해당하는 종목이 없음 (404)"""

    def __init__(self, ticker: str):
        self.ticker = ticker
        super().__init__(f"Stock not found: {ticker}")


class StockAlreadyExistsError(Exception):
    """같은 티커의 종목이 이미 존재함 (409)"""

    def __init__(self, ticker: str):
        self.ticker = ticker
        super().__init__(f"Stock already exists: {ticker}")


class AuthenticationError(Exception):
    """Bearer 토큰 인증 실패 (401)"""
    pass


class TokenExpiredError(AuthenticationError):
    """토큰 만료"""
    pass


class InvalidTokenError(AuthenticationError):
    """토큰 서명/발급자/형식 오류"""
    pass
