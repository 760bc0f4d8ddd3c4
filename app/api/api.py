from fastapi import APIRouter
from app.api.routes.basic import router as basic_router
from app.api.routes.stocks import router as stocks_router

# 메인 API 라우터 생성
api_router = APIRouter(prefix="/api")

# 공개 라우터 (/api/basic) 와 인증 라우터 (/api/stocks)
api_router.include_router(basic_router, prefix="/basic", tags=["기본"])
api_router.include_router(stocks_router, prefix="/stocks", tags=["주식"])
