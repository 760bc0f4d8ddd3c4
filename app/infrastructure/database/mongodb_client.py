"""MongoDB 클라이언트 관리"""
from pymongo import MongoClient
from pymongo.database import Database
from typing import Tuple
import logging
from app.core.config import Settings

logger = logging.getLogger(__name__)


def create_sync_mongodb_client(settings: Settings) -> Tuple[MongoClient, Database]:
    """
    동기 MongoDB 클라이언트를 생성합니다.

    MongoClient는 생성 시점에 서버에 연결하지 않으므로 MongoDB가 내려가 있어도
    앱은 시작되고, 실제 조회/저장 시점에 오류가 발생합니다.
    클라이언트는 저장소가 소유하며 앱 종료 시 close_mongodb_client로 닫습니다.
    """
    database_name = settings.MONGODB_DATABASE
    client = MongoClient(
        settings.get_mongodb_url(),
        serverSelectionTimeoutMS=5000,
        connectTimeoutMS=5000,
    )
    logger.info(f"MongoDB 동기 클라이언트 생성: {database_name}")
    return client, client[database_name]


def close_mongodb_client(client: MongoClient) -> None:
    """MongoDB 연결 종료"""
    client.close()
    logger.info("MongoDB 동기 클라이언트 연결 종료")
