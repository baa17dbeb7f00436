from pymongo import MongoClient
from pymongo.database import Database

from services.membership.app.db.connection import Settings, settings


def create_client(config: Settings = settings) -> MongoClient:
    """
    MongoDB 클라이언트를 생성합니다.
    프로세스 당 한 번 생성해서 종료 시까지 재사용합니다 (내부 커넥션 풀 사용).
    """
    return MongoClient(
        config.MONGODB_URI,
        serverSelectionTimeoutMS=config.MONGODB_TIMEOUT_MS,
    )


def get_database(client: MongoClient, config: Settings = settings) -> Database:
    return client[config.MONGODB_DATABASE]
