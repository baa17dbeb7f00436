from functools import lru_cache

from pymongo import MongoClient

from services.membership.app.core.MemberService import MemberService
from services.membership.app.db.client import create_client, get_database
from services.membership.app.db.repositories.members import MongoMemberRepository


@lru_cache
def get_mongo_client() -> MongoClient:
    """MongoDB 클라이언트 (프로세스 당 1개)"""
    return create_client()


@lru_cache
def get_member_repository() -> MongoMemberRepository:
    """회원 Repository 의존성"""
    return MongoMemberRepository(get_database(get_mongo_client()))


@lru_cache
def get_member_service() -> MemberService:
    """회원 서비스 의존성"""
    return MemberService(member_repository=get_member_repository())


def close_mongo_client() -> None:
    if get_mongo_client.cache_info().currsize:
        get_mongo_client().close()
        get_mongo_client.cache_clear()
        get_member_repository.cache_clear()
        get_member_service.cache_clear()
