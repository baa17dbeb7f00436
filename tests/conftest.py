"""
Pytest configuration and fixtures.
"""
import mongomock
import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from libs.schemas import Member
from services.membership.app.core.MemberService import MemberService
from services.membership.app.db.repositories.members import (
    InMemoryMemberRepository,
    MongoMemberRepository,
)
from services.membership.app.dependencies import get_member_service
from services.membership.app.main import app


@pytest.fixture
def john() -> Member:
    return Member(
        id=123456,
        firstName="John",
        lastName="Doe",
        email="John.Doe@gmail.com",
        dateOfBirth="1990-01-01",
    )


@pytest.fixture
def memory_repository() -> InMemoryMemberRepository:
    return InMemoryMemberRepository()


@pytest.fixture
def mongo_database():
    """MongoDB 서버 없이 mongomock으로 대체한 데이터베이스"""
    return mongomock.MongoClient()["membership"]


@pytest_asyncio.fixture
async def mongo_repository(mongo_database) -> MongoMemberRepository:
    repository = MongoMemberRepository(mongo_database)
    await repository.ensure_indexes()
    return repository


@pytest_asyncio.fixture
async def client(memory_repository):
    """메모리 저장소를 사용하는 HTTP 클라이언트"""
    app.dependency_overrides[get_member_service] = lambda: MemberService(memory_repository)
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as http_client:
        yield http_client
    app.dependency_overrides.clear()
