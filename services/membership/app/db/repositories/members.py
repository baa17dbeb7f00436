"""
회원 Repository 구현
"""
import asyncio
import logging
from typing import Callable, Protocol, TypeVar

from pydantic import ValidationError
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import PyMongoError

from libs.schemas import Member, MemberUpdate

logger = logging.getLogger(__name__)

MEMBERS_COLLECTION = "members"

T = TypeVar("T")


class MemberRepositoryError(Exception):
    """저장소 처리 중 발생한 오류 (연결 실패, 쓰기 실패 등)"""


class MemberNotFoundError(MemberRepositoryError):
    """조건에 맞는 회원 문서가 없음"""

    def __init__(self, member_id: int):
        super().__init__(f"Member {member_id} not found")
        self.member_id = member_id


class MemberRepositoryPort(Protocol):
    """회원 Repository 인터페이스"""

    async def create_member(self, member: Member) -> None:
        """
        회원을 저장합니다.

        Raises:
            MemberRepositoryError: 중복 ID 등으로 저장이 거부된 경우
        """
        ...

    async def get_member_by_id(self, member_id: int) -> Member:
        """
        member_id로 회원을 조회합니다.

        Raises:
            MemberNotFoundError: 회원이 없는 경우
            MemberRepositoryError: 그 외 저장소 오류
        """
        ...

    async def get_all_members(self) -> list[Member]:
        """
        전체 회원을 조회합니다. 정렬 순서는 저장소에 따릅니다.
        읽을 수 없는 문서는 건너뜁니다.
        """
        ...

    async def update_member_by_id(self, member: MemberUpdate, member_id: int) -> None:
        """
        비어 있지 않은 필드만 반영합니다.
        일치하는 회원이 없어도 오류로 취급하지 않습니다.
        """
        ...

    async def delete_member_by_id(self, member_id: int) -> None: ...

    async def ensure_indexes(self) -> None: ...


class _MongoRepositoryBase:
    """MongoDB Repository 기본 클래스"""

    def __init__(self, database: Database, collection_name: str):
        self._collection: Collection = database[collection_name]

    async def _run_in_thread(self, func: Callable[[], T]) -> T:
        """동기 드라이버 호출을 비동기로 실행"""
        return await asyncio.to_thread(func)

    async def _execute(self, func: Callable[[], T], action: str) -> T:
        try:
            return await self._run_in_thread(func)
        except PyMongoError as exc:
            logger.error("[DB] %s 실패 - collection: %s, 오류: %s", action, self._collection.name, exc)
            raise MemberRepositoryError(f"{action} 실패") from exc


class MongoMemberRepository(_MongoRepositoryBase):
    """pymongo를 사용한 회원 Repository 구현"""

    def __init__(self, database: Database):
        super().__init__(database, MEMBERS_COLLECTION)

    async def ensure_indexes(self) -> None:
        def _command():
            self._collection.create_index("id", unique=True, name="member_id_unique")

        await self._execute(_command, "인덱스 생성")

    async def create_member(self, member: Member) -> None:
        def _command():
            # insert_one이 _id를 추가하므로 새 dict를 넘김
            self._collection.insert_one(member.model_dump())

        await self._execute(_command, "회원 생성")

    async def get_member_by_id(self, member_id: int) -> Member:
        def _query():
            return self._collection.find_one({"id": member_id}, {"_id": 0})

        document = await self._execute(_query, "회원 조회")
        if document is None:
            raise MemberNotFoundError(member_id)
        try:
            return Member.model_validate(document)
        except ValidationError as exc:
            logger.error("[DB] 회원 문서 변환 실패 - id: %s, 오류: %s", member_id, exc)
            raise MemberRepositoryError("회원 문서 변환 실패") from exc

    async def get_all_members(self) -> list[Member]:
        def _query():
            return list(self._collection.find({}, {"_id": 0}))

        documents = await self._execute(_query, "회원 목록 조회")

        members: list[Member] = []
        for document in documents:
            try:
                members.append(Member.model_validate(document))
            except ValidationError as exc:
                # 잘못된 문서 하나 때문에 전체 목록 조회를 실패시키지 않음
                logger.warning("[DB] 회원 문서 변환 실패, 건너뜀 - 문서: %s, 오류: %s", document, exc)
        return members

    async def update_member_by_id(self, member: MemberUpdate, member_id: int) -> None:
        fields = member.changed_fields()
        if not fields:
            # 빈 $set은 MongoDB가 거부함
            return

        def _command():
            self._collection.update_one({"id": member_id}, {"$set": fields})

        await self._execute(_command, "회원 수정")

    async def delete_member_by_id(self, member_id: int) -> None:
        def _command():
            self._collection.delete_one({"id": member_id})

        await self._execute(_command, "회원 삭제")


class InMemoryMemberRepository:
    """메모리 기반 회원 Repository (테스트 및 로컬 실행용)"""

    def __init__(self):
        self._members: dict[int, dict] = {}

    async def ensure_indexes(self) -> None:
        return None

    async def create_member(self, member: Member) -> None:
        if member.id in self._members:
            raise MemberRepositoryError(f"duplicate member id: {member.id}")
        self._members[member.id] = member.model_dump()

    async def get_member_by_id(self, member_id: int) -> Member:
        document = self._members.get(member_id)
        if document is None:
            raise MemberNotFoundError(member_id)
        return Member.model_validate(document)

    async def get_all_members(self) -> list[Member]:
        return [Member.model_validate(document) for document in self._members.values()]

    async def update_member_by_id(self, member: MemberUpdate, member_id: int) -> None:
        document = self._members.get(member_id)
        if document is not None:
            document.update(member.changed_fields())

    async def delete_member_by_id(self, member_id: int) -> None:
        self._members.pop(member_id, None)
