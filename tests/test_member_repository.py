"""
회원 Repository 테스트

MongoMemberRepository(mongomock)와 InMemoryMemberRepository가 같은 계약을 따르는지 확인합니다.
"""
from unittest.mock import patch

import pytest
import pytest_asyncio
from pymongo.errors import ServerSelectionTimeoutError

from libs.schemas import Member, MemberUpdate
from services.membership.app.db.repositories.members import (
    MEMBERS_COLLECTION,
    MemberNotFoundError,
    MemberRepositoryError,
)


@pytest_asyncio.fixture(params=["mongo", "memory"])
async def repository(request, mongo_repository, memory_repository):
    if request.param == "mongo":
        return mongo_repository
    return memory_repository


class TestMemberRepositoryContract:

    @pytest.mark.asyncio
    async def test_create_and_get_member(self, repository, john):
        await repository.create_member(john)

        found = await repository.get_member_by_id(john.id)

        assert found == john

    @pytest.mark.asyncio
    async def test_get_missing_member_raises_not_found(self, repository):
        with pytest.raises(MemberNotFoundError) as exc_info:
            await repository.get_member_by_id(999999)

        assert exc_info.value.member_id == 999999

    @pytest.mark.asyncio
    async def test_duplicate_id_is_rejected(self, repository, john):
        await repository.create_member(john)

        with pytest.raises(MemberRepositoryError) as exc_info:
            await repository.create_member(john.model_copy(update={"firstName": "Jane"}))

        assert not isinstance(exc_info.value, MemberNotFoundError)
        assert (await repository.get_member_by_id(john.id)).firstName == "John"

    @pytest.mark.asyncio
    async def test_get_all_members(self, repository, john):
        jane = Member(
            id=654321,
            firstName="Jane",
            lastName="Smith",
            email="Jane.Smith@gmail.com",
            dateOfBirth="1985-05-05",
        )
        await repository.create_member(john)
        await repository.create_member(jane)

        members = await repository.get_all_members()

        assert sorted(members, key=lambda m: m.id) == [john, jane]

    @pytest.mark.asyncio
    async def test_get_all_members_empty(self, repository):
        assert await repository.get_all_members() == []

    @pytest.mark.asyncio
    async def test_update_applies_only_non_empty_fields(self, repository, john):
        await repository.create_member(john)

        await repository.update_member_by_id(
            MemberUpdate(email="new@x.com", firstName="", lastName=None),
            john.id,
        )

        found = await repository.get_member_by_id(john.id)
        assert found.email == "new@x.com"
        assert found.firstName == "John"
        assert found.lastName == "Doe"
        assert found.dateOfBirth == "1990-01-01"

    @pytest.mark.asyncio
    async def test_update_without_changes_is_noop(self, repository, john):
        await repository.create_member(john)

        await repository.update_member_by_id(MemberUpdate(), john.id)

        assert await repository.get_member_by_id(john.id) == john

    @pytest.mark.asyncio
    async def test_update_missing_member_is_not_an_error(self, repository):
        await repository.update_member_by_id(MemberUpdate(firstName="Ghost"), 111111)

        with pytest.raises(MemberNotFoundError):
            await repository.get_member_by_id(111111)

    @pytest.mark.asyncio
    async def test_delete_member(self, repository, john):
        await repository.create_member(john)

        await repository.delete_member_by_id(john.id)

        with pytest.raises(MemberNotFoundError):
            await repository.get_member_by_id(john.id)


class TestMongoMemberRepository:

    @pytest.mark.asyncio
    async def test_documents_use_json_field_names(self, mongo_repository, mongo_database, john):
        await mongo_repository.create_member(john)

        document = mongo_database[MEMBERS_COLLECTION].find_one({"id": john.id}, {"_id": 0})

        assert document == {
            "id": 123456,
            "firstName": "John",
            "lastName": "Doe",
            "email": "John.Doe@gmail.com",
            "dateOfBirth": "1990-01-01",
        }

    @pytest.mark.asyncio
    async def test_get_all_members_skips_malformed_documents(self, mongo_repository, mongo_database, john):
        await mongo_repository.create_member(john)
        mongo_database[MEMBERS_COLLECTION].insert_one({"id": 222222, "firstName": "Broken"})

        members = await mongo_repository.get_all_members()

        assert members == [john]

    @pytest.mark.asyncio
    async def test_malformed_document_by_id_is_repository_error(self, mongo_repository, mongo_database):
        mongo_database[MEMBERS_COLLECTION].insert_one({"id": 222222, "firstName": "Broken"})

        with pytest.raises(MemberRepositoryError) as exc_info:
            await mongo_repository.get_member_by_id(222222)

        assert not isinstance(exc_info.value, MemberNotFoundError)

    @pytest.mark.asyncio
    async def test_driver_errors_are_wrapped(self, mongo_repository):
        with patch.object(
            mongo_repository._collection,
            "find_one",
            side_effect=ServerSelectionTimeoutError("no servers"),
        ):
            with pytest.raises(MemberRepositoryError) as exc_info:
                await mongo_repository.get_member_by_id(123456)

        assert not isinstance(exc_info.value, MemberNotFoundError)
        assert isinstance(exc_info.value.__cause__, ServerSelectionTimeoutError)

    @pytest.mark.asyncio
    async def test_list_driver_error_is_wrapped(self, mongo_repository):
        with patch.object(
            mongo_repository._collection,
            "find",
            side_effect=ServerSelectionTimeoutError("no servers"),
        ):
            with pytest.raises(MemberRepositoryError):
                await mongo_repository.get_all_members()
