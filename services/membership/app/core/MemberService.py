"""
회원 서비스
입력 값 검증, 저장소 호출, 오류 변환 등의 비즈니스 로직을 처리합니다.
"""
import logging
from dataclasses import dataclass
from typing import Any, Callable

from fastapi import status

from libs.common import generate_random_number, is_valid_date, is_valid_email
from libs.schemas import Member, MemberUpdate
from services.membership.app.db.repositories.members import (
    MemberNotFoundError,
    MemberRepositoryError,
    MemberRepositoryPort,
)
from services.membership.app.schemas.response import ErrorResponse, MessageResponse

logger = logging.getLogger(__name__)


@dataclass
class ServiceResponse:
    status_code: int
    body: Any


class MemberService:
    """회원 서비스"""

    def __init__(
        self,
        member_repository: MemberRepositoryPort,
        id_generator: Callable[[], int] | None = None,
    ):
        """
        Args:
            member_repository: 회원 Repository
            id_generator: 회원 ID 생성 함수 (None이면 기본값 사용)
        """
        self.member_repository = member_repository
        self.id_generator = id_generator or generate_random_number

    async def create_member(
        self,
        first_name: str,
        last_name: str,
        email: str,
        date_of_birth: str,
    ) -> ServiceResponse:
        """
        회원을 생성합니다.
        ID는 항상 서버에서 생성하며, 검증에 실패하면 저장소를 호출하지 않습니다.
        """
        member = Member(
            id=self.id_generator(),
            firstName=first_name,
            lastName=last_name,
            email=email,
            dateOfBirth=date_of_birth,
        )

        if not is_valid_email(member.email):
            return _error(status.HTTP_400_BAD_REQUEST, "Invalid email")

        if not is_valid_date(member.dateOfBirth):
            return _error(status.HTTP_400_BAD_REQUEST, "Invalid date of birth")

        try:
            await self.member_repository.create_member(member)
        except MemberRepositoryError:
            logger.error("회원 생성 실패 - id: %s", member.id)
            return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Error creating member")

        return ServiceResponse(status_code=status.HTTP_201_CREATED, body=member)

    async def get_member_by_id(self, member_id: int) -> ServiceResponse:
        try:
            member = await self.member_repository.get_member_by_id(member_id)
        except MemberRepositoryError as exc:
            return _fetch_error(exc, member_id)
        return ServiceResponse(status_code=status.HTTP_200_OK, body=member)

    async def get_all_members(self) -> ServiceResponse:
        try:
            members = await self.member_repository.get_all_members()
        except MemberRepositoryError:
            logger.error("회원 목록 조회 실패")
            return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Error fetching members")
        return ServiceResponse(status_code=status.HTTP_200_OK, body=members)

    async def update_member_by_id(self, member: MemberUpdate, member_id: int) -> ServiceResponse:
        """
        회원 정보를 부분 수정합니다.

        비어 있지 않은 필드만 검증하고 반영합니다. 응답은 조회한 회원에
        수정 값을 합친 결과이며, 저장 후 다시 조회하지 않습니다.
        조회와 수정 사이에 다른 요청이 회원을 삭제하면 수정은 아무 문서에도
        반영되지 않지만 응답은 성공으로 반환됩니다.
        """
        if member.email and not is_valid_email(member.email):
            return _error(status.HTTP_400_BAD_REQUEST, "Invalid email")

        if member.dateOfBirth and not is_valid_date(member.dateOfBirth):
            return _error(status.HTTP_400_BAD_REQUEST, "Invalid date of birth")

        try:
            fetched_member = await self.member_repository.get_member_by_id(member_id)
        except MemberRepositoryError as exc:
            return _fetch_error(exc, member_id)

        merged_member = _merge_fields(fetched_member, member)

        try:
            # 합친 결과가 아니라 수정 값 자체를 저장
            await self.member_repository.update_member_by_id(member, member_id)
        except MemberRepositoryError:
            logger.error("회원 수정 실패 - id: %s", member_id)
            return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Error updating member")

        return ServiceResponse(status_code=status.HTTP_200_OK, body=merged_member)

    async def delete_member_by_id(self, member_id: int) -> ServiceResponse:
        try:
            await self.member_repository.get_member_by_id(member_id)
        except MemberRepositoryError as exc:
            return _fetch_error(exc, member_id)

        try:
            await self.member_repository.delete_member_by_id(member_id)
        except MemberRepositoryError:
            logger.error("회원 삭제 실패 - id: %s", member_id)
            return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, f"Could not delete Member {member_id}")

        return ServiceResponse(
            status_code=status.HTTP_200_OK,
            body=MessageResponse(message=f"Member {member_id} deleted"),
        )


def _merge_fields(member: Member, update: MemberUpdate) -> Member:
    return member.model_copy(update=update.changed_fields())


def _fetch_error(exc: MemberRepositoryError, member_id: int) -> ServiceResponse:
    if isinstance(exc, MemberNotFoundError):
        return _error(status.HTTP_404_NOT_FOUND, f"Member {member_id} not found")
    logger.error("회원 조회 실패 - id: %s", member_id)
    return _error(status.HTTP_500_INTERNAL_SERVER_ERROR, "Error fetching member")


def _error(status_code: int, message: str) -> ServiceResponse:
    if status_code < status.HTTP_500_INTERNAL_SERVER_ERROR:
        logger.info("요청 거부 - %s: %s", status_code, message)
    return ServiceResponse(status_code=status_code, body=ErrorResponse(error=message))
