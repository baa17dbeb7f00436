"""
회원 관련 라우터
"""
from typing import Annotated, List

from fastapi import APIRouter, Depends, Path, status
from fastapi.encoders import jsonable_encoder
from fastapi.responses import JSONResponse

from libs.schemas import Member
from services.membership.app.core.MemberService import MemberService, ServiceResponse
from services.membership.app.dependencies import get_member_service
from services.membership.app.schemas.request import (
    MemberCreateSchema,
    MemberUpdateSchema,
)
from services.membership.app.schemas.response import (
    ErrorResponse,
    MessageResponse,
)

router = APIRouter(tags=["Members"])

# 64비트 정수 범위를 벗어난 ID는 저장소에서 인코딩할 수 없음
MemberId = Annotated[int, Path(ge=-2**63, le=2**63 - 1, description="회원 ID")]

_INVALID_ID_RESPONSE = {
    400: {
        "model": ErrorResponse,
        "description": "잘못된 요청 또는 회원 ID",
        "content": {
            "application/json": {
                "example": {"error": "Invalid member ID"}
            }
        },
    },
}
_INVALID_REQUEST_RESPONSE = {
    400: {
        "model": ErrorResponse,
        "description": "잘못된 요청 본문 또는 검증 실패",
        "content": {
            "application/json": {
                "example": {"error": "Invalid email"}
            }
        },
    },
}
_NOT_FOUND_RESPONSE = {
    404: {
        "model": ErrorResponse,
        "description": "회원 없음",
        "content": {
            "application/json": {
                "example": {"error": "Member 123456 not found"}
            }
        },
    },
}
_SERVER_ERROR_RESPONSE = {
    500: {"model": ErrorResponse, "description": "저장소 오류"},
}


def _write(response: ServiceResponse) -> JSONResponse:
    """서비스 응답의 상태 코드와 본문을 그대로 JSON으로 반환"""
    return JSONResponse(
        status_code=response.status_code,
        content=jsonable_encoder(response.body),
    )


@router.post(
    "/member",
    response_model=Member,
    status_code=status.HTTP_201_CREATED,
    responses={**_INVALID_REQUEST_RESPONSE, **_SERVER_ERROR_RESPONSE},
)
async def create_member(
    payload: MemberCreateSchema,
    member_service: MemberService = Depends(get_member_service),
):
    """
    회원 생성

    **Request Body:**
    - `firstName`, `lastName`, `email`, `dateOfBirth` (모두 필수, 빈 문자열 불가)

    **Response:**
    - HTTP 201 Created: 생성된 회원 (서버에서 생성한 `id` 포함)
    - HTTP 400 Bad Request: `Invalid request` / `Invalid email` / `Invalid date of birth`
    - HTTP 500 Internal Server Error: `Error creating member`
    """
    response = await member_service.create_member(
        first_name=payload.firstName,
        last_name=payload.lastName,
        email=payload.email,
        date_of_birth=payload.dateOfBirth,
    )
    return _write(response)


@router.get(
    "/member/{member_id}",
    response_model=Member,
    status_code=status.HTTP_200_OK,
    responses={**_INVALID_ID_RESPONSE, **_NOT_FOUND_RESPONSE, **_SERVER_ERROR_RESPONSE},
)
async def get_member_by_id(
    member_id: MemberId,
    member_service: MemberService = Depends(get_member_service),
):
    """회원 단건 조회"""
    return _write(await member_service.get_member_by_id(member_id))


@router.get(
    "/members",
    response_model=List[Member],
    status_code=status.HTTP_200_OK,
    responses=_SERVER_ERROR_RESPONSE,
)
async def get_all_members(
    member_service: MemberService = Depends(get_member_service),
):
    """전체 회원 조회 (정렬, 페이지네이션 없음)"""
    return _write(await member_service.get_all_members())


@router.put(
    "/member/{member_id}",
    response_model=Member,
    status_code=status.HTTP_200_OK,
    responses={**_INVALID_ID_RESPONSE, **_NOT_FOUND_RESPONSE, **_SERVER_ERROR_RESPONSE},
)
async def update_member_by_id(
    member_id: MemberId,
    payload: MemberUpdateSchema,
    member_service: MemberService = Depends(get_member_service),
):
    """
    회원 정보 수정

    **Request Body:**
    - `firstName`, `lastName`, `email`, `dateOfBirth` (모두 선택, 빈 값은 변경하지 않음)

    **Response:**
    - HTTP 200 OK: 수정 값이 반영된 회원
    """
    return _write(await member_service.update_member_by_id(payload.to_update(), member_id))


@router.delete(
    "/member/{member_id}",
    response_model=MessageResponse,
    status_code=status.HTTP_200_OK,
    responses={**_INVALID_ID_RESPONSE, **_NOT_FOUND_RESPONSE, **_SERVER_ERROR_RESPONSE},
)
async def delete_member_by_id(
    member_id: MemberId,
    member_service: MemberService = Depends(get_member_service),
):
    """회원 삭제"""
    return _write(await member_service.delete_member_by_id(member_id))
