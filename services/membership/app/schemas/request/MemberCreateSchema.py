from pydantic import BaseModel, Field


class MemberCreateSchema(BaseModel):
    """
    회원 생성 요청 본문.
    클라이언트가 보낸 id는 무시됩니다.
    """

    firstName: str = Field(..., min_length=1, description="이름")
    lastName: str = Field(..., min_length=1, description="성")
    email: str = Field(..., min_length=1, description="이메일 주소")
    dateOfBirth: str = Field(..., min_length=1, description="생년월일 (YYYY-MM-DD)")
