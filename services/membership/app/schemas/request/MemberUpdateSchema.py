from typing import Optional

from pydantic import BaseModel, Field

from libs.schemas import MemberUpdate


class MemberUpdateSchema(BaseModel):
    """
    회원 정보 수정 요청 본문.
    모든 필드는 선택이며, 비어 있는 필드는 변경하지 않습니다.
    """

    firstName: Optional[str] = Field(default=None, description="이름")
    lastName: Optional[str] = Field(default=None, description="성")
    email: Optional[str] = Field(default=None, description="이메일 주소")
    dateOfBirth: Optional[str] = Field(default=None, description="생년월일 (YYYY-MM-DD)")

    def to_update(self) -> MemberUpdate:
        return MemberUpdate(**self.model_dump())
