from typing import Optional

from pydantic import BaseModel, Field


class Member(BaseModel):
    """
    회원(Member) 엔티티 정의.
    """

    id: int = Field(..., description="회원 고유 식별자 (6자리, 서버에서 생성)")
    firstName: str = Field(..., description="이름")
    lastName: str = Field(..., description="성")
    email: str = Field(..., description="이메일 주소")
    dateOfBirth: str = Field(..., description="생년월일 (YYYY-MM-DD)")

    class Config:
        from_attributes = True


class MemberUpdate(BaseModel):
    """
    회원 정보 부분 수정 값.
    비어 있거나 생략된 필드는 변경하지 않습니다.
    """

    firstName: Optional[str] = Field(default=None, description="이름")
    lastName: Optional[str] = Field(default=None, description="성")
    email: Optional[str] = Field(default=None, description="이메일 주소")
    dateOfBirth: Optional[str] = Field(default=None, description="생년월일 (YYYY-MM-DD)")

    def changed_fields(self) -> dict[str, str]:
        """비어 있지 않은 필드만 반환합니다."""
        return {key: value for key, value in self.model_dump().items() if value}
