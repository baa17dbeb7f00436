from pydantic import BaseModel, Field


class MessageResponse(BaseModel):
    """
    처리 성공 메시지 응답.
    """

    message: str = Field(..., description="처리 결과 메시지", examples=["Member 123456 deleted"])
