from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """
    오류 응답.
    저장소 오류의 원인은 포함하지 않습니다.
    """

    error: str = Field(..., description="오류 메시지", examples=["Member 123456 not found"])

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "error": "Member 123456 not found"
            }
        }
    )
