from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """
    .env 파일에서 환경 변수를 읽어오는 Pydantic 설정 모델
    """

    # DB 접속 정보 (MongoDB)
    MONGODB_URI: str = "mongodb://localhost:27017"
    MONGODB_DATABASE: str = "membership"
    MONGODB_TIMEOUT_MS: int = 5000  # 서버 선택 타임아웃 (ms)

    # 환경 설정
    ENVIRONMENT: str = "development"  # development, production
    DEBUG: bool = True  # 개발 모드 여부
    LOG_LEVEL: str = "INFO"

    # CORS 설정 (쉼표로 구분된 오리진 목록)
    ALLOWED_ORIGINS: str = ""  # 예: "http://localhost:3000,http://localhost:5173"

    class Config:
        # 루트 디렉터리의 .env 파일을 읽도록 경로 수정
        env_file = Path(__file__).parent.parent.parent.parent.parent / ".env"
        env_file_encoding = "utf-8"
        # 환경 변수가 없어도 기본값 사용
        case_sensitive = False
        # .env 파일의 다른 환경 변수는 무시
        extra = "ignore"

    @property
    def is_development(self) -> bool:
        """개발 환경 여부 확인"""
        return self.ENVIRONMENT.lower() in ("development", "dev") or self.DEBUG

    @property
    def allowed_origins_list(self) -> list[str]:
        """CORS 허용 오리진 목록"""
        if self.ALLOWED_ORIGINS:
            return [origin.strip() for origin in self.ALLOWED_ORIGINS.split(",") if origin.strip()]
        if self.is_development:
            # 개발 환경: 환경 변수가 없을 때 기본 localhost 포트 허용
            return [
                "http://localhost:3000",
                "http://localhost:5173",  # Vite 기본 포트
                "http://localhost:8080",
                "http://127.0.0.1:3000",
                "http://127.0.0.1:5173",
                "http://127.0.0.1:8080",
            ]
        # 프로덕션 환경: 환경 변수가 없으면 빈 리스트 (모든 오리진 차단)
        return []


# settings 인스턴스를 생성하여 다른 파일에서 import 해서 사용
# 환경 변수가 없으면 기본값 사용 (개발 환경용)
settings = Settings()
