from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from services.membership.app.api.v1.router import router
from services.membership.app.core.logging_config import setup_logging
from services.membership.app.db.connection import settings
from services.membership.app.dependencies import close_mongo_client, get_member_repository

setup_logging(settings.LOG_LEVEL)


@asynccontextmanager
async def lifespan(app: FastAPI):
    # 회원 ID 고유 인덱스 생성 (중복 ID 저장 거부)
    await get_member_repository().ensure_indexes()
    yield
    close_mongo_client()


app = FastAPI(
    title="Membership Service (회원 서비스)",
    description="Membership CRUD Service Server",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.allowed_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(RequestValidationError)
async def request_validation_exception_handler(request: Request, exc: RequestValidationError):
    """
    요청 형식 오류는 서비스까지 전달하지 않고 400으로 응답합니다.
    경로의 회원 ID를 정수로 변환할 수 없으면 `Invalid member ID`,
    본문 바인딩에 실패하면 `Invalid request`.
    """
    if any(tuple(error.get("loc", ()))[:1] == ("path",) for error in exc.errors()):
        message = "Invalid member ID"
    else:
        message = "Invalid request"
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"error": message})


app.include_router(router)

# 서비스가 살아있는지 확인하는 헬스 체크 엔드포인트
@app.get("/")
def read_root():
    return {"service": "Membership Service", "status": "running"}
