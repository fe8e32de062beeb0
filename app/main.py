# app/main.py

# ------------------------
# 환경 변수 로드
# ------------------------
from dotenv import load_dotenv
load_dotenv()

import logging
from contextlib import asynccontextmanager

# ------------------------
# FastAPI, CORS 미들웨어 import
# ------------------------
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from app.config import settings
from app.db.base import SessionLocal, init_db
from app.routers import dashboard as dashboard_router
from app.routers import questions as questions_router
from app.services.errors import QuestionUnavailable, StoreError
from app.services.question_store import QuestionStore
from app.services.seed import seed_questions

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# ------------------------
# 1) 시작 시 테이블 생성 + 기본 문제 seed
# ------------------------
@asynccontextmanager
async def lifespan(app: FastAPI):
    init_db()
    with SessionLocal() as db:
        store = QuestionStore(db)
        if settings.seed_on_startup:
            seed_questions(store)
        logger.info("startup complete env=%s unshown_questions=%d", settings.app_env, store.count(shown=False))
    yield

# ------------------------
# 2) FastAPI 앱 생성
# ------------------------
app = FastAPI(title="Interview Practice API", lifespan=lifespan)

# ------------------------
# 3) CORS 미들웨어 추가 (SPA 가 다른 포트에서 호출)
# ------------------------
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ------------------------
# 4) 에러 응답 형식
#    - 저장소 실패: 500 {"error": 원문}
#    - 생성 실패:   500 {"message": ...}
# ------------------------
@app.exception_handler(StoreError)
async def store_error_handler(request: Request, exc: StoreError):
    logger.error("store error on %s %s: %s", request.method, request.url.path, exc)
    return JSONResponse(status_code=500, content={"error": str(exc)})

@app.exception_handler(QuestionUnavailable)
async def question_unavailable_handler(request: Request, exc: QuestionUnavailable):
    return JSONResponse(status_code=500, content={"message": exc.message})

# ------------------------
# 5) 라우터 등록 + 정적 파일
# ------------------------
app.include_router(questions_router.router)
app.include_router(dashboard_router.router)

if settings.static_dir.is_dir():
    app.mount("/static", StaticFiles(directory=settings.static_dir), name="static")

# ------------------------
# 6) Root 엔드포인트 (health check)
# ------------------------
@app.get("/")
def root():
    return {"ok": True}
