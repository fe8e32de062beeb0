# app/routers/dashboard.py
# 분석 대시보드 정적 페이지 (프론트 iframe 에서 사용)
from fastapi import APIRouter
from fastapi.responses import FileResponse, JSONResponse

from app.config import settings

router = APIRouter(tags=["dashboard"])

@router.get("/dashboard", include_in_schema=False)
def dashboard():
    page = settings.static_dir / "pages" / "dashboard.html"
    if not page.is_file():
        return JSONResponse(status_code=404, content={"message": "dashboard_not_found"})
    return FileResponse(page, media_type="text/html")
