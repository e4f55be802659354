# app/routers/system.py
from fastapi import APIRouter, Request, status

router = APIRouter()

@router.get("/health", tags=["System"], summary="Health check",
            responses={200: {"description": "Service healthy"}})
def health():
    return {"status": "ok"}

@router.get("/info", tags=["System"], summary="Application info",
            status_code=status.HTTP_200_OK)
def info(request: Request):
    settings = request.app.state.settings
    return {
        "name": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "database": settings.safe_database_url,
        "engine": "SQLAlchemy (asyncio)",
    }
