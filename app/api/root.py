from fastapi import APIRouter

router = APIRouter()

@router.get("/")
def root():
    return {
        "name": "Employee Directory",
        "status": "ok",
        "docs": "/docs",
        "health": "/health",
    }
