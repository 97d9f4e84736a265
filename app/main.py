from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.errors import register_error_handlers
from app.api.health import router as health_router
from app.api.root import router as root_router
from app.api.employees import router as employees_router
from app.api.departments import router as departments_router
from app.api.directory import router as directory_router
from app.api.archive import router as archive_router
from app.api.audit import router as audit_router
from app.core.config import settings
from app.core.logging_config import configure_logging

configure_logging(settings.LOG_LEVEL)

app = FastAPI(title="Employee Directory")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(root_router)  
app.include_router(health_router)
app.include_router(employees_router)
app.include_router(departments_router)
app.include_router(directory_router)
app.include_router(archive_router)
app.include_router(audit_router)
