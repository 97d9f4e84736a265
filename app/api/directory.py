from dataclasses import asdict

from fastapi import APIRouter, Depends, Query
from sqlalchemy import func, select
from sqlalchemy.orm import Session

from app.core.projection import directory_projection, projection_query
from app.core.ranking import compute_rankings
from app.db.session import get_db
from app.schemas.directory import DirectoryRowOut, RankingRowOut
from app.schemas.pagination import PaginatedResponse, PaginationMeta

router = APIRouter(prefix="/directory", tags=["directory"])


@router.get("")
def list_directory(
    department_id: int | None = Query(default=None, description="Only this department"),
    limit: int = Query(default=100, ge=1, le=500, description="Maximum number of results"),
    offset: int = Query(default=0, ge=0, description="Number of results to skip"),
    include_pagination: bool = Query(default=False, description="Include pagination metadata"),
    db: Session = Depends(get_db),
):
    """
    Employees merged with manager first name, department name and salary.

    Use ?include_pagination=true to get pagination metadata.
    """
    total = db.execute(
        select(func.count()).select_from(projection_query(department_id).subquery())
    ).scalar_one()

    rows = directory_projection(db, department_id=department_id, limit=limit, offset=offset)
    items = [DirectoryRowOut(**asdict(r)) for r in rows]

    if include_pagination:
        return PaginatedResponse(
            items=items,
            pagination=PaginationMeta.for_page(
                total=total, limit=limit, offset=offset, returned=len(items)
            ),
        )
    return items


@router.get("/rankings", response_model=list[RankingRowOut])
def list_rankings(
    department_id: int | None = Query(default=None, description="Only this department"),
    db: Session = Depends(get_db),
):
    """Salary rank and contribution percentage of every employee within its department."""
    return [
        RankingRowOut(**asdict(r), name=r.name)
        for r in compute_rankings(db, department_id=department_id)
    ]
