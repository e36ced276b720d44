"""
Developer REST API

Two routes:
- /api/devs       GET (list), POST (create)
- /api/devs/{id}  GET (single or null), PATCH (edit)

Mutations answer 200 with the stored developer or 400 with an error
payload; lookups never fail with 404.
"""
import logging
from typing import Any, List, Optional

from fastapi import APIRouter, Body, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from devroster.api.schemas import DeveloperResponse
from devroster.db.connection import get_db_session
from devroster.services.developer_service import DeveloperService, DeveloperStoreError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/devs", response_model=List[DeveloperResponse])
async def get_developers(db: AsyncSession = Depends(get_db_session)):
    """List every developer in the roster (possibly empty)."""
    developers = await DeveloperService.get_developers(db)
    return [DeveloperResponse.model_validate(developer) for developer in developers]


@router.post("/devs", response_model=DeveloperResponse, status_code=status.HTTP_200_OK)
async def add_developer(
    payload: Any = Body(..., description="Developer fields without id"),
    db: AsyncSession = Depends(get_db_session)
):
    """
    Add a developer.

    The store assigns the id. Invalid payloads are answered with 400
    (not 422) and a body of the form {"detail": {"error": ..., "errors": [...]}}.
    """
    try:
        developer = await DeveloperService.add_developer(db, payload)
    except DeveloperStoreError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.to_detail()
        )

    return DeveloperResponse.model_validate(developer)


@router.get("/devs/{developer_id}", response_model=Optional[DeveloperResponse])
async def get_developer(developer_id: str, db: AsyncSession = Depends(get_db_session)):
    """Get one developer, or null when the id is unknown."""
    developer = await DeveloperService.get_developer_by_id(db, developer_id)
    if developer is None:
        return None
    return DeveloperResponse.model_validate(developer)


@router.patch("/devs/{developer_id}", response_model=DeveloperResponse)
async def edit_developer(
    developer_id: str,
    payload: Any = Body(..., description="Developer fields to replace"),
    db: AsyncSession = Depends(get_db_session)
):
    """
    Edit a developer.

    Submitted fields replace the stored ones; omitted fields keep their
    values. Unknown ids and invalid payloads are answered with 400.
    """
    try:
        developer = await DeveloperService.edit_developer(db, developer_id, payload)
    except DeveloperStoreError as e:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=e.to_detail()
        )

    return DeveloperResponse.model_validate(developer)
