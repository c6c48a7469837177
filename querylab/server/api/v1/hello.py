"""
API endpoints for the demo record.

Creating and reading a ``Hello`` row is the smallest check that the ORM,
the session dependency and the schema are wired correctly.
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException, status

from querylab.core.database.entities import Hello
from querylab.core.logging_config import get_logger
from querylab.core.models.io import HelloRead
from querylab.server.deps import RepositoriesDep

logger = get_logger(__name__)

router = APIRouter(tags=["hello"])


@router.post(
    "",
    response_model=HelloRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create Demo Record",
    description="Persist a new demo record; its identifier is generated by the database.",
)
async def create_hello(repos: RepositoriesDep) -> HelloRead:
    hello = await repos.hello.create(Hello())
    await repos.session.commit()
    logger.info(f"Created demo record {hello.id}")
    return HelloRead.model_validate(hello)


@router.get(
    "/{hello_id}",
    response_model=HelloRead,
    summary="Get Demo Record",
    responses={404: {"description": "Demo record not found"}},
)
async def get_hello(hello_id: int, repos: RepositoriesDep) -> HelloRead:
    hello = await repos.hello.get_by_id(hello_id)
    if hello is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=f"Demo record {hello_id} not found")
    return HelloRead.model_validate(hello)
