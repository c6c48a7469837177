"""
Request-scoped dependencies.

Provides the repository bundle bound to the request's database session.
"""

from typing import Annotated

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from querylab.core.database import get_session
from querylab.core.database.repositories import RepositoryBundle, build_repositories


async def get_repositories(session: AsyncSession = Depends(get_session)) -> RepositoryBundle:
    """Wrap the request's session with every repository."""
    return build_repositories(session)


RepositoriesDep = Annotated[RepositoryBundle, Depends(get_repositories)]
