"""Route Dependencies — per-request wiring of stores, repositories and services.

Invariants:
    - The registry store lives on app.state, set by the lifespan; never a module global
    - Repositories and services are built per request around the request's AsyncSession
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from campus_api.core.registry_store import RegistryStore
from campus_api.infrastructure.database import get_db
from campus_api.repositories.building_repository import SqlBuildingRepository
from campus_api.repositories.housing_unit_repository import SqlHousingUnitRepository
from campus_api.repositories.user_repository import SqlUserRepository
from campus_api.services.housing_lookup import HousingLookup
from campus_api.services.user_accounts import UserAccounts


def get_registry(request: Request) -> RegistryStore:
    """FastAPI dependency for the course registry store."""
    store = getattr(request.app.state, "registry", None)
    if store is None:
        raise RuntimeError("Registry not initialized")
    return store


def get_user_accounts(db: AsyncSession = Depends(get_db)) -> UserAccounts:
    return UserAccounts(SqlUserRepository(db))


def get_housing_lookup(db: AsyncSession = Depends(get_db)) -> HousingLookup:
    return HousingLookup(SqlBuildingRepository(db), SqlHousingUnitRepository(db))
