# src/modules/search/availability.py

from sqlalchemy import exists, select
from sqlalchemy.ext.asyncio import AsyncSession

from src.models.models import ModuleType

async def is_module_available(modname: str, db: AsyncSession) -> bool:
    """
    Check whether a content type is installed in this deployment.
    """
    stmt = select(exists().where(ModuleType.name == modname))
    result = await db.execute(stmt)
    return bool(result.scalar())
