"""
Výchozí administrátor / Admin seeding.
Při prvním startu vytvoří účet admin, pokud žádný uživatel neexistuje.
Creates the default admin account on first startup if no users exist.
"""

import logging

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from spolky.models.user import Role, User
from spolky.utils.auth import hash_password

logger = logging.getLogger("spolky.seed")


async def seed_admin(session: AsyncSession) -> User | None:
    """Vytvořit admina, pokud nejsou uživatelé / Create admin if no users exist."""
    count = await session.scalar(select(func.count(User.id)))

    if count:
        logger.info("%s existing user(s), seed skipped", count)
        return None

    admin = User(
        username="admin",
        email="admin@spolky.local",
        name="Admin",
        surname="",
        hashed_password=hash_password("admin"),
        role=Role.ADMIN,
        is_active=True,
    )
    session.add(admin)
    await session.commit()
    logger.warning("Default admin created: admin / admin, change the password")
    return admin
