# 📄 File: app/modules/gamification/infrastructure/seed.py
# 🧭 Purpose (Layman Explanation):
# Puts the list of available badges into the database the first time the app starts
# 🧪 Purpose (Technical Summary):
# Idempotent badge catalog seeding: inserts every catalog entry whose name is not stored yet
# 🔗 Dependencies:
# BadgeRepository, gamification rules (BADGE_CATALOG)
# 🔄 Connected Modules / Calls From:
# app/bootstrap.py (startup), tests/conftest.py

import logging
from typing import List

from app.modules.gamification.domain.models.badge import Badge
from app.modules.gamification.domain.repositories.badge_repository import BadgeRepository
from app.modules.gamification.domain.rules import BADGE_CATALOG

logger = logging.getLogger(__name__)


async def seed_badge_catalog(badge_repository: BadgeRepository) -> List[Badge]:
    """
    Insert missing catalog badges, in catalog order.

    Returns:
        The badges inserted by this call (empty when already seeded)
    """
    created = []
    for definition in BADGE_CATALOG:
        if await badge_repository.get_by_name(definition.name) is not None:
            continue
        created.append(await badge_repository.create(definition.to_badge()))

    if created:
        logger.info(f"Seeded {len(created)} badges into the catalog")
    else:
        logger.debug("Badge catalog already seeded")
    return created
