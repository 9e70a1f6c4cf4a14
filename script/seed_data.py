#!/usr/bin/env python3
"""
Database Seed Script
Populate a demo webinar owned by DEFAULT_USER_ID (or 'demo-organizer' when unset)

Notes:
- Run migrations first (`upgrade`), or rely on the app lifespan creating tables
- Seeding twice is a no-op: an existing webinar id is left untouched
"""

import asyncio
from datetime import datetime, timedelta, timezone

from src.platform.config.core_setting import settings
from src.platform.config.di import container
from src.platform.logging.loguru_io import Logger
from src.service.webinar.domain.entity.webinar_entity import Webinar


DEMO_WEBINAR_ID = 'demo-webinar'
DEMO_SEATS = 50
DEMO_ORGANIZER_ID = settings.DEFAULT_USER_ID or 'demo-organizer'


async def seed_demo_webinar() -> None:
    database = container.database()
    await database.create_tables()
    repo = container.webinar_repo()

    try:
        if await repo.find_by_id(DEMO_WEBINAR_ID):
            Logger.base.info(f'⏭️  [SEED] Webinar {DEMO_WEBINAR_ID} already exists')
            return

        start_date = datetime.now(timezone.utc) + timedelta(days=7)
        await repo.create(
            Webinar.create(
                id=DEMO_WEBINAR_ID,
                organizer_id=DEMO_ORGANIZER_ID,
                title='Demo Webinar',
                start_date=start_date,
                end_date=start_date + timedelta(hours=1),
                seats=DEMO_SEATS,
            )
        )
        Logger.base.info(
            f'✅ [SEED] Webinar {DEMO_WEBINAR_ID} created for {DEMO_ORGANIZER_ID}'
        )
    finally:
        await database.dispose()


if __name__ == '__main__':
    asyncio.run(seed_demo_webinar())
