"""
Seed sample aliens for development.
Run: python -m scripts.seed_aliens  (from backend/)
"""

import asyncio

from app.db.session import async_session
from app.repositories.aliens import save_alien


SEED_ALIENS = [
    {"name": "Zorg", "attributes": {"planet": "Xenon", "tech": "Java"}},
    {"name": "Kang", "attributes": {"planet": "Rigel VII", "tech": "Python"}},
    {"name": "Kodos", "attributes": {"planet": "Rigel VII", "tech": "Go"}},
]


async def seed():
    """Insert seed aliens."""
    async with async_session() as session:
        for data in SEED_ALIENS:
            alien = await save_alien(session, **data)
            print(f"  Created alien: {alien.id} ({alien.name})")
        await session.commit()
    print(f"Seeded {len(SEED_ALIENS)} aliens.")


if __name__ == "__main__":
    asyncio.run(seed())
