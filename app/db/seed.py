import logging
from decimal import Decimal
from sqlmodel import Session, select

from app.models.item import Item

logger = logging.getLogger(__name__)

CATALOG = [
    {"name": "Round Widget", "price": Decimal("2.99"), "description": "A widget that is round"},
    {"name": "Square Widget", "price": Decimal("1.99"), "description": "A widget that is square"},
]

def seed_items(session: Session) -> int:
    """Insert the default catalog unless items already exist. Returns the number of items added."""
    existing = session.exec(select(Item)).first()
    if existing:
        logger.info("Catalog already populated. Skipping seed.")
        return 0

    for entry in CATALOG:
        session.add(Item(**entry))
    session.commit()
    logger.info("Seeded %d catalog items", len(CATALOG))
    return len(CATALOG)


if __name__ == "__main__":
    from app.core.config import settings
    from app.core.logging import setup_logging
    from app.db.session import engine, create_db_and_tables

    setup_logging(settings.LOG_LEVEL)
    create_db_and_tables()
    with Session(engine) as session:
        seed_items(session)
