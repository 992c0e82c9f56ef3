"""
Database schema management.
Creates, seeds and resets the LightBnB tables from the command line.
"""

import argparse
import asyncio
import logging
import sys

from lightbnb.config import Settings, get_settings
from lightbnb.database import Database
from lightbnb.repositories import PropertyRepository, UserRepository

logger = logging.getLogger(__name__)

SEED_USER = {
    "name": "Demo Owner",
    "email": "owner@lightbnb.example.com",
    "password": "password",
}

SEED_PROPERTY = {
    "title": "Cozy downtown loft",
    "description": "Bright loft close to transit and restaurants.",
    "thumbnail_photo_url": "https://images.pexels.com/photos/2086676/pexels-photo-2086676.jpeg?h=350",
    "cover_photo_url": "https://images.pexels.com/photos/2086676/pexels-photo-2086676.jpeg",
    "cost_per_night": 12500,
    "street": "100 Main Street",
    "city": "Vancouver",
    "province": "British Columbia",
    "post_code": "V6B 1A1",
    "country": "Canada",
    "parking_spaces": 1,
    "number_of_bathrooms": 1,
    "number_of_bedrooms": 2,
}


async def seed_database(db: Database) -> bool:
    """
    Insert a demo owner and one listing.

    Returns:
        True if rows were inserted, False if the demo owner already existed
    """
    users = UserRepository(db)
    if await users.get_user_with_email(SEED_USER["email"]):
        logger.info("Seed user already exists, skipping seed")
        return False

    owner = await users.add_user(SEED_USER)
    await PropertyRepository(db).add_property({**SEED_PROPERTY, "owner_id": owner["id"]})
    logger.info("Database seeded successfully")
    return True


async def reset_database(db: Database, settings: Settings) -> None:
    """Drop and recreate all tables, then seed. Refused outside development and testing."""
    if settings.environment not in ("development", "testing"):
        raise RuntimeError("Database reset is only allowed in development or test mode")

    logger.warning("Resetting database - all data will be lost!")
    await db.drop_tables()
    await db.create_tables()
    await seed_database(db)
    logger.info("Database reset completed")


async def run(command: str, settings: Settings) -> None:
    db = Database.from_settings(settings)
    try:
        if command == "create":
            await db.create_tables()
        elif command == "seed":
            await seed_database(db)
        elif command == "reset":
            await reset_database(db, settings)
    finally:
        await db.dispose()


def main(argv=None) -> int:
    """Command line entry point."""
    parser = argparse.ArgumentParser(description="LightBnB database management")
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    subparsers.add_parser("create", help="Create all tables")
    subparsers.add_parser("seed", help="Insert demo data")
    reset_parser = subparsers.add_parser("reset", help="Drop, recreate and seed (development only)")
    reset_parser.add_argument("--confirm", action="store_true", help="Confirm database reset")

    args = parser.parse_args(argv)

    if not args.command:
        parser.print_help()
        return 1

    if args.command == "reset" and not args.confirm:
        print("Database reset requires --confirm flag")
        return 1

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    try:
        asyncio.run(run(args.command, settings))
    except Exception as e:
        logger.error(f"Command failed: {e}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
