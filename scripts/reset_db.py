"""
Reset the development database and seed initial data.

Drops and recreates every table known to the models, then runs the seed.
This should only be used in development environments.
"""
import asyncio
import sys
from pathlib import Path

# Add parent directory to path
sys.path.append(str(Path(__file__).parent.parent))

from chatcrm.db.session import close_database_connections, create_tables, drop_tables
from chatcrm.scripts.seed import main as run_seed_main


async def reset_schema() -> None:
    """Drop and recreate all tables."""
    try:
        await drop_tables()
        await create_tables()
    finally:
        await close_database_connections()


def reset_database() -> int:
    """
    Reset the development database and seed initial data.

    Returns:
        int: Exit status of the seed run, or 1 if the reset failed
    """
    print("🗄️ Resetting database schema...")
    try:
        asyncio.run(reset_schema())
    except Exception as e:
        print(f"❌ Error resetting database: {e}")
        print("💡 Make sure the database is running and DATABASE_URL is correct")
        return 1
    print("✅ Database schema reset successfully")

    print("🌱 Seeding initial data...")
    status = run_seed_main()
    if status == 0:
        print("✅ Database reset and seeded successfully!")
    return status


if __name__ == "__main__":
    sys.exit(reset_database())
