import asyncio
import sys
import asyncpg

from app.settings.config import settings

def to_asyncpg_dsn(url: str) -> str:
    # asyncpg.connect wants a plain postgresql:// DSN, without the SQLAlchemy driver suffix
    return url.replace("postgresql+asyncpg://", "postgresql://", 1)

async def check_db():
    try:
        conn = await asyncpg.connect(to_asyncpg_dsn(settings.database_url))
        await conn.close()
        return True
    except (OSError, asyncpg.PostgresError) as e:
        print(f"Database not reachable: {e}", file=sys.stderr)
        return False

if __name__ == "__main__":
    result = asyncio.run(check_db())
    sys.exit(0 if result else 1)
