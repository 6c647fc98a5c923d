"""HTTP session management."""

from curl_cffi.requests import AsyncSession
from loguru import logger

from expresstoons.config import settings


_session: AsyncSession | None = None


async def get_session() -> AsyncSession:
    """Get or create the session shared by every upstream call."""
    global _session
    if _session is None:
        _session = AsyncSession(proxy=settings.proxy)
        logger.debug(f"Opened upstream HTTP session (proxy: {settings.proxy or 'None'})")
    return _session


async def close_session() -> None:
    """Close the shared session, if one was opened."""
    global _session
    if _session is not None:
        await _session.close()
        _session = None
        logger.debug("Closed upstream HTTP session")
