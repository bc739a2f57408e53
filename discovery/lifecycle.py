"""
Ties registry membership to an application's lifespan.
"""
import asyncio
import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator, Optional

from discovery.registry import ServiceRegistryClient

logger = logging.getLogger(__name__)


@asynccontextmanager
async def registered(client: Optional[ServiceRegistryClient]) -> AsyncIterator[None]:
    """
    Register on entry, renew in the background, deregister on exit.
    A None client disables registration.
    """
    if client is None:
        yield
        return

    await client.register()
    heartbeat = asyncio.create_task(client.run_heartbeat())
    try:
        yield
    finally:
        heartbeat.cancel()
        try:
            await heartbeat
        except asyncio.CancelledError:
            pass
        except Exception:
            logger.exception("Registry heartbeat for %s failed", client.instance_id)
        await client.deregister()
