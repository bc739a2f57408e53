"""
Service registry client.

Speaks the Eureka REST dialect: instances are registered under an upper-cased
application name and kept alive with periodic lease renewals.
"""
from __future__ import annotations

import asyncio
import logging
from typing import Any, Dict, Optional

import httpx

logger = logging.getLogger(__name__)

DEFAULT_DATA_CENTER = {
    "@class": "com.netflix.appinfo.InstanceInfo$DefaultDataCenterInfo",
    "name": "MyOwn",
}


class ServiceRegistryClient:
    """Registers one service instance with a Eureka-compatible registry."""

    def __init__(
        self,
        registry_url: str,
        app_name: str,
        host: str,
        port: int,
        lease_renewal_interval: int = 30,
        lease_duration: int = 90,
        timeout_seconds: float = 5.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        self.registry_url = registry_url.rstrip("/")
        self.app_name = app_name.upper()
        self.vip_address = app_name.lower()
        self.host = host
        self.port = port
        self.lease_renewal_interval = lease_renewal_interval
        self.lease_duration = lease_duration
        self.timeout_seconds = timeout_seconds
        self.transport = transport

    @property
    def instance_id(self) -> str:
        return f"{self.host}:{self.vip_address}:{self.port}"

    @property
    def app_url(self) -> str:
        return f"{self.registry_url}/apps/{self.app_name}"

    @property
    def instance_url(self) -> str:
        return f"{self.app_url}/{self.instance_id}"

    def instance_document(self) -> Dict[str, Any]:
        home = f"http://{self.host}:{self.port}/"
        return {
            "instance": {
                "instanceId": self.instance_id,
                "hostName": self.host,
                "app": self.app_name,
                "ipAddr": self.host,
                "vipAddress": self.vip_address,
                "secureVipAddress": self.vip_address,
                "status": "UP",
                "port": {"$": self.port, "@enabled": "true"},
                "securePort": {"$": 443, "@enabled": "false"},
                "homePageUrl": home,
                "statusPageUrl": f"{home}health",
                "healthCheckUrl": f"{home}health",
                "dataCenterInfo": DEFAULT_DATA_CENTER,
                "leaseInfo": {
                    "renewalIntervalInSecs": self.lease_renewal_interval,
                    "durationInSecs": self.lease_duration,
                },
            }
        }

    async def register(self) -> bool:
        """Register this instance. Returns False if the registry refused or was unreachable."""
        try:
            response = await self._request("POST", self.app_url, json=self.instance_document())
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning("Registration of %s with %s failed: %s", self.instance_id, self.registry_url, e)
            return False
        logger.info("Registered %s as %s", self.instance_id, self.app_name)
        return True

    async def renew(self) -> bool:
        """Renew the lease; re-register when the registry has forgotten the instance."""
        try:
            response = await self._request("PUT", self.instance_url)
            if response.status_code == 404:
                logger.info("Lease for %s unknown to registry, registering again", self.instance_id)
                return await self.register()
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning("Lease renewal for %s failed: %s", self.instance_id, e)
            return False
        return True

    async def deregister(self) -> bool:
        try:
            response = await self._request("DELETE", self.instance_url)
            response.raise_for_status()
        except httpx.HTTPError as e:
            logger.warning("Deregistration of %s failed: %s", self.instance_id, e)
            return False
        logger.info("Deregistered %s", self.instance_id)
        return True

    async def run_heartbeat(self) -> None:
        """Renew the lease forever. Cancel the task to stop."""
        while True:
            await asyncio.sleep(self.lease_renewal_interval)
            await self.renew()

    async def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        headers = {"Accept": "application/json", "Content-Type": "application/json"}
        async with httpx.AsyncClient(timeout=self.timeout_seconds, transport=self.transport) as client:
            return await client.request(method, url, headers=headers, **kwargs)
