"""
Service registry integration shared by the vehicles and pricing services.
"""
from discovery.lifecycle import registered
from discovery.registry import ServiceRegistryClient

__all__ = ["ServiceRegistryClient", "registered"]
