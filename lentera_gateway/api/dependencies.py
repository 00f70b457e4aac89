"""Dependency injection for FastAPI endpoints"""

from fastapi import Request
from lentera_gateway.infrastructure.clients.registry import RegistryClient


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_registry_client() -> RegistryClient:
    """Provide lender registry client instance"""
    return RegistryClient()
