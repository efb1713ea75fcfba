"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into routes.
"""

from fastapi import Request
from psycopg_pool import ConnectionPool

from src.adapters.events.console import LoggingEventPublisher
from src.adapters.repository.postgres import PostgresUserRepository
from src.config.settings import get_settings
from src.domain.management import UserManagementService

# Module-level singleton - LoggingEventPublisher is stateless
_event_publisher = LoggingEventPublisher(topic=get_settings().event_topic)


def get_pool(request: Request) -> ConnectionPool:
    """
    Get connection pool from app state.

    The pool is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.pool


def get_repository(request: Request) -> PostgresUserRepository:
    """Create repository with connection pool from app state."""
    pool = get_pool(request)
    return PostgresUserRepository(pool)


def get_event_publisher() -> LoggingEventPublisher:
    """Get logging event publisher (singleton)."""
    return _event_publisher


def get_user_management(request: Request) -> UserManagementService:
    """
    Create the user management facade with injected dependencies.

    Wires together the repository and event publisher for the use cases.
    """
    repository = get_repository(request)
    event_publisher = get_event_publisher()
    return UserManagementService.build(repository=repository, event_publisher=event_publisher)
