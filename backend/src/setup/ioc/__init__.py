"""IoC container setup (Dishka)."""

from src.setup.ioc.container import (
    InMemoryPersistenceProvider,
    MessagingProvider,
    create_container,
    create_persistence_provider,
)

__all__ = [
    "InMemoryPersistenceProvider",
    "MessagingProvider",
    "create_container",
    "create_persistence_provider",
]
