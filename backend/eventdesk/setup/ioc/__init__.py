from eventdesk.setup.ioc.container import (
    AppProvider,
    MemoryPersistenceProvider,
    NotificationChannels,
    build_registry,
    create_container,
)

__all__ = [
    "AppProvider",
    "MemoryPersistenceProvider",
    "NotificationChannels",
    "build_registry",
    "create_container",
]
