"""
https://python-dependency-injector.ets-labs.org/index.html
https://python-dependency-injector.ets-labs.org/examples/fastapi.html
"""

from dependency_injector import containers, providers

from festival_ledger.platform.config.core_setting import Settings
from festival_ledger.service.festival.driven_adapter.clock.system_clock import SystemClock
from festival_ledger.service.festival.driven_adapter.persistence.json_snapshot_file_persister import (
    JsonSnapshotFilePersister,
)
from festival_ledger.service.festival.driven_adapter.repo.festival_store_repo_impl import (
    FestivalStoreRepoImpl,
)


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Background task group (set by main.py lifespan)
    # Used for fire-and-forget snapshot writes
    task_group = providers.Object(None)

    clock = providers.Singleton(SystemClock, timezone=config_service.provided.FESTIVAL_TIMEZONE)

    snapshot_persister = providers.Singleton(
        JsonSnapshotFilePersister, path=config_service.provided.SNAPSHOT_PATH
    )

    # Single in-memory store; loads the snapshot on first use
    festival_store_repo = providers.Singleton(
        FestivalStoreRepoImpl,
        persister=snapshot_persister,
        task_group_provider=task_group.provider,
    )


container = Container()


def setup() -> None:
    container.config_service()
    container.festival_store_repo()


def cleanup() -> None:
    container.reset_singletons()
