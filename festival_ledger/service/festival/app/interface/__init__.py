"""Application layer interfaces (Ports)"""

from festival_ledger.service.festival.app.interface.i_clock import IClock
from festival_ledger.service.festival.app.interface.i_festival_store_repo import (
    IFestivalStoreRepo,
)
from festival_ledger.service.festival.app.interface.i_snapshot_persister import (
    ISnapshotPersister,
)

__all__ = ['IClock', 'IFestivalStoreRepo', 'ISnapshotPersister']
