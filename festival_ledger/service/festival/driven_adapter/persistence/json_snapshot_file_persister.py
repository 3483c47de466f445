import os
from pathlib import Path

from festival_ledger.platform.exception.exceptions import PersistenceError
from festival_ledger.platform.logging.loguru_io import Logger
from festival_ledger.service.festival.app.interface.i_snapshot_persister import (
    ISnapshotPersister,
)
from festival_ledger.service.festival.domain.aggregate.festival_store_aggregate import (
    FestivalStore,
)
from festival_ledger.service.festival.driven_adapter.persistence.seed_data import seed_store
from festival_ledger.service.festival.driven_adapter.persistence.snapshot_codec import (
    decode_snapshot,
    encode_snapshot,
)


class JsonSnapshotFilePersister(ISnapshotPersister):
    """
    Snapshot document on the local filesystem

    Writes go to a sibling temp file first and are renamed over the target, so a
    crash mid-write leaves the previous snapshot readable. A snapshot that cannot
    be decoded is moved aside before the seed is written.
    """

    def __init__(self, *, path: Path) -> None:
        self.path = Path(path)

    @Logger.io
    def load(self) -> FestivalStore:
        if not self.path.exists():
            Logger.base.info(f'🌱 [SNAPSHOT] No snapshot at {self.path}, seeding defaults')
            return self._reseed()

        try:
            store = decode_snapshot(self.path.read_bytes())
        except (PersistenceError, OSError) as e:
            Logger.base.warning(f'⚠️ [SNAPSHOT] Could not load {self.path} ({e}), reseeding')
            self._quarantine()
            return self._reseed()

        Logger.base.info(
            f'📂 [SNAPSHOT] Loaded {len(store.tickets)} tickets, {len(store.shows)} shows'
        )
        return store

    @Logger.io
    def save(self, *, store: FestivalStore) -> None:
        tmp_path = self.path.with_name(f'{self.path.name}.tmp')
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            tmp_path.write_bytes(encode_snapshot(store))
            os.replace(tmp_path, self.path)
        except OSError as e:
            raise PersistenceError(f'Could not write snapshot to {self.path}: {e}') from e

    @property
    def corrupt_path(self) -> Path:
        return self.path.with_name(f'{self.path.name}.corrupt')

    def _quarantine(self) -> None:
        """Move the unreadable snapshot to ``<name>.corrupt``, replacing an older one."""
        try:
            os.replace(self.path, self.corrupt_path)
        except OSError as e:
            Logger.base.warning(f'⚠️ [SNAPSHOT] Could not move aside {self.path}: {e}')
            return
        Logger.base.warning(f'🧯 [SNAPSHOT] Unreadable snapshot kept as {self.corrupt_path}')

    def _reseed(self) -> FestivalStore:
        store = seed_store()
        try:
            self.save(store=store)
        except PersistenceError as e:
            Logger.base.warning(f'⚠️ [SNAPSHOT] Seed could not be written: {e.message}')
        return store

    def encode(self, *, store: FestivalStore) -> bytes:
        return encode_snapshot(store)

    def decode(self, *, data: bytes) -> FestivalStore:
        return decode_snapshot(data)
