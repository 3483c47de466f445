from pathlib import Path

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from festival_ledger.platform.constant.path import DATA_DIR


_PROJECT_ROOT = Path(__file__).resolve().parents[3]
_ENV_PATH = _PROJECT_ROOT / '.env'
_ENV_FILE = _ENV_PATH if _ENV_PATH.exists() else (_PROJECT_ROOT / '.env.example')


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_ignore_empty=True,
        extra='ignore',
    )

    PROJECT_NAME: str = 'Festival Ledger'
    VERSION: str = '0.1.0'
    DEBUG: bool = True  # Set to False in production

    # Snapshot store (single JSON document, system of record)
    SNAPSHOT_PATH: Path = DATA_DIR / 'festival_snapshot.json'

    # Festival identity
    FESTIVAL_TIMEZONE: str = 'Europe/Berlin'
    FESTIVAL_YEAR: int = 2025
    SHOW_ID_PREFIX: str = 'IMP25'

    # Door
    DEFAULT_GATE: str = 'GateA'
    RECENT_SCANS_LIMIT: int = 15

    @field_validator('SHOW_ID_PREFIX', mode='before')
    @classmethod
    def normalize_show_id_prefix(cls, v: str) -> str:
        if isinstance(v, str):
            return v.strip().upper()
        return v

    @field_validator('FESTIVAL_YEAR')
    @classmethod
    def validate_festival_year(cls, v: int) -> int:
        if v < 2000:
            raise ValueError('FESTIVAL_YEAR must be a four digit year')
        return v


settings = Settings()  # type: ignore
