from enum import Enum
from typing import Any

import attrs


def _plain(instance: Any, field: Any, value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


def entity_payload(entity: Any) -> dict[str, Any]:
    """attrs entity -> dict with enum members replaced by their values."""
    return attrs.asdict(entity, value_serializer=_plain)
