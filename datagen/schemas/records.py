from dataclasses import asdict, dataclass
from typing import Any, Dict, Union

from datagen.schemas.record_schemas import RecordSchemaRegistry


@dataclass(frozen=True)
class CounterRecord:
    time: str
    count: int

    schema_name = "counter"

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class IdEventRecord:
    time: str
    id: str
    event: str

    schema_name = "id_event"

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


Record = Union[CounterRecord, IdEventRecord]

RECORD_TYPES = {
    "counter": CounterRecord,
    "id_event": IdEventRecord
}


def from_dict(schema_name: str, data: Dict[str, Any]) -> Record:
    if schema_name not in RECORD_TYPES:
        raise ValueError(f"Unknown schema: {schema_name}")
    return RECORD_TYPES[schema_name](**RecordSchemaRegistry.coerce(schema_name, data))
