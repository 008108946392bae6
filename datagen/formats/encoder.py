"""
Record encoders.

Each call to ``encode`` yields a self-contained payload: CSV payloads carry
their own header row, JSON payloads are one object. Nothing is shared between
calls.
"""
import io
import json
from abc import ABC, abstractmethod
from enum import Enum

import pandas as pd

from datagen.errors import EncodingError
from datagen.schemas import Record, RecordSchemaRegistry, from_dict


class Format(str, Enum):
    CSV = "CSV"
    JSON = "JSON"


class BaseEncoder(ABC):

    format: Format

    def encode(self, record: Record) -> str:
        data = record.to_dict()
        if not RecordSchemaRegistry.validate_schema(record.schema_name, data):
            raise EncodingError(
                self.format.value,
                ValueError(f"record does not match schema '{record.schema_name}'")
            )
        try:
            return self._serialize(record.schema_name, data)
        except EncodingError:
            raise
        except Exception as e:
            raise EncodingError(self.format.value, e) from e

    def decode(self, text: str, schema_name: str) -> Record:
        try:
            data = self._deserialize(text)
            return from_dict(schema_name, data)
        except EncodingError:
            raise
        except Exception as e:
            raise EncodingError(self.format.value, e) from e

    @abstractmethod
    def _serialize(self, schema_name: str, data: dict) -> str:
        pass

    @abstractmethod
    def _deserialize(self, text: str) -> dict:
        pass


class CsvEncoder(BaseEncoder):

    format = Format.CSV

    def _serialize(self, schema_name: str, data: dict) -> str:
        columns = RecordSchemaRegistry.field_names(schema_name)
        frame = pd.DataFrame([data], columns=columns)
        return frame.to_csv(index=False, lineterminator="\n")

    def _deserialize(self, text: str) -> dict:
        frame = pd.read_csv(io.StringIO(text), dtype=str, keep_default_na=False)
        if len(frame) != 1:
            raise ValueError(f"expected exactly one data row, got {len(frame)}")
        return frame.iloc[0].to_dict()


class JsonEncoder(BaseEncoder):

    format = Format.JSON

    def _serialize(self, schema_name: str, data: dict) -> str:
        return json.dumps(data, separators=(",", ":"), ensure_ascii=False)

    def _deserialize(self, text: str) -> dict:
        data = json.loads(text)
        if not isinstance(data, dict):
            raise ValueError("expected a JSON object")
        return data


_ENCODERS = {
    Format.CSV: CsvEncoder,
    Format.JSON: JsonEncoder
}


def encoder_for(fmt: Format) -> BaseEncoder:
    return _ENCODERS[Format(fmt)]()
