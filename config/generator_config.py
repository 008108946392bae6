"""
Generator configuration document.

The document is TOML by default; ``.yaml``/``.yml`` and ``.json`` files are
accepted too. Counter documents recognise ``initial_count`` and ``format``;
id/event documents require ``ids`` and ``events``.
"""
import json
import tomllib
from pathlib import Path
from typing import Any, Dict, List

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from datagen.errors import ConfigError
from datagen.formats import Format

MAX_COUNT = 2 ** 64 - 1


class GeneratorSettings(BaseModel):
    """Settings shared by every generator"""
    model_config = ConfigDict(extra="ignore")

    format: Format = Field(
        default=Format.CSV,
        description="Wire format: CSV or JSON"
    )

    @field_validator('format', mode='before')
    @classmethod
    def normalize_format(cls, v: Any) -> Any:
        if isinstance(v, str):
            return v.strip().upper()
        return v


class CounterSettings(GeneratorSettings):
    """Counter generator settings"""
    initial_count: int = Field(
        default=0,
        strict=True,
        ge=0,
        le=MAX_COUNT,
        description="First count emitted"
    )


class IdEventSettings(GeneratorSettings):
    """Id/event generator settings"""
    ids: List[str] = Field(description="Ids to draw from")
    events: List[str] = Field(description="Events to draw from")


def _parse(path: Path, content: str) -> Dict[str, Any]:
    suffix = path.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = yaml.safe_load(content)
    elif suffix == ".json":
        data = json.loads(content)
    else:
        data = tomllib.loads(content)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError("config document must be a table/mapping")
    return data


def load_document(path: str) -> Dict[str, Any]:
    """Read and parse a configuration document, raising ConfigError on any failure."""
    try:
        content = Path(path).read_text(encoding="utf-8")
        return _parse(Path(path), content)
    except (OSError, UnicodeDecodeError, ValueError, yaml.YAMLError) as e:
        # TOMLDecodeError and JSONDecodeError are ValueError subclasses
        raise ConfigError(path, e) from e


def load_settings(path: str, settings_cls: type) -> GeneratorSettings:
    data = load_document(path)
    try:
        return settings_cls.model_validate(data)
    except ValidationError as e:
        raise ConfigError(path, e) from e
