from typing import Optional

from datagen.errors import GeneratorUnavailable
from datagen.generators.base import BaseGenerator
from datagen.generators.counter import CounterGenerator
from datagen.generators.id_event import IdEventGenerator

GENERATORS = {
    "counter": CounterGenerator,
    "id_event": IdEventGenerator
}


def generator_from_id(kind: str, path: Optional[str] = None, **kwargs) -> BaseGenerator:
    if kind not in GENERATORS:
        raise GeneratorUnavailable(kind)
    return GENERATORS[kind].from_configuration(path, **kwargs)
