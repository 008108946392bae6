from typing import Optional

from config.generator_config import MAX_COUNT, CounterSettings
from datagen.clock import Clock
from datagen.errors import GenerationError
from datagen.formats import Format
from datagen.generators.base import BaseGenerator
from datagen.schemas import CounterRecord


class CounterGenerator(BaseGenerator):
    """Emits the current count, then advances it by one."""

    settings_class = CounterSettings

    def __init__(
        self,
        initial_count: int = 0,
        format: Format = Format.CSV,
        clock: Optional[Clock] = None
    ):
        super().__init__(format=format, clock=clock)
        if initial_count < 0 or initial_count > MAX_COUNT:
            raise ValueError(f"initial_count out of range: {initial_count}")
        self.count = initial_count

    @classmethod
    def from_settings(cls, settings: CounterSettings, **kwargs) -> "CounterGenerator":
        return cls(initial_count=settings.initial_count, format=settings.format, **kwargs)

    def generate(self) -> CounterRecord:
        if self.count > MAX_COUNT:
            raise GenerationError(OverflowError("counter exhausted"))
        record = CounterRecord(time=self.clock(), count=self.count)
        self.count += 1
        return record

    def describe(self) -> str:
        return f"CounterGenerator(count={self.count}, format={self.format.value})"
