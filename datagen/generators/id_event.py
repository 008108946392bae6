import random
from typing import Optional, Sequence

from config.generator_config import IdEventSettings
from datagen.clock import Clock
from datagen.formats import Format
from datagen.generators.base import BaseGenerator
from datagen.schemas import IdEventRecord

DEFAULT_IDS = ("door-1", "window-2", "access-1")
DEFAULT_EVENTS = ("open", "close", "cross")

# emitted in place of a draw from an empty vocabulary
MISSING = "?"


class IdEventGenerator(BaseGenerator):
    """Pairs a random id with a random event, each drawn independently.

    The random source is owned by the generator; pass ``seed`` or ``rng`` for
    reproducible sequences.
    """

    settings_class = IdEventSettings

    def __init__(
        self,
        ids: Sequence[str] = DEFAULT_IDS,
        events: Sequence[str] = DEFAULT_EVENTS,
        format: Format = Format.CSV,
        clock: Optional[Clock] = None,
        seed: Optional[int] = None,
        rng: Optional[random.Random] = None
    ):
        super().__init__(format=format, clock=clock)
        self.ids = tuple(ids)
        self.events = tuple(events)
        self.rng = rng or random.Random(seed)
        if not self.ids or not self.events:
            self.logger.warning(f"Empty vocabulary, '{MISSING}' will be emitted instead")

    @classmethod
    def from_settings(cls, settings: IdEventSettings, **kwargs) -> "IdEventGenerator":
        return cls(ids=settings.ids, events=settings.events, format=settings.format, **kwargs)

    def _choose(self, vocabulary: tuple) -> str:
        if not vocabulary:
            return MISSING
        return self.rng.choice(vocabulary)

    def generate(self) -> IdEventRecord:
        return IdEventRecord(
            time=self.clock(),
            id=self._choose(self.ids),
            event=self._choose(self.events)
        )

    def describe(self) -> str:
        return (
            f"IdEventGenerator(ids={len(self.ids)}, events={len(self.events)}, "
            f"format={self.format.value})"
        )
