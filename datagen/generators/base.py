from abc import ABC, abstractmethod
from typing import Optional

from config.generator_config import GeneratorSettings, load_settings
from datagen.clock import Clock, utc_now_iso8601
from datagen.formats import Format, encoder_for
from datagen.schemas import Record
from datagen.utils.logger import setup_logger


class BaseGenerator(ABC):
    """Produces one record per call to generate(); the wire format is fixed at construction."""

    settings_class = GeneratorSettings

    def __init__(self, format: Format = Format.CSV, clock: Optional[Clock] = None):
        self.format = Format(format)
        self.encoder = encoder_for(self.format)
        self.clock = clock or utc_now_iso8601
        self.logger = setup_logger(self.__class__.__name__)

    @abstractmethod
    def generate(self) -> Record:
        pass

    def next_payload(self) -> str:
        return self.encoder.encode(self.generate())

    @classmethod
    def new(cls, **kwargs) -> "BaseGenerator":
        return cls(**kwargs)

    @classmethod
    @abstractmethod
    def from_settings(cls, settings: GeneratorSettings, **kwargs) -> "BaseGenerator":
        pass

    @classmethod
    def from_configuration(cls, path: Optional[str] = None, **kwargs) -> "BaseGenerator":
        """Build from a config document, or from built-in defaults when path is None.

        Raises ConfigError if the document cannot be read, parsed or validated.
        """
        if path is None:
            return cls.new(**kwargs)
        settings = load_settings(path, cls.settings_class)
        generator = cls.from_settings(settings, **kwargs)
        generator.logger.info(f"Generator configured from {path}: {generator.describe()}")
        return generator

    def describe(self) -> str:
        return f"{self.__class__.__name__}(format={self.format.value})"
