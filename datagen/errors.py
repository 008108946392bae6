"""
Error taxonomy for the publisher.

Every error carries the stage it was raised in so the CLI can tell the user
whether startup, generation or delivery failed.
"""
from typing import Optional


class DatagenError(Exception):
    stage = "startup"

    def __init__(self, message: str, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.cause = cause


class ConfigError(DatagenError):

    def __init__(self, path: str, cause: BaseException):
        super().__init__(f"Invalid generator config '{path}': {cause}", cause)
        self.path = path


class GeneratorUnavailable(DatagenError):

    def __init__(self, kind: str):
        super().__init__(f"Unknown generator: {kind}")
        self.kind = kind


class SinkUnavailable(DatagenError):

    def __init__(self, kind: Optional[str]):
        message = f"Invalid sink: {kind}" if kind else "No sink selected"
        super().__init__(message)
        self.kind = kind


class InvalidSinkConfig(DatagenError):

    def __init__(self, kind: str, cause: BaseException):
        super().__init__(f"Invalid {kind} settings: {cause}", cause)
        self.kind = kind


class BrokerConnectError(DatagenError):

    def __init__(self, broker: str, cause: BaseException):
        super().__init__(f"Unable to connect to {broker}: {cause}", cause)
        self.broker = broker


class BrokerSendError(DatagenError):
    stage = "sending"

    def __init__(self, topic: str, cause: BaseException):
        super().__init__(f"Error sending message to '{topic}': {cause}", cause)
        self.topic = topic


class BrokerCloseError(DatagenError):
    stage = "closing"

    def __init__(self, cause: BaseException):
        super().__init__(f"Error closing sink: {cause}", cause)


class GenerationError(DatagenError):
    stage = "generation"

    def __init__(self, cause: BaseException):
        super().__init__(f"Error generating data: {cause}", cause)


class EncodingError(DatagenError):
    stage = "encoding"

    def __init__(self, format_name: str, cause: BaseException):
        super().__init__(f"Error encoding record as {format_name}: {cause}", cause)
        self.format_name = format_name
