from abc import ABC, abstractmethod
from typing import Dict

from datagen.errors import BrokerCloseError, BrokerSendError
from datagen.utils.logger import setup_logger


class BaseSink(ABC):
    """Owns one broker connection. Connected on construction, send() blocks until acknowledged."""
    
    def __init__(self, topic: str):
        self.topic = topic
        self.logger = setup_logger(self.__class__.__name__)
        self.closed = False
        self.messages_sent = 0
        self.messages_failed = 0
    
    def send(self, payload: str) -> None:
        if self.closed:
            raise BrokerSendError(self.topic, RuntimeError("sink is closed"))
        try:
            self._publish(payload)
        except BrokerSendError:
            self.messages_failed += 1
            raise
        except Exception as e:
            self.messages_failed += 1
            raise BrokerSendError(self.topic, e) from e
        self.messages_sent += 1
    
    def close(self) -> None:
        """Disconnect once. Later calls are no-ops."""
        if self.closed:
            self.logger.debug("Sink already closed")
            return
        self.closed = True
        try:
            self._disconnect()
        except Exception as e:
            raise BrokerCloseError(e) from e
        self.logger.info(
            f"Sink closed. Sent: {self.messages_sent}, "
            f"Failed: {self.messages_failed}"
        )
    
    @abstractmethod
    def _publish(self, payload: str) -> None:
        pass
    
    @abstractmethod
    def _disconnect(self) -> None:
        pass
    
    @abstractmethod
    def describe(self) -> str:
        pass
    
    def get_metrics(self) -> Dict[str, int]:
        return {
            "messages_sent": self.messages_sent,
            "messages_failed": self.messages_failed
        }
    
    def __enter__(self):
        return self
    
    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
