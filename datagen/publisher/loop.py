import time
from enum import Enum
from typing import Callable, Optional

from datagen.errors import BrokerCloseError, BrokerSendError
from datagen.generators import BaseGenerator
from datagen.sinks import BaseSink
from datagen.utils.logger import setup_logger


class LoopState(str, Enum):
    IDLE = "idle"
    GENERATING = "generating"
    ENCODING = "encoding"
    SENDING = "sending"
    SLEEPING = "sleeping"
    CLOSED = "closed"


class PublishLoop:
    """
    Drives generator -> encoder -> sink on a fixed interval.

    Generation and encoding failures are logged and the cycle is skipped.
    A send failure is fatal: the sink is closed and the BrokerSendError is
    re-raised to the caller.
    """
    
    def __init__(
        self,
        generator: BaseGenerator,
        sink: BaseSink,
        interval_ms: int = 500,
        sleep: Callable[[float], None] = time.sleep
    ):
        if interval_ms < 0:
            raise ValueError(f"interval_ms must be >= 0, got {interval_ms}")
        self.generator = generator
        self.sink = sink
        self.interval_sec = interval_ms / 1000
        self.sleep = sleep
        self.state = LoopState.IDLE
        self.logger = setup_logger(self.__class__.__name__)
    
    def run(self, max_cycles: Optional[int] = None) -> dict:
        """Publish until max_cycles is reached or the process is interrupted.

        Returns run statistics. Raises BrokerSendError if a send fails.
        """
        self.logger.info(f"gen {self.sink.describe()} {self.generator.describe()}")
        self.logger.info("Ctrl-c to quit")
        
        stats = {
            "cycles": 0,
            "sent": 0,
            "generation_errors": 0,
            "start_time": time.time()
        }
        
        try:
            while max_cycles is None or stats["cycles"] < max_cycles:
                stats["cycles"] += 1
                payload = self._produce(stats)
                
                if payload is not None:
                    self.state = LoopState.SENDING
                    try:
                        self.sink.send(payload)
                    except BrokerSendError as e:
                        self.logger.error(f"Error sending message: {e}")
                        self._shutdown(stats)
                        raise
                    stats["sent"] += 1
                
                if max_cycles is not None and stats["cycles"] >= max_cycles:
                    break
                self.state = LoopState.SLEEPING
                self.sleep(self.interval_sec)
        except KeyboardInterrupt:
            self.logger.info("Publishing interrupted by user")
        
        self._shutdown(stats)
        return stats
    
    def _produce(self, stats: dict) -> Optional[str]:
        self.state = LoopState.GENERATING
        try:
            record = self.generator.generate()
            self.state = LoopState.ENCODING
            return self.generator.encoder.encode(record)
        except Exception as e:
            self.logger.error(f"Error generating data ({self.state.value}): {e}")
            stats["generation_errors"] += 1
            return None
    
    def _shutdown(self, stats: dict) -> None:
        if self.state == LoopState.CLOSED:
            return
        self.state = LoopState.CLOSED
        try:
            self.sink.close()
        except BrokerCloseError as e:
            self.logger.error(str(e))
        
        stats["end_time"] = time.time()
        stats["duration"] = stats["end_time"] - stats["start_time"]
        self._print_statistics(stats)
    
    def _print_statistics(self, stats: dict) -> None:
        self.logger.info("=" * 60)
        self.logger.info("PUBLISH STATISTICS")
        self.logger.info("=" * 60)
        self.logger.info(f"Cycles: {stats['cycles']}")
        self.logger.info(f"Messages Sent: {stats['sent']}")
        self.logger.info(f"Generation Errors: {stats['generation_errors']}")
        self.logger.info(f"Duration: {stats['duration']:.2f} seconds")
        self.logger.info("=" * 60)
