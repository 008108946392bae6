import os
from dataclasses import dataclass
from typing import Dict


@dataclass(frozen=True)
class KafkaSinkConfig:
    bootstrap_servers: str
    topic: str
    message_timeout_ms: int = 5000


class KafkaConfig:
    
    BOOTSTRAP_SERVERS = os.getenv("KAFKA_BOOTSTRAP_SERVERS", "127.0.0.1:9092")
    TOPIC = os.getenv("KAFKA_TOPIC", "my-topic")
    MESSAGE_TIMEOUT_MS = int(os.getenv("KAFKA_MESSAGE_TIMEOUT_MS", "5000"))
    
    #per-message timeout bounds the request, the send() block and the wait on the result
    PRODUCER_CONFIG = {
        "acks": 1,
        "retries": 0,
        "linger_ms": 0,
    }
    
    @classmethod
    def get_sink_config(cls, **overrides) -> KafkaSinkConfig:
        params = {
            "bootstrap_servers": cls.BOOTSTRAP_SERVERS,
            "topic": cls.TOPIC,
            "message_timeout_ms": cls.MESSAGE_TIMEOUT_MS,
        }
        params.update({k: v for k, v in overrides.items() if v is not None})
        return KafkaSinkConfig(**params)
    
    @classmethod
    def get_producer_config(cls, sink_config: KafkaSinkConfig, **overrides) -> Dict:
        config = cls.PRODUCER_CONFIG.copy()
        config["bootstrap_servers"] = [
            s.strip() for s in sink_config.bootstrap_servers.split(",") if s.strip()
        ]
        config["request_timeout_ms"] = sink_config.message_timeout_ms
        config["max_block_ms"] = sink_config.message_timeout_ms
        config.update(overrides)
        return config
