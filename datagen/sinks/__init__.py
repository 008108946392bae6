"""
Broker sinks
"""

from config.kafka_config import KafkaSinkConfig
from config.mqtt_config import MqttSinkConfig
from datagen.errors import SinkUnavailable
from datagen.sinks.base import BaseSink
from datagen.sinks.kafka_sink import KafkaSink
from datagen.sinks.mqtt_sink import MqttSink


def new_sink(config) -> BaseSink:
    if isinstance(config, MqttSinkConfig):
        return MqttSink(config)
    if isinstance(config, KafkaSinkConfig):
        return KafkaSink(config)
    raise SinkUnavailable(type(config).__name__)


__all__ = [
    'BaseSink',
    'KafkaSink',
    'MqttSink',
    'new_sink'
]
