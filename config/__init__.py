"""Configuration module"""
from config.kafka_config import KafkaConfig, KafkaSinkConfig
from config.mqtt_config import MqttConfig, MqttSinkConfig
from config.publisher_config import PublisherConfig

__all__ = ["KafkaConfig", "KafkaSinkConfig", "MqttConfig", "MqttSinkConfig", "PublisherConfig"]
