from kafka import KafkaProducer
from kafka.errors import KafkaError

from config.kafka_config import KafkaConfig, KafkaSinkConfig
from datagen.errors import BrokerConnectError, BrokerSendError
from datagen.sinks.base import BaseSink


class KafkaSink(BaseSink):
    
    def __init__(self, config: KafkaSinkConfig, **producer_overrides):
        super().__init__(config.topic)
        self.config = config
        self.timeout_sec = config.message_timeout_ms / 1000
        
        producer_config = KafkaConfig.get_producer_config(config, **producer_overrides)
        producer_config['value_serializer'] = lambda v: v.encode('utf-8')
        
        try:
            self.producer = KafkaProducer(**producer_config)
            self.logger.info(f"Producer initialized: {config.bootstrap_servers}")
        except Exception as e:
            self.logger.error(f"Failed to initialize producer: {e}")
            raise BrokerConnectError(config.bootstrap_servers, e) from e
    
    def _publish(self, payload: str) -> None:
        try:
            future = self.producer.send(self.topic, value=payload)
            record_metadata = future.get(timeout=self.timeout_sec)
        except KafkaError as e:
            self.logger.error(f"Kafka error sending message: {e}")
            raise BrokerSendError(self.topic, e) from e
        
        self.logger.debug(
            f"Message sent: topic={record_metadata.topic}, "
            f"partition={record_metadata.partition}, "
            f"offset={record_metadata.offset}"
        )
    
    def _disconnect(self) -> None:
        try:
            self.producer.flush(timeout=self.timeout_sec)
        finally:
            self.producer.close(timeout=self.timeout_sec)
    
    def describe(self) -> str:
        return f"kafka {self.config.bootstrap_servers} {self.topic}"
