from threading import Event

import paho.mqtt.client as mqtt

from config.mqtt_config import MqttSinkConfig
from datagen.errors import BrokerConnectError, BrokerSendError
from datagen.sinks.base import BaseSink


class MqttSink(BaseSink):
    """
    Publishes payloads to a single MQTT topic at a fixed QoS.

    Construction connects (authenticating if configured) and blocks until the
    broker answers the CONNECT or ``connect_timeout`` expires. ``send`` blocks
    until the publish completes for the configured QoS.
    """
    
    def __init__(self, config: MqttSinkConfig):
        super().__init__(config.topic)
        self.config = config
        self.qos = config.qos
        
        try:
            self.broker_host, self.broker_port, use_tls = config.broker_address()
        except ValueError as e:
            raise BrokerConnectError(config.host, e) from e
        
        self._connack = Event()
        self._connect_reason = None
        
        self.client = mqtt.Client(mqtt.CallbackAPIVersion.VERSION2, client_id=config.client_id)
        if config.authenticate:
            self.client.username_pw_set(config.username, config.password)
        if use_tls:
            self.client.tls_set()
        
        self.client.on_connect = self._on_connect
        self.client.on_disconnect = self._on_disconnect
        
        self._connect()
    
    def _on_connect(self, client, userdata, flags, reason_code, properties=None):
        self._connect_reason = reason_code
        self._connack.set()
    
    def _on_disconnect(self, client, userdata, flags, reason_code, properties=None):
        if self.closed:
            return
        self.logger.warning(f"Disconnected from broker: {reason_code}")
    
    def _connect(self) -> None:
        broker = f"{self.broker_host}:{self.broker_port}"
        self.logger.info(f"Connecting to MQTT broker {broker}")
        try:
            self.client.connect(self.broker_host, self.broker_port, keepalive=self.config.keepalive)
        except (OSError, ValueError) as e:
            self.logger.error(f"Unable to connect: {e}")
            raise BrokerConnectError(broker, e) from e
        
        self.client.loop_start()
        
        if not self._connack.wait(timeout=self.config.connect_timeout):
            self._abort_connect()
            raise BrokerConnectError(
                broker,
                TimeoutError(f"no CONNACK within {self.config.connect_timeout}s")
            )
        
        if self._connect_reason is not None and self._connect_reason.is_failure:
            self._abort_connect()
            self.logger.error(f"Unable to connect: {self._connect_reason}")
            raise BrokerConnectError(broker, ConnectionRefusedError(str(self._connect_reason)))
        
        self.logger.info(f"Connected to MQTT broker {broker}")
    
    def _abort_connect(self) -> None:
        self.closed = True
        try:
            self.client.disconnect()
        except (OSError, ValueError) as e:
            self.logger.debug(f"Disconnect after failed connect: {e}")
        finally:
            self.client.loop_stop()
    
    def _publish(self, payload: str) -> None:
        info = self.client.publish(self.topic, payload, qos=self.qos)
        if info.rc != mqtt.MQTT_ERR_SUCCESS:
            raise BrokerSendError(self.topic, ConnectionError(mqtt.error_string(info.rc)))
        
        info.wait_for_publish(timeout=self.config.publish_timeout)
        if not info.is_published():
            raise BrokerSendError(
                self.topic,
                TimeoutError(f"publish not acknowledged within {self.config.publish_timeout}s")
            )
        self.logger.debug(f"Message sent: topic={self.topic}, mid={info.mid}")
    
    def _disconnect(self) -> None:
        try:
            rc = self.client.disconnect()
            if rc != mqtt.MQTT_ERR_SUCCESS:
                raise ConnectionError(mqtt.error_string(rc))
        finally:
            self.client.loop_stop()
    
    def describe(self) -> str:
        return f"mqtt {self.config.host} {self.topic} {self.config.username}"
