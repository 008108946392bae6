import os
from dataclasses import dataclass
from typing import Tuple
from urllib.parse import urlparse


TLS_SCHEMES = ("ssl", "mqtts", "tls")


@dataclass(frozen=True)
class MqttSinkConfig:
    host: str
    topic: str
    username: str = ""
    password: str = ""
    authenticate: bool = True
    qos: int = 1
    client_id: str = ""
    keepalive: int = 60
    connect_timeout: float = 10.0
    publish_timeout: float = 10.0

    def __post_init__(self):
        if self.qos not in (0, 1, 2):
            raise ValueError(f"Invalid MQTT QoS: {self.qos}")

    def broker_address(self) -> Tuple[str, int, bool]:
        """Split the broker URI into (hostname, port, use_tls).

        Accepts ``tcp://host:port``, ``mqtt://``, ``ssl://``/``mqtts://`` or a bare
        ``host[:port]``.
        """
        uri = self.host if "://" in self.host else f"tcp://{self.host}"
        parsed = urlparse(uri)
        use_tls = parsed.scheme in TLS_SCHEMES
        if not parsed.hostname:
            raise ValueError(f"Invalid MQTT broker URI: {self.host}")
        port = parsed.port or (8883 if use_tls else 1883)
        return parsed.hostname, port, use_tls


class MqttConfig:
    
    HOST = os.getenv("MQTT_HOST", "tcp://localhost:1883")
    TOPIC = os.getenv("MQTT_TOPIC", "my-topic")
    USERNAME = os.getenv("MQTT_USERNAME", "myusername")
    PASSWORD = os.getenv("MQTT_PASSWORD", "mypassword")
    QOS = int(os.getenv("MQTT_QOS", "1"))
    CLIENT_ID = os.getenv("MQTT_CLIENT_ID", "")
    KEEPALIVE = 60
    CONNECT_TIMEOUT = float(os.getenv("MQTT_CONNECT_TIMEOUT", "10"))
    PUBLISH_TIMEOUT = float(os.getenv("MQTT_PUBLISH_TIMEOUT", "10"))
    
    @classmethod
    def get_sink_config(cls, **overrides) -> MqttSinkConfig:
        params = {
            "host": cls.HOST,
            "topic": cls.TOPIC,
            "username": cls.USERNAME,
            "password": cls.PASSWORD,
            "authenticate": True,
            "qos": cls.QOS,
            "client_id": cls.CLIENT_ID,
            "keepalive": cls.KEEPALIVE,
            "connect_timeout": cls.CONNECT_TIMEOUT,
            "publish_timeout": cls.PUBLISH_TIMEOUT,
        }
        params.update({k: v for k, v in overrides.items() if v is not None})
        return MqttSinkConfig(**params)
