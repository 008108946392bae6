"""
Synthetic event publisher.

Generators produce records, encoders turn them into CSV or JSON payloads and
sinks deliver the payloads to an MQTT or Kafka broker. PublishLoop ties the
three together.
"""

__version__ = "0.1.0"
