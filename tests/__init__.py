"""
Test suite for the synthetic event publisher.

Brokers are never contacted: MQTT and Kafka clients are mocked and the publish
loop runs against an in-memory sink.
"""
