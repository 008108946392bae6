import argparse
import sys
from typing import List, Optional

from config.kafka_config import KafkaConfig
from config.mqtt_config import MqttConfig
from config.publisher_config import PublisherConfig
from datagen.errors import DatagenError, InvalidSinkConfig, SinkUnavailable
from datagen.generators import GENERATORS, generator_from_id
from datagen.publisher import PublishLoop
from datagen.sinks import new_sink
from datagen.utils.logger import set_log_level, setup_logger


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='datagen',
        description='Generate data and send it to an MQTT or Kafka broker'
    )
    parser.add_argument(
        '-i', '--interval',
        type=int,
        default=PublisherConfig.INTERVAL_MS,
        metavar='MS',
        help='Sleep [interval] between messages'
    )
    parser.add_argument(
        '-g', '--generator',
        default=PublisherConfig.GENERATOR,
        metavar='GENERATOR_ID',
        help=f"Generator type to use ({', '.join(GENERATORS)})"
    )
    parser.add_argument(
        '-c', '--generator-config',
        default=None,
        metavar='PATH',
        help='Path to config file to setup generator'
    )
    parser.add_argument(
        '-n', '--count',
        type=int,
        default=None,
        help='Stop after this many cycles (default: run until interrupted)'
    )
    parser.add_argument(
        '--log-level',
        default=PublisherConfig.LOG_LEVEL,
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
        help='Log level'
    )
    
    subparsers = parser.add_subparsers(dest='sink')
    
    mqtt_parser = subparsers.add_parser(
        'mqtt-gen',
        help='Generate data and send it to an MQTT broker'
    )
    mqtt_parser.add_argument('-H', '--host', default=MqttConfig.HOST, help='MQTT broker host')
    mqtt_parser.add_argument('-t', '--topic', default=MqttConfig.TOPIC, help='MQTT broker topic')
    mqtt_parser.add_argument(
        '-u', '--username',
        default=MqttConfig.USERNAME,
        help='MQTT broker authentication username'
    )
    mqtt_parser.add_argument(
        '-p', '--password',
        default=MqttConfig.PASSWORD,
        help='MQTT broker authentication password'
    )
    mqtt_parser.add_argument(
        '-q', '--qos',
        type=int,
        choices=[0, 1, 2],
        default=MqttConfig.QOS,
        help='MQTT delivery QoS'
    )
    mqtt_parser.add_argument(
        '--no-auth',
        action='store_true',
        help='Connect without username/password'
    )
    
    kafka_parser = subparsers.add_parser(
        'kafka-gen',
        help='Generate data and send it to a Kafka broker'
    )
    kafka_parser.add_argument(
        '-b', '--bootstrap-servers',
        default=KafkaConfig.BOOTSTRAP_SERVERS,
        help='Bootstrap server list'
    )
    kafka_parser.add_argument('-t', '--topic', default=KafkaConfig.TOPIC, help='Kafka topic')
    
    return parser


def sink_config_from_args(args: argparse.Namespace):
    try:
        if args.sink == 'mqtt-gen':
            return MqttConfig.get_sink_config(
                host=args.host,
                topic=args.topic,
                username=args.username,
                password=args.password,
                authenticate=not args.no_auth,
                qos=args.qos
            )
        if args.sink == 'kafka-gen':
            return KafkaConfig.get_sink_config(
                bootstrap_servers=args.bootstrap_servers,
                topic=args.topic
            )
    except (TypeError, ValueError) as e:
        # environment defaults bypass argparse choices
        raise InvalidSinkConfig(args.sink, e) from e
    raise SinkUnavailable(args.sink)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    
    set_log_level(args.log_level)
    logger = setup_logger("datagen", level=args.log_level)
    
    if args.interval < 0:
        parser.error("--interval must be >= 0")
    
    try:
        sink_config = sink_config_from_args(args)
        generator = generator_from_id(args.generator, args.generator_config)
        # config errors above abort before any connection is attempted
        sink = new_sink(sink_config)
    except DatagenError as e:
        logger.error(f"Error ({e.stage}): {e}")
        return 1
    
    loop = PublishLoop(generator, sink, interval_ms=args.interval)
    try:
        loop.run(max_cycles=args.count)
    except DatagenError as e:
        logger.error(f"Error ({e.stage}): {e}")
        return 1
    
    return 0


if __name__ == "__main__":
    sys.exit(main())
