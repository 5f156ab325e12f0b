#!/usr/bin/env python3
"""
Command line interface for sending metrics and events to Stackdriver.
"""
import argparse
import json
import logging
import os
import sys
from typing import Any, Dict, List, Optional, Union

from . import config
from .annotation_event import LEVELS
from .client import StackdriverClient
from .collector import SystemCollector
from .exceptions import StackdriverError

logger = logging.getLogger(__name__)

LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']


def setup_logging(log_level: str) -> None:
    """
    Setup logging with the specified log level.

    Args:
        log_level (str): Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """
    numeric_level = getattr(logging, log_level.upper(), None)
    if not isinstance(numeric_level, int):
        raise ValueError(f"Invalid log level: {log_level}")

    logging.basicConfig(
        level=numeric_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def load_config_from_file(config_file: str) -> Dict[str, Any]:
    """
    Load configuration from a JSON file.

    Args:
        config_file (str): Path to the JSON config file

    Returns:
        dict: Configuration dictionary with argument names as keys
    """
    if not os.path.exists(config_file):
        logger.error("Config file not found: %s", config_file)
        return {}

    try:
        with open(config_file, 'r') as f:
            file_config = json.load(f)
    except (json.JSONDecodeError, ValueError) as e:
        logger.error("Error parsing config file %s: %s", config_file, e)
        return {}

    if not isinstance(file_config, dict):
        logger.error("Config file %s must contain a JSON object", config_file)
        return {}

    logger.debug("Loaded configuration from %s", config_file)
    return file_config


def merge_config_with_args(file_config: Dict[str, Any], args: argparse.Namespace) -> argparse.Namespace:
    """
    Merge configuration from a file with command line arguments.
    Command line arguments take precedence over config file values.

    Args:
        file_config (dict): Configuration dictionary from file
        args (argparse.Namespace): Command line arguments

    Returns:
        argparse.Namespace: Updated arguments namespace
    """
    args_dict = vars(args)

    for key, value in file_config.items():
        arg_key = key.replace('-', '_')
        if args_dict.get(arg_key) is None:
            args_dict[arg_key] = value

    return argparse.Namespace(**args_dict)


# Client options that may arrive as strings from a config file
NUMERIC_OPTIONS = {
    'request_timeout': float,
    'max_attempts': int,
    'retry_delay': float,
}


def coerce_numeric_options(args: argparse.Namespace) -> argparse.Namespace:
    """
    Convert numeric client options to their expected types.

    Raises:
        ValueError: If a value cannot be converted
    """
    for key, cast in NUMERIC_OPTIONS.items():
        value = getattr(args, key, None)
        if value is not None:
            try:
                setattr(args, key, cast(value))
            except (TypeError, ValueError):
                raise ValueError(f"Invalid value for {key}: {value!r}") from None
    return args


def parse_value(raw: str) -> Union[int, float, bool, str]:
    """Interpret a metric value given on the command line."""
    lowered = raw.lower()
    if lowered in ('true', 'false'):
        return lowered == 'true'
    for cast in (int, float):
        try:
            return cast(raw)
        except ValueError:
            continue
    return raw


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog='stackdriver-cli',
        description='Send custom metrics, annotation events and deploy events to Stackdriver.',
        formatter_class=argparse.ArgumentDefaultsHelpFormatter
    )

    parser.add_argument('--config-file', type=str,
                        help='Path to JSON configuration file')
    parser.add_argument('--log-level', type=str.upper,
                        choices=LOG_LEVELS,
                        help='Log level (default: LOG_LEVEL or INFO)')

    # Client configuration; unset values fall back to the config file, then environment
    parser.add_argument('--api-key', type=str,
                        help='Stackdriver API key')
    parser.add_argument('--customer-id', type=str,
                        help='Stackdriver customer id')
    parser.add_argument('--request-timeout', type=float,
                        help='Request timeout in seconds')
    parser.add_argument('--max-attempts', type=int,
                        help='Attempts per request on connection errors')
    parser.add_argument('--retry-delay', type=float,
                        help='Delay between attempts in seconds')

    subparsers = parser.add_subparsers(dest='command', required=True)

    metric_parser = subparsers.add_parser('metric', help='Send one custom metric')
    metric_parser.add_argument('name', help='Metric name')
    metric_parser.add_argument('value', type=parse_value, help='Metric value')
    metric_parser.add_argument('--instance-id', type=str,
                               help='Instance the metric belongs to')
    metric_parser.add_argument('--collected-at', type=int,
                               help='Unix time the value was collected (default: now)')

    annotate_parser = subparsers.add_parser('annotate', help='Post an annotation event')
    annotate_parser.add_argument('message', help='Annotation text (truncated to 256 characters)')
    annotate_parser.add_argument('--annotated-by', type=str,
                                 help='Person or robot the annotation is attributed to')
    annotate_parser.add_argument('--level', type=str.upper, choices=LEVELS,
                                 help='Event level')
    annotate_parser.add_argument('--instance-id', type=str,
                                 help='Instance the event belongs to')
    annotate_parser.add_argument('--event-epoch', type=int,
                                 help='Unix time of the event (default: now)')

    deploy_parser = subparsers.add_parser('deploy', help='Post a deploy event')
    deploy_parser.add_argument('revision_id', help='Revision that was deployed')
    deploy_parser.add_argument('--deployed-by', type=str,
                               help='Person or robot responsible for the deploy')
    deploy_parser.add_argument('--deployed-to', type=str,
                               help='Environment deployed to')
    deploy_parser.add_argument('--repository', type=str,
                               help='Repository or project deployed')

    system_parser = subparsers.add_parser('system', help='Send host CPU, memory and disk usage')
    system_parser.add_argument('--instance-id', type=str,
                               help='Instance the metrics belong to')
    system_parser.add_argument('--disk-path', type=str, default='/',
                               help='Mount point to report disk usage for')

    return parser


def build_client(args: argparse.Namespace) -> StackdriverClient:
    return StackdriverClient(
        api_key=args.api_key,
        customer_id=args.customer_id,
        request_timeout=args.request_timeout,
        max_attempts=args.max_attempts,
        retry_delay=args.retry_delay
    )


def run_metric(client: StackdriverClient, args: argparse.Namespace) -> None:
    gateway_message = client.new_gateway_message()
    collected_at = args.collected_at if args.collected_at is not None else gateway_message.timestamp
    gateway_message.custom_metric(args.name, args.value, collected_at, instance_id=args.instance_id)
    client.send(gateway_message)


def run_annotate(client: StackdriverClient, args: argparse.Namespace) -> None:
    client.annotation_event(
        args.message,
        annotated_by=args.annotated_by,
        level=args.level,
        instance_id=args.instance_id,
        event_epoch=args.event_epoch
    )


def run_deploy(client: StackdriverClient, args: argparse.Namespace) -> None:
    client.deploy_event(
        args.revision_id,
        deployed_by=args.deployed_by,
        deployed_to=args.deployed_to,
        repository=args.repository
    )


def run_system(client: StackdriverClient, args: argparse.Namespace) -> None:
    gateway_message = client.new_gateway_message()
    collector = SystemCollector(instance_id=args.instance_id, disk_path=args.disk_path)
    metrics = collector.collect_into(gateway_message)
    logger.info("Collected %s", metrics)
    client.send(gateway_message)


COMMANDS = {
    'metric': run_metric,
    'annotate': run_annotate,
    'deploy': run_deploy,
    'system': run_system,
}


def main(argv: Optional[List[str]] = None) -> int:
    """Parse arguments and run the requested command."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.config_file:
        args = merge_config_with_args(load_config_from_file(args.config_file), args)

    setup_logging(args.log_level or config.LOG_LEVEL)
    if args.config_file:
        logger.info("Loaded configuration from %s", args.config_file)

    try:
        args = coerce_numeric_options(args)
    except ValueError as e:
        parser.error(str(e))

    client = build_client(args)
    try:
        COMMANDS[args.command](client, args)
    except StackdriverError as e:
        logger.error("%s failed: %s", args.command, e)
        return 1
    finally:
        client.close()

    logger.info("%s sent", args.command)
    return 0


if __name__ == "__main__":
    sys.exit(main())
