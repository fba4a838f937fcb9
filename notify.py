#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Script to manage an SNS topic: subscribe an endpoint, publish a message, or
list topics and subscriptions.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

# Add project root to path
project_root = Path(__file__).parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from sns_sdk import SNSConfig, SNSSDK, SNSSDKError
from config_reader import load_sns_config

MAX_MESSAGE_LENGTH = 256

logger = logging.getLogger('notify')


def setup_logging(verbose: bool = False) -> None:
    """Send log records to stderr, DEBUG when verbose."""
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter('%(asctime)s - %(levelname)s - %(message)s'))

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(logging.DEBUG if verbose else logging.INFO)


def load_config(config_file: str, from_env: bool, region: Optional[str] = None) -> SNSConfig:
    if from_env:
        return SNSConfig.from_environment(region=region)
    return load_sns_config(config_file)


def subscribe_endpoint(
    sdk: SNSSDK,
    topic_name: str,
    protocol: str,
    endpoint: str,
    display_name: Optional[str] = None
) -> str:
    """
    Recreate a topic and subscribe an endpoint to it.

    An existing topic with the same name is deleted first.

    Returns:
        TopicArn of the new topic
    """
    existing_arn = sdk.find_topic_arn(topic_name)
    if existing_arn:
        print(f"Removing duplicate ARN: {existing_arn}\n")
        sdk.delete_topic(existing_arn)

    arn = sdk.create_topic(topic_name)
    sdk.set_topic_attributes(arn, 'DisplayName', display_name or topic_name)
    sdk.subscribe(arn, protocol, endpoint)

    print(f"Subscription request sent to: {endpoint}")
    return arn


def publish_message(sdk: SNSSDK, topic_name: str, message: str) -> Optional[str]:
    """
    Publish a message to the topic with the given name.

    Returns:
        MessageId, or None when no topic with that name exists

    Raises:
        ValueError: If the message is MAX_MESSAGE_LENGTH characters or longer
    """
    if len(message) >= MAX_MESSAGE_LENGTH:
        raise ValueError(f"Input message must be shorter than {MAX_MESSAGE_LENGTH} characters")

    arn = sdk.find_topic_arn(topic_name)
    if arn is None:
        print(f"Topic not found: {topic_name}")
        return None

    print(f"Sending message: {message}")
    print(f"To Topic ARN: {arn}")
    message_id = sdk.publish(arn, message)
    print(f"Confirmation: {message_id}")
    return message_id


def list_everything(sdk: SNSSDK) -> None:
    """Print all topics and subscriptions."""
    topics = sdk.list_all_topics()
    print(f"{'='*80}")
    print(f"Topics ({len(topics)}):")
    print(f"{'='*80}")
    for topic in topics:
        print(f"  {topic.get('TopicArn', '')}")

    subscriptions = sdk.list_all_subscriptions()
    print(f"\n{'='*80}")
    print(f"Subscriptions ({len(subscriptions)}):")
    print(f"{'='*80}")
    for subscription in subscriptions:
        print(f"  {subscription.get('SubscriptionArn', '')}")
        print(f"    Topic: {subscription.get('TopicArn', '')}")
        print(f"    Protocol: {subscription.get('Protocol', '')}")
        print(f"    Endpoint: {subscription.get('Endpoint', '')}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Subscribe, publish to, or list SNS topics',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Recreate topic 'SNSTest' and subscribe a phone number by SMS
  python notify.py subscribe --topic SNSTest --protocol sms --endpoint 12065550100

  # Publish a message to topic 'SNSTest'
  python notify.py publish --topic SNSTest --message "Hello"

  # List topics and subscriptions using credentials from the environment
  python notify.py --from-env list
        """
    )

    parser.add_argument(
        '--config',
        type=str,
        default='sns_config.json',
        help='Path to SNS configuration file (default: sns_config.json)'
    )

    parser.add_argument(
        '--from-env',
        action='store_true',
        help='Resolve credentials from the AWS environment instead of the config file'
    )

    parser.add_argument(
        '--region',
        type=str,
        default=None,
        help='AWS region when using --from-env'
    )

    parser.add_argument(
        '--verbose',
        action='store_true',
        help='Enable debug logging'
    )

    subparsers = parser.add_subparsers(dest='command', required=True)

    subscribe = subparsers.add_parser('subscribe', help='Recreate a topic and subscribe an endpoint')
    subscribe.add_argument('--topic', type=str, required=True, help='Topic name')
    subscribe.add_argument('--protocol', type=str, default='sms', help='Delivery protocol (default: sms)')
    subscribe.add_argument('--endpoint', type=str, required=True, help='Endpoint to subscribe')
    subscribe.add_argument('--display-name', type=str, default=None, help='Topic display name')

    publish = subparsers.add_parser('publish', help='Publish a message to a topic')
    publish.add_argument('--topic', type=str, required=True, help='Topic name')
    publish.add_argument('--message', type=str, required=True, help='Message to publish')

    subparsers.add_parser('list', help='List topics and subscriptions')

    return parser


def main(argv=None) -> int:
    """Main function with command line argument parsing."""
    args = build_parser().parse_args(argv)
    setup_logging(args.verbose)

    try:
        config = load_config(args.config, args.from_env, args.region)
    except (FileNotFoundError, ValueError, SNSSDKError) as e:
        print(f"Error: {e}")
        return 1

    sdk = SNSSDK(config)

    try:
        if args.command == 'subscribe':
            subscribe_endpoint(sdk, args.topic, args.protocol, args.endpoint, args.display_name)
        elif args.command == 'publish':
            if publish_message(sdk, args.topic, args.message) is None:
                return 1
        else:
            list_everything(sdk)
    except ValueError as e:
        print(f"Error: {e}")
        return 1
    except SNSSDKError as e:
        logger.error(f"SNS request failed: {e}")
        return 1

    return 0


if __name__ == '__main__':
    sys.exit(main())
