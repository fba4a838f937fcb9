"""
High-level SNS SDK for topic, subscription and permission operations.
"""

from collections import abc
from typing import Dict, List, Mapping, Optional, Sequence, Tuple

import requests

from .config import SNSConfig
from .exceptions import SNSValidationError
from .responses import entries_to_dict, find_text, members_to_list
from .sns_client import SNSClient


class SNSSDK:
    """
    High-level SNS SDK providing one method per SNS action.

    Every method checks its required arguments before anything is sent, so a
    missing topic ARN never reaches the network.
    """

    def __init__(
        self,
        config: SNSConfig,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None
    ):
        """
        Initialize SNS SDK with configuration.

        Args:
            config: SNSConfig instance containing AWS credentials and settings
            session: Optional requests.Session used for every request
            timeout: Optional request timeout in seconds
        """
        self.config = config
        self._client = SNSClient(config, session=session, timeout=timeout)

    # Topics

    def create_topic(self, name: str) -> str:
        """
        Create an SNS topic.

        Args:
            name: Topic name

        Returns:
            TopicArn of the created (or already existing) topic

        Example:
            arn = sdk.create_topic('alerts')
        """
        _require(name=name)
        root = self._client.request('CreateTopic', {'Name': name})
        return find_text(root, 'CreateTopicResult/TopicArn')

    def delete_topic(self, topic_arn: str) -> bool:
        """
        Delete an SNS topic.

        Returns:
            True if successful
        """
        _require(topic_arn=topic_arn)
        self._client.request('DeleteTopic', {'TopicArn': topic_arn})
        return True

    def get_topic_attributes(self, topic_arn: str) -> Dict[str, str]:
        """
        Get the attributes of a topic like owner, policy and display name.

        Returns:
            Dict of attribute name -> value

        Example:
            sdk.get_topic_attributes(arn)['DisplayName']
        """
        _require(topic_arn=topic_arn)
        root = self._client.request('GetTopicAttributes', {'TopicArn': topic_arn})
        return entries_to_dict(root.find('GetTopicAttributesResult/Attributes'))

    def set_topic_attributes(self, topic_arn: str, attr_name: str, attr_value: str) -> bool:
        """
        Set a single attribute on a topic.

        Returns:
            True if successful
        """
        _require(topic_arn=topic_arn, attr_name=attr_name, attr_value=attr_value)
        self._client.request('SetTopicAttributes', {
            'TopicArn': topic_arn,
            'AttributeName': attr_name,
            'AttributeValue': attr_value,
        })
        return True

    def list_topics(self, next_token: Optional[str] = None) -> List[Dict[str, str]]:
        """
        List one page of SNS topics.

        Args:
            next_token: Token returned by a previous page

        Returns:
            List of dicts with a 'TopicArn' key
        """
        topics, _ = self.list_topics_page(next_token)
        return topics

    def list_topics_page(
        self, next_token: Optional[str] = None
    ) -> Tuple[List[Dict[str, str]], Optional[str]]:
        """Return (topics, next_token) for one page; next_token is None on the last page."""
        return self._list_page('ListTopics', 'ListTopicsResult', 'Topics', {}, next_token)

    def list_all_topics(self) -> List[Dict[str, str]]:
        """List every topic, following NextToken until exhausted."""
        return self._list_all(self.list_topics_page)

    def find_topic_arn(self, name: str) -> Optional[str]:
        """
        Find the ARN of a topic by its name.

        Returns:
            The TopicArn whose last ':'-separated segment equals name, or None
        """
        _require(name=name)
        for topic in self.list_all_topics():
            arn = topic.get('TopicArn', '')
            if arn.rsplit(':', 1)[-1].strip() == name:
                return arn
        return None

    # Publishing

    def publish(self, topic_arn: str, message: str, subject: str = '') -> str:
        """
        Publish a message to a topic.

        Args:
            topic_arn: Topic to publish to
            message: Message body
            subject: Optional subject, used when delivering to email endpoints

        Returns:
            MessageId assigned by SNS
        """
        _require(topic_arn=topic_arn, message=message)
        params = {'TopicArn': topic_arn, 'Message': message}
        if subject:
            params['Subject'] = subject

        root = self._client.request('Publish', params)
        return find_text(root, 'PublishResult/MessageId')

    # Subscriptions

    def subscribe(self, topic_arn: str, protocol: str, endpoint: str) -> bool:
        """
        Subscribe an endpoint to a topic.

        Args:
            topic_arn: Topic to subscribe to
            protocol: http, https, email, email-json, sms, sqs, ...
            endpoint: Address matching the protocol (URL, email, phone number, queue ARN)

        Returns:
            True if the subscription request was accepted
        """
        _require(topic_arn=topic_arn, protocol=protocol, endpoint=endpoint)
        self._client.request('Subscribe', {
            'TopicArn': topic_arn,
            'Protocol': protocol,
            'Endpoint': endpoint,
        })
        return True

    def unsubscribe(self, subscription_arn: str) -> bool:
        _require(subscription_arn=subscription_arn)
        self._client.request('Unsubscribe', {'SubscriptionArn': subscription_arn})
        return True

    def confirm_subscription(
        self,
        topic_arn: str,
        token: str,
        authenticate_on_unsubscribe: Optional[bool] = None
    ) -> str:
        """
        Confirm a pending subscription with the token SNS sent to the endpoint.

        Args:
            topic_arn: Topic the subscription belongs to
            token: Confirmation token
            authenticate_on_unsubscribe: If set, sent as 'true'/'false'

        Returns:
            SubscriptionArn of the confirmed subscription
        """
        _require(topic_arn=topic_arn, token=token)
        params = {'TopicArn': topic_arn, 'Token': token}
        if authenticate_on_unsubscribe is not None:
            params['AuthenticateOnUnsubscribe'] = bool(authenticate_on_unsubscribe)

        root = self._client.request('ConfirmSubscription', params)
        return find_text(root, 'ConfirmSubscriptionResult/SubscriptionArn')

    def list_subscriptions(self, next_token: Optional[str] = None) -> List[Dict[str, str]]:
        """
        List one page of subscriptions of the account.

        Returns:
            List of dicts with keys like 'TopicArn', 'Protocol', 'SubscriptionArn',
            'Owner' and 'Endpoint'
        """
        subscriptions, _ = self.list_subscriptions_page(next_token)
        return subscriptions

    def list_subscriptions_page(
        self, next_token: Optional[str] = None
    ) -> Tuple[List[Dict[str, str]], Optional[str]]:
        return self._list_page(
            'ListSubscriptions', 'ListSubscriptionsResult', 'Subscriptions', {}, next_token
        )

    def list_all_subscriptions(self) -> List[Dict[str, str]]:
        return self._list_all(self.list_subscriptions_page)

    def list_subscriptions_by_topic(
        self, topic_arn: str, next_token: Optional[str] = None
    ) -> List[Dict[str, str]]:
        """
        List one page of subscriptions to a topic.

        Returns:
            List of subscription dicts, same shape as list_subscriptions()
        """
        subscriptions, _ = self.list_subscriptions_by_topic_page(topic_arn, next_token)
        return subscriptions

    def list_subscriptions_by_topic_page(
        self, topic_arn: str, next_token: Optional[str] = None
    ) -> Tuple[List[Dict[str, str]], Optional[str]]:
        _require(topic_arn=topic_arn)
        return self._list_page(
            'ListSubscriptionsByTopic',
            'ListSubscriptionsByTopicResult',
            'Subscriptions',
            {'TopicArn': topic_arn},
            next_token
        )

    def list_all_subscriptions_by_topic(self, topic_arn: str) -> List[Dict[str, str]]:
        _require(topic_arn=topic_arn)
        return self._list_all(
            lambda token: self.list_subscriptions_by_topic_page(topic_arn, token)
        )

    # Permissions

    def add_permission(
        self,
        topic_arn: str,
        label: str,
        permissions: Mapping[str, Sequence[str]]
    ) -> bool:
        """
        Add permissions to a topic.

        Args:
            topic_arn: Topic to grant access to
            label: Unique name of this permission statement
            permissions: AWS account id -> sequence of action names

        Returns:
            True if successful

        Raises:
            SNSValidationError: If topic_arn or label is empty, or permissions is empty
                or malformed

        Example:
            sdk.add_permission(arn, 'partners', {
                '987654321000': ['Publish'],
                '876543210000': ['Publish', 'SetTopicAttributes'],
            })
        """
        _require(topic_arn=topic_arn, label=label)
        params = {'TopicArn': topic_arn, 'Label': label}
        params.update(flatten_permissions(permissions or {}))

        self._client.request('AddPermission', params)
        return True

    def remove_permission(self, topic_arn: str, label: str) -> bool:
        """
        Remove the permission statement identified by topic and label.

        Returns:
            True if successful
        """
        _require(topic_arn=topic_arn, label=label)
        self._client.request('RemovePermission', {'TopicArn': topic_arn, 'Label': label})
        return True

    def _list_page(self, action, result_tag, container_tag, params, next_token):
        params = dict(params)
        if next_token is not None:
            params['NextToken'] = next_token

        root = self._client.request(action, params)
        items = members_to_list(root.find(f"{result_tag}/{container_tag}"))
        token = find_text(root, f"{result_tag}/NextToken") or None
        return items, token

    def _list_all(self, fetch_page) -> List[Dict[str, str]]:
        all_items = []
        next_token = None

        while True:
            items, next_token = fetch_page(next_token)
            all_items.extend(items)

            # Check if there are more pages to fetch
            if not next_token:
                break

        return all_items


def flatten_permissions(permissions: Mapping[str, Sequence[str]]) -> Dict[str, str]:
    """
    Flatten account -> actions into indexed AddPermission parameters.

    Pairs are numbered from 1 in mapping order, then action order:
    {'111': ['Publish'], '222': ['Publish', 'SetTopicAttributes']} becomes
    AWSAccountID.member.1=111, ActionName.member.1=Publish,
    AWSAccountID.member.2=222, ActionName.member.2=Publish,
    AWSAccountID.member.3=222, ActionName.member.3=SetTopicAttributes.

    Raises:
        SNSValidationError: If the mapping is empty, an account id is empty,
            an entry is not a non-empty sequence of action names, or the
            flattened lists differ in length
    """
    if not permissions:
        raise SNSValidationError("Must supply at least one account and action")

    for account, account_actions in permissions.items():
        if not account:
            raise SNSValidationError("Account ids must not be empty")
        if isinstance(account_actions, (str, bytes)) or not isinstance(account_actions, abc.Sequence):
            raise SNSValidationError(
                f"Permissions for account {account} must be a sequence of action names"
            )
        if not account_actions or not all(account_actions):
            raise SNSValidationError(f"Action names for account {account} must not be empty")

    members = [
        str(account)
        for account, account_actions in permissions.items()
        for _ in account_actions
    ]
    actions = [action for account_actions in permissions.values() for action in account_actions]

    if len(members) != len(actions):
        raise SNSValidationError("Mismatch of permissions to users")

    params = {}
    for index in range(1, len(members) + 1):
        params[f"ActionName.member.{index}"] = actions[index - 1]
        params[f"AWSAccountID.member.{index}"] = members[index - 1]
    return params


def _require(**arguments) -> None:
    """Raise SNSValidationError naming every empty argument."""
    missing = [name for name, value in arguments.items() if value is None or value == '']
    if missing:
        raise SNSValidationError(f"Must supply {', '.join(missing)}")
