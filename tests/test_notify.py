from unittest.mock import Mock, patch

import pytest

import notify
from sns_sdk import SNSSDK, SNSAPIError

TOPIC_ARN = 'arn:aws:sns:us-east-1:123456789012:SNSTest'


@pytest.fixture
def mock_sdk():
    return Mock(spec=SNSSDK)


class TestSubscribe:

    def test_recreates_existing_topic(self, mock_sdk):
        mock_sdk.find_topic_arn.return_value = TOPIC_ARN
        mock_sdk.create_topic.return_value = TOPIC_ARN + '-new'

        arn = notify.subscribe_endpoint(mock_sdk, 'SNSTest', 'sms', '12065550100')

        assert arn == TOPIC_ARN + '-new'
        mock_sdk.delete_topic.assert_called_once_with(TOPIC_ARN)
        mock_sdk.set_topic_attributes.assert_called_once_with(TOPIC_ARN + '-new', 'DisplayName', 'SNSTest')
        mock_sdk.subscribe.assert_called_once_with(TOPIC_ARN + '-new', 'sms', '12065550100')

    def test_new_topic(self, mock_sdk):
        mock_sdk.find_topic_arn.return_value = None
        mock_sdk.create_topic.return_value = TOPIC_ARN

        notify.subscribe_endpoint(mock_sdk, 'SNSTest', 'email', 'ops@example.com', display_name='Ops')

        mock_sdk.delete_topic.assert_not_called()
        mock_sdk.set_topic_attributes.assert_called_once_with(TOPIC_ARN, 'DisplayName', 'Ops')


class TestPublish:

    def test_publishes_to_named_topic(self, mock_sdk):
        mock_sdk.find_topic_arn.return_value = TOPIC_ARN
        mock_sdk.publish.return_value = 'm-1'

        assert notify.publish_message(mock_sdk, 'SNSTest', 'Hello') == 'm-1'
        mock_sdk.publish.assert_called_once_with(TOPIC_ARN, 'Hello')

    def test_unknown_topic(self, mock_sdk):
        mock_sdk.find_topic_arn.return_value = None
        assert notify.publish_message(mock_sdk, 'SNSTest', 'Hello') is None
        mock_sdk.publish.assert_not_called()

    def test_message_too_long(self, mock_sdk):
        with pytest.raises(ValueError):
            notify.publish_message(mock_sdk, 'SNSTest', 'x' * notify.MAX_MESSAGE_LENGTH)
        mock_sdk.find_topic_arn.assert_not_called()


def test_list_everything(mock_sdk, capsys):
    mock_sdk.list_all_topics.return_value = [{'TopicArn': TOPIC_ARN}]
    mock_sdk.list_all_subscriptions.return_value = [{
        'SubscriptionArn': TOPIC_ARN + ':sub',
        'TopicArn': TOPIC_ARN,
        'Protocol': 'sms',
        'Endpoint': '12065550100',
    }]

    notify.list_everything(mock_sdk)

    output = capsys.readouterr().out
    assert 'Topics (1)' in output
    assert TOPIC_ARN + ':sub' in output
    assert 'Protocol: sms' in output


class TestMain:

    def test_missing_config_file(self, tmp_path, capsys):
        code = notify.main(['--config', str(tmp_path / 'missing.json'), 'list'])
        assert code == 1
        assert 'Configuration file not found' in capsys.readouterr().out

    def test_api_error_exit_code(self, tmp_path):
        path = tmp_path / 'sns_config.json'
        path.write_text('{"access_key": "a", "secret_key": "s"}', encoding='utf-8')

        with patch.object(notify.SNSSDK, 'list_all_topics',
                          side_effect=SNSAPIError('AuthorizationError', 'Denied', 403)):
            assert notify.main(['--config', str(path), 'list']) == 1

    def test_publish_command(self, tmp_path):
        path = tmp_path / 'sns_config.json'
        path.write_text('{"access_key": "a", "secret_key": "s"}', encoding='utf-8')

        with patch.object(notify, 'publish_message', return_value='m-1') as publish:
            assert notify.main(['--config', str(path), 'publish', '--topic', 'SNSTest', '--message', 'Hi']) == 0

        _, topic, message = publish.call_args.args
        assert (topic, message) == ('SNSTest', 'Hi')
