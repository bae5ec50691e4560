"""Creating and deleting SQS queues and sending and receiving messages."""

from __future__ import annotations

import logging
import uuid
from dataclasses import dataclass
from typing import Any

from infratest.aws.errors import ReceiveMessageTimeout

logger = logging.getLogger(__name__)

_NON_EXISTENT_QUEUE = "AWS.SimpleQueueService.NonExistentQueue"

# The API lets a single receive call wait at most this many seconds.
_MAX_WAIT_SECONDS = 20


@dataclass
class QueueMessageResponse:
    """A message received from a queue, or the error that prevented receiving one."""

    receipt_handle: str = ""
    message_body: str = ""
    error: Exception | None = None


def create_random_queue(sqs_client: Any, prefix: str) -> str:
    """Create a queue named ``<prefix>-<uuid>`` and return its URL."""
    logger.info("Creating randomly named SQS queue with prefix %s", prefix)
    queue_name = f"{prefix}-{uuid.uuid1()}"
    response = sqs_client.create_queue(QueueName=queue_name)
    return response.get("QueueUrl", "")


def delete_queue(sqs_client: Any, queue_url: str) -> None:
    """Delete the queue with the given URL."""
    logger.info("Deleting SQS Queue %s", queue_url)
    sqs_client.delete_queue(QueueUrl=queue_url)


def delete_message_from_queue(sqs_client: Any, queue_url: str, receipt: str) -> None:
    """Delete the message with the given receipt handle from the queue."""
    logger.info("Deleting message from queue %s (%s)", queue_url, receipt)
    sqs_client.delete_message(ReceiptHandle=receipt, QueueUrl=queue_url)


def send_message_to_queue(sqs_client: Any, queue_url: str, message: str) -> None:
    """Send a message to the queue.

    If the queue no longer exists a warning is logged and nothing is raised.
    """
    logger.info("Sending message %s to queue %s", message, queue_url)
    try:
        response = sqs_client.send_message(MessageBody=message, QueueUrl=queue_url)
    except Exception as err:
        if _NON_EXISTENT_QUEUE in str(err):
            logger.warning("Client has stopped listening on queue %s", queue_url)
            return
        raise
    logger.info(
        "Message id %s sent to queue %s", response.get("MessageId", ""), queue_url
    )


def wait_for_queue_message(
    sqs_client: Any, queue_url: str, timeout: int
) -> QueueMessageResponse:
    """Wait up to ``timeout`` seconds for a message on the queue.

    A single receive call may wait at most 20 seconds, so longer timeouts are
    split into 20-second cycles; shorter ones into 1-second cycles. Failures
    are reported in the ``error`` field of the response.
    """
    if timeout >= _MAX_WAIT_SECONDS:
        cycle_length = _MAX_WAIT_SECONDS
        cycles = timeout // cycle_length
    else:
        cycle_length = 1
        cycles = timeout

    for cycle in range(cycles):
        logger.info("Waiting for message on %s (%ss)", queue_url, cycle * cycle_length)
        try:
            result = sqs_client.receive_message(
                QueueUrl=queue_url,
                AttributeNames=["SentTimestamp"],
                MaxNumberOfMessages=1,
                MessageAttributeNames=["All"],
                WaitTimeSeconds=cycle_length,
            )
        except Exception as err:
            return QueueMessageResponse(error=err)

        messages = result.get("Messages") or []
        if messages:
            first = messages[0]
            logger.info("Message %s received on %s", first.get("MessageId"), queue_url)
            return QueueMessageResponse(
                receipt_handle=first["ReceiptHandle"], message_body=first["Body"]
            )

    return QueueMessageResponse(error=ReceiveMessageTimeout(queue_url, timeout))