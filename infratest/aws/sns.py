"""Creating and deleting SNS topics."""

from __future__ import annotations

import logging
from typing import Any

logger = logging.getLogger(__name__)


def create_sns_topic(sns_client: Any, topic_name: str) -> str:
    """Create an SNS topic and return its ARN."""
    logger.info("Creating SNS topic %s", topic_name)
    response = sns_client.create_topic(Name=topic_name)
    return response.get("TopicArn", "")


def delete_sns_topic(sns_client: Any, topic_arn: str) -> None:
    """Delete the SNS topic with the given ARN."""
    logger.info("Deleting SNS topic %s", topic_arn)
    sns_client.delete_topic(TopicArn=topic_arn)