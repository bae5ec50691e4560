"""Fetching the console output (syslog) of EC2 instances."""

from __future__ import annotations

import base64
import logging
import time
from typing import Any

from infratest.aws.ec2 import get_ec2_instance_ids_by_tag

logger = logging.getLogger(__name__)

_MAX_RETRIES = 120
_SECONDS_BETWEEN_RETRIES = 5.0
_ASG_TAG = "aws:autoscaling:groupName"


def _fetch_encoded_syslog(ec2_client: Any, instance_id: str, region: str) -> str:
    response = ec2_client.get_console_output(InstanceId=instance_id)
    output = response.get("Output") or ""
    if not output:
        raise RuntimeError(
            f"Syslog is not yet available for instance {instance_id} in {region}"
        )
    return output


def get_syslog_for_instance(ec2_client: Any, instance_id: str, region: str) -> str:
    """Return the decoded console output of an instance.

    The output appears about a minute after boot, so the call is retried up to
    120 times, 5 seconds apart; the last error is raised if it never appears.
    """
    description = f"Fetching syslog for Instance {instance_id} in {region}"
    logger.info(description)

    last_error: Exception | None = None
    for attempt in range(_MAX_RETRIES + 1):
        if attempt:
            time.sleep(_SECONDS_BETWEEN_RETRIES)
        try:
            encoded = _fetch_encoded_syslog(ec2_client, instance_id, region)
        except Exception as err:  # every failure is retried
            logger.info("%s: attempt %d failed: %s", description, attempt + 1, err)
            last_error = err
            continue
        return base64.b64decode(encoded, validate=True).decode("utf-8", errors="replace")

    assert last_error is not None
    raise last_error


def get_syslog_for_instances_in_asg(
    ec2_client: Any, asg_name: str, region: str
) -> dict[str, str]:
    """Return a map of instance ID to syslog for every instance in the ASG."""
    logger.info("Fetching syslog for each Instance in ASG %s in %s", asg_name, region)
    instance_ids = get_ec2_instance_ids_by_tag(ec2_client, _ASG_TAG, asg_name)
    return {
        instance_id: get_syslog_for_instance(ec2_client, instance_id, region)
        for instance_id in instance_ids
    }