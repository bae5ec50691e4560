"""Inspecting Auto Scaling Groups and waiting for their capacity."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass
from typing import Any

from infratest.aws.errors import AsgCapacityNotMetError, NotFoundError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AsgCapacityInfo:
    """Capacity figures of an Auto Scaling Group."""

    min_capacity: int
    max_capacity: int
    current_capacity: int
    desired_capacity: int


def _describe(asg_client: Any, asg_name: str) -> list[dict[str, Any]]:
    response = asg_client.describe_auto_scaling_groups(AutoScalingGroupNames=[asg_name])
    return list(response.get("AutoScalingGroups", []))


def get_capacity_info_for_asg(asg_client: Any, asg_name: str, region: str) -> AsgCapacityInfo:
    """Return the capacity info of the named group.

    Raises NotFoundError if the group does not exist.
    """
    groups = _describe(asg_client, asg_name)
    if not groups:
        raise NotFoundError("ASG", asg_name, region)
    group = groups[0]
    return AsgCapacityInfo(
        min_capacity=group["MinSize"],
        max_capacity=group["MaxSize"],
        current_capacity=len(group.get("Instances", [])),
        desired_capacity=group["DesiredCapacity"],
    )


def get_instance_ids_for_asg(asg_client: Any, asg_name: str) -> list[str]:
    """Return the IDs of the EC2 instances in the named group."""
    return [
        instance.get("InstanceId", "")
        for group in _describe(asg_client, asg_name)
        for instance in group.get("Instances", [])
    ]


def wait_for_capacity(
    asg_client: Any,
    asg_name: str,
    region: str,
    max_retries: int,
    sleep_between_retries: float,
) -> str:
    """Wait until the group's current capacity equals its desired capacity.

    Tries once and then up to ``max_retries`` more times, sleeping
    ``sleep_between_retries`` seconds in between. Returns a success message, or
    raises the last error if the capacity is never reached.
    """
    logger.info("Waiting for ASG %s to reach desired capacity.", asg_name)
    last_error: Exception | None = None
    for attempt in range(max_retries + 1):
        if attempt:
            time.sleep(sleep_between_retries)
        try:
            info = get_capacity_info_for_asg(asg_client, asg_name, region)
            if info.current_capacity != info.desired_capacity:
                raise AsgCapacityNotMetError(
                    asg_name, info.desired_capacity, info.current_capacity
                )
        except Exception as err:  # every failure is retried
            logger.info("Attempt %d failed: %s", attempt + 1, err)
            last_error = err
            continue
        message = f"ASG {asg_name} is now at desired capacity {info.desired_capacity}"
        logger.info(message)
        return message
    assert last_error is not None
    raise last_error