"""Finding AMIs and deleting them together with their snapshots."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from datetime import datetime
from typing import Any

from infratest.aws.ec2 import delete_ami, delete_ebs_snapshot
from infratest.aws.errors import NoImagesFound

logger = logging.getLogger(__name__)

CANONICAL_ACCOUNT_ID = "099720109477"
CENTOS_ACCOUNT_ID = "679593333241"
AMAZON_ACCOUNT_ID = "amazon"

# Unix time of the zero time value, used when a creation date cannot be parsed.
_UNPARSEABLE_TIME = -62135596800


def delete_ami_and_all_snapshots(ec2_client: Any, ami: str) -> None:
    """Deregister the AMI and delete every EBS snapshot that backed it."""
    snapshots = get_ebs_snapshots_for_ami(ec2_client, ami)
    delete_ami(ec2_client, ami)
    for snapshot in snapshots:
        delete_ebs_snapshot(ec2_client, snapshot)


def get_ebs_snapshots_for_ami(ec2_client: Any, ami: str) -> list[str]:
    """Return the IDs of the EBS snapshots backing the given AMI."""
    logger.info("Retrieving EBS snapshots backing AMI %s", ami)
    response = ec2_client.describe_images(ImageIds=[ami])
    return [
        mapping["Ebs"]["SnapshotId"]
        for image in response.get("Images", [])
        for mapping in image.get("BlockDeviceMappings", [])
        if mapping.get("Ebs") and mapping["Ebs"].get("SnapshotId") is not None
    ]


def get_most_recent_ami_id(
    ec2_client: Any,
    region: str,
    owner_id: str,
    filters: Mapping[str, Sequence[str]],
) -> str:
    """Return the ID of the newest AMI with the given owner matching the filters.

    Raises NoImagesFound if nothing matches.
    """
    response = ec2_client.describe_images(
        Filters=[{"Name": name, "Values": list(values)} for name, values in filters.items()],
        Owners=[owner_id],
    )
    images = response.get("Images", [])
    if not images:
        raise NoImagesFound(region, owner_id, filters)
    return most_recent_ami(images).get("ImageId", "")


def _creation_unix_time(image: Mapping[str, Any]) -> int:
    text = image.get("CreationDate") or ""
    if text.endswith(("Z", "z")):
        text = text[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(text)
    except ValueError:
        return _UNPARSEABLE_TIME
    if parsed.tzinfo is None:
        return _UNPARSEABLE_TIME
    return int(parsed.timestamp() // 1)


def most_recent_ami(images: Sequence[Mapping[str, Any]]) -> Mapping[str, Any]:
    """Return the image with the latest creation date (compared to the second)."""
    if not images:
        raise ValueError("No images to choose from")
    return sorted(images, key=_creation_unix_time)[-1]


def _standard_filters(name_pattern: str) -> dict[str, list[str]]:
    return {
        "name": [name_pattern],
        "virtualization-type": ["hvm"],
        "architecture": ["x86_64"],
        "root-device-type": ["ebs"],
        "block-device-mapping.volume-type": ["gp2"],
    }


def get_ubuntu1404_ami(ec2_client: Any, region: str) -> str:
    """Return the newest Ubuntu 14.04 HVM x86_64 EBS GP2 AMI."""
    return get_most_recent_ami_id(
        ec2_client,
        region,
        CANONICAL_ACCOUNT_ID,
        _standard_filters("*ubuntu-trusty-14.04-amd64-server-*"),
    )


def get_ubuntu1604_ami(ec2_client: Any, region: str) -> str:
    """Return the newest Ubuntu 16.04 HVM x86_64 EBS GP2 AMI."""
    return get_most_recent_ami_id(
        ec2_client,
        region,
        CANONICAL_ACCOUNT_ID,
        _standard_filters("*ubuntu-xenial-16.04-amd64-server-*"),
    )


def get_centos7_ami(ec2_client: Any, region: str) -> str:
    """Return the newest public CentOS 7 AMI.

    The AMI's marketplace terms may need accepting before it can be launched.
    """
    return get_most_recent_ami_id(
        ec2_client,
        region,
        CENTOS_ACCOUNT_ID,
        _standard_filters("*CentOS Linux 7 x86_64 HVM EBS*"),
    )


def get_amazon_linux_ami(ec2_client: Any, region: str) -> str:
    """Return the newest Amazon Linux HVM SSD AMI."""
    return get_most_recent_ami_id(
        ec2_client, region, AMAZON_ACCOUNT_ID, _standard_filters("*amzn-ami-hvm-*-x86_64*")
    )


def get_ecs_optimized_amazon_linux_ami(ec2_client: Any, region: str) -> str:
    """Return the newest ECS-optimized Amazon Linux AMI."""
    return get_most_recent_ami_id(
        ec2_client,
        region,
        AMAZON_ACCOUNT_ID,
        _standard_filters("*amzn-ami*amazon-ecs-optimized*"),
    )