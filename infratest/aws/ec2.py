"""Looking up and managing EC2 instances, AMIs, tags and EBS snapshots."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator, Mapping, Sequence
from typing import Any

from infratest.aws.errors import HostnameForEc2InstanceNotFound, IpForEc2InstanceNotFound

logger = logging.getLogger(__name__)


def _iter_instances(response: Mapping[str, Any]) -> Iterator[Mapping[str, Any]]:
    for reservation in response.get("Reservations", []):
        yield from reservation.get("Instances", [])


def _instance_attribute_map(
    ec2_client: Any, instance_ids: Iterable[str], attribute: str
) -> dict[str, str]:
    response = ec2_client.describe_instances(InstanceIds=list(instance_ids))
    return {
        instance.get("InstanceId", ""): instance.get(attribute, "")
        for instance in _iter_instances(response)
    }


def _to_filter_list(filters: Mapping[str, Sequence[str]]) -> list[dict[str, Any]]:
    return [{"Name": name, "Values": list(values)} for name, values in filters.items()]


def get_private_ips_of_ec2_instances(
    ec2_client: Any, instance_ids: Iterable[str]
) -> dict[str, str]:
    """Return a map of instance ID to private IP address."""
    return _instance_attribute_map(ec2_client, instance_ids, "PrivateIpAddress")


def get_private_ip_of_ec2_instance(ec2_client: Any, instance_id: str, region: str) -> str:
    """Return the private IP address of an instance.

    Raises IpForEc2InstanceNotFound if the instance is not in the response.
    """
    ips = get_private_ips_of_ec2_instances(ec2_client, [instance_id])
    try:
        return ips[instance_id]
    except KeyError:
        raise IpForEc2InstanceNotFound(instance_id, region, "private") from None


def get_private_hostnames_of_ec2_instances(
    ec2_client: Any, instance_ids: Iterable[str]
) -> dict[str, str]:
    """Return a map of instance ID to private DNS name."""
    return _instance_attribute_map(ec2_client, instance_ids, "PrivateDnsName")


def get_private_hostname_of_ec2_instance(
    ec2_client: Any, instance_id: str, region: str
) -> str:
    """Return the private DNS name of an instance.

    Raises HostnameForEc2InstanceNotFound if the instance is not in the response.
    """
    hostnames = get_private_hostnames_of_ec2_instances(ec2_client, [instance_id])
    try:
        return hostnames[instance_id]
    except KeyError:
        raise HostnameForEc2InstanceNotFound(instance_id, region, "private") from None


def get_public_ips_of_ec2_instances(
    ec2_client: Any, instance_ids: Iterable[str]
) -> dict[str, str]:
    """Return a map of instance ID to public IP address."""
    return _instance_attribute_map(ec2_client, instance_ids, "PublicIpAddress")


def get_public_ip_of_ec2_instance(ec2_client: Any, instance_id: str, region: str) -> str:
    """Return the public IP address of an instance.

    Raises IpForEc2InstanceNotFound if the instance is not in the response.
    """
    ips = get_public_ips_of_ec2_instances(ec2_client, [instance_id])
    try:
        return ips[instance_id]
    except KeyError:
        raise IpForEc2InstanceNotFound(instance_id, region, "public") from None


def get_ec2_instance_ids_by_tag(ec2_client: Any, tag_name: str, tag_value: str) -> list[str]:
    """Return the IDs of all instances carrying the tag ``tag_name=tag_value``."""
    return get_ec2_instance_ids_by_filters(ec2_client, {f"tag:{tag_name}": [tag_value]})


def get_ec2_instance_ids_by_filters(
    ec2_client: Any, filters: Mapping[str, Sequence[str]]
) -> list[str]:
    """Return the IDs of all instances matching the given EC2 filters."""
    response = ec2_client.describe_instances(Filters=_to_filter_list(filters))
    return [instance["InstanceId"] for instance in _iter_instances(response)]


def get_tags_for_ec2_instance(ec2_client: Any, instance_id: str) -> dict[str, str]:
    """Return all tags of the given instance as a dict."""
    response = ec2_client.describe_tags(
        Filters=[
            {"Name": "resource-type", "Values": ["instance"]},
            {"Name": "resource-id", "Values": [instance_id]},
        ]
    )
    return {tag.get("Key", ""): tag.get("Value", "") for tag in response.get("Tags", [])}


def delete_ami(ec2_client: Any, image_id: str) -> None:
    """Deregister the given AMI."""
    logger.info("Deregistering AMI %s", image_id)
    ec2_client.deregister_image(ImageId=image_id)


def add_tags_to_resource(ec2_client: Any, resource: str, tags: Mapping[str, str]) -> None:
    """Add tags to a taggable resource such as an instance, AMI or VPC."""
    ec2_client.create_tags(
        Resources=[resource],
        Tags=[{"Key": key, "Value": value} for key, value in tags.items()],
    )


def terminate_instance(ec2_client: Any, instance_id: str) -> None:
    """Terminate the given instance."""
    logger.info("Terminating Instance %s", instance_id)
    ec2_client.terminate_instances(InstanceIds=[instance_id])


def get_launch_permissions_for_ami(ec2_client: Any, ami_id: str) -> list[dict[str, Any]]:
    """Return the launch permissions configured for the AMI."""
    response = ec2_client.describe_image_attribute(
        Attribute="launchPermission", ImageId=ami_id
    )
    return list(response.get("LaunchPermissions", []))


def get_ami_publicly_accessible(ec2_client: Any, ami_id: str) -> bool:
    """Return True if the AMI can be launched by everyone."""
    return any(
        permission.get("Group") == "all"
        for permission in get_launch_permissions_for_ami(ec2_client, ami_id)
    )


def get_accounts_with_launch_permissions_for_ami(ec2_client: Any, ami_id: str) -> list[str]:
    """Return the account IDs the AMI is shared with."""
    return [
        permission["UserId"]
        for permission in get_launch_permissions_for_ami(ec2_client, ami_id)
        if permission.get("UserId")
    ]


def delete_ebs_snapshot(ec2_client: Any, snapshot: str) -> None:
    """Delete the given EBS snapshot."""
    logger.info("Deleting EBS snapshot %s", snapshot)
    ec2_client.delete_snapshot(SnapshotId=snapshot)