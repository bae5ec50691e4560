"""Exceptions raised by the AWS helpers."""

from __future__ import annotations

from collections.abc import Mapping, Sequence


class IpForEc2InstanceNotFound(Exception):
    """The IP address of an EC2 instance could not be found."""

    def __init__(self, instance_id: str, aws_region: str, address_type: str) -> None:
        self.instance_id = instance_id
        self.aws_region = aws_region
        self.address_type = address_type
        super().__init__(str(self))

    def __str__(self) -> str:
        return (
            f"Could not find a {self.address_type} IP address for EC2 Instance "
            f"{self.instance_id} in {self.aws_region}"
        )


class HostnameForEc2InstanceNotFound(Exception):
    """The hostname of an EC2 instance could not be found."""

    def __init__(self, instance_id: str, aws_region: str, address_type: str) -> None:
        self.instance_id = instance_id
        self.aws_region = aws_region
        self.address_type = address_type
        super().__init__(str(self))

    def __str__(self) -> str:
        return (
            f"Could not find a {self.address_type} hostname for EC2 Instance "
            f"{self.instance_id} in {self.aws_region}"
        )


class NotFoundError(Exception):
    """An expected object was not found."""

    def __init__(self, object_type: str, object_id: str, region: str) -> None:
        self.object_type = object_type
        self.object_id = object_id
        self.region = region
        super().__init__(str(self))

    def __str__(self) -> str:
        return (
            f"Object of type {self.object_type} with id {self.object_id} "
            f"not found in region {self.region}"
        )


class AsgCapacityNotMetError(Exception):
    """An Auto Scaling Group has not yet reached its desired capacity."""

    def __init__(self, asg_name: str, desired_capacity: int, current_capacity: int) -> None:
        self.asg_name = asg_name
        self.desired_capacity = desired_capacity
        self.current_capacity = current_capacity
        super().__init__(str(self))

    def __str__(self) -> str:
        return (
            f"ASG {self.asg_name} not yet at desired capacity {self.desired_capacity} "
            f"(current {self.current_capacity})"
        )


class BucketVersioningNotEnabledError(Exception):
    """An S3 bucket that should be versioned is not."""

    def __init__(self, s3_bucket_name: str, aws_region: str, versioning_status: str) -> None:
        self.s3_bucket_name = s3_bucket_name
        self.aws_region = aws_region
        self.versioning_status = versioning_status
        super().__init__(str(self))

    def __str__(self) -> str:
        return (
            f"Versioning status for bucket {self.s3_bucket_name} in the "
            f"{self.aws_region} region is {self.versioning_status}"
        )


class NoBucketPolicyError(Exception):
    """An S3 bucket that should have a policy attached does not."""

    def __init__(self, s3_bucket_name: str, aws_region: str, bucket_policy: str) -> None:
        self.s3_bucket_name = s3_bucket_name
        self.aws_region = aws_region
        self.bucket_policy = bucket_policy
        super().__init__(str(self))

    def __str__(self) -> str:
        return (
            f"The policy for bucket {self.s3_bucket_name} in the {self.aws_region} "
            "region does not have a policy attached."
        )


class NoImagesFound(Exception):
    """No AMIs matched an owner and a set of filters."""

    def __init__(
        self, region: str, owner_id: str, filters: Mapping[str, Sequence[str]]
    ) -> None:
        self.region = region
        self.owner_id = owner_id
        self.filters = {name: list(values) for name, values in filters.items()}
        super().__init__(str(self))

    def __str__(self) -> str:
        return (
            f"No AMIs found in {self.region} for owner ID {self.owner_id} "
            f"and filters: {self.filters}"
        )


class ReceiveMessageTimeout(Exception):
    """No message arrived on an SQS queue within the timeout."""

    def __init__(self, queue_url: str, timeout_sec: int) -> None:
        self.queue_url = queue_url
        self.timeout_sec = timeout_sec
        super().__init__(str(self))

    def __str__(self) -> str:
        return (
            f"Failed to receive messages on {self.queue_url} "
            f"within {self.timeout_sec} seconds"
        )