"""Creating, inspecting, emptying and deleting S3 buckets."""

from __future__ import annotations

import logging
from typing import Any

from infratest.aws.errors import BucketVersioningNotEnabledError, NoBucketPolicyError

logger = logging.getLogger(__name__)

# Tagging errors that mean "this bucket has no usable tags here" rather than a failure.
_IGNORED_TAGGING_ERRORS = (
    "AuthorizationHeaderMalformed",
    "BucketRegionError",
    "NoSuchTagSet",
)


def _bucket_tags(s3_client: Any, bucket_name: str) -> list[dict[str, Any]]:
    try:
        response = s3_client.get_bucket_tagging(Bucket=bucket_name)
    except Exception as err:
        message = str(err)
        if any(marker in message for marker in _IGNORED_TAGGING_ERRORS):
            return []
        raise
    return list(response.get("TagSet", []))


def find_s3_bucket_with_tag(s3_client: Any, key: str, value: str) -> str:
    """Return the name of the first bucket tagged ``key=value``, or '' if there is none."""
    response = s3_client.list_buckets()
    for bucket in response.get("Buckets", []):
        name = bucket.get("Name", "")
        for tag in _bucket_tags(s3_client, name):
            if tag.get("Key") == key and tag.get("Value") == value:
                logger.info("Found S3 bucket %s with tag %s=%s", name, key, value)
                return name
    return ""


def get_s3_object_contents(s3_client: Any, bucket: str, key: str) -> str:
    """Return the contents of the object ``key`` in ``bucket`` as a string."""
    response = s3_client.get_object(Bucket=bucket, Key=key)
    body = response["Body"].read()
    contents = body.decode("utf-8") if isinstance(body, bytes) else str(body)
    logger.info("Read contents from s3://%s/%s", bucket, key)
    return contents


def create_s3_bucket(s3_client: Any, name: str) -> None:
    """Create a bucket with the given (globally unique) name."""
    logger.info("Creating bucket %s", name)
    s3_client.create_bucket(Bucket=name)


def put_s3_bucket_policy(s3_client: Any, bucket_name: str, policy_json: str) -> None:
    """Attach the given IAM resource policy document to the bucket."""
    logger.info("Applying bucket policy for bucket %s", bucket_name)
    s3_client.put_bucket_policy(Bucket=bucket_name, Policy=policy_json)


def put_s3_bucket_versioning(s3_client: Any, bucket_name: str) -> None:
    """Enable versioning on the bucket, without requiring MFA to remove it."""
    logger.info("Creating bucket versioning configuration for bucket %s", bucket_name)
    s3_client.put_bucket_versioning(
        Bucket=bucket_name,
        VersioningConfiguration={"MFADelete": "Disabled", "Status": "Enabled"},
    )


def delete_s3_bucket(s3_client: Any, name: str) -> None:
    """Delete the bucket with the given name."""
    logger.info("Deleting bucket %s", name)
    s3_client.delete_bucket(Bucket=name)


def empty_s3_bucket(s3_client: Any, name: str) -> None:
    """Delete every object version in the bucket, one listed batch at a time."""
    logger.info("Emptying bucket %s", name)
    params: dict[str, Any] = {"Bucket": name}

    while True:
        listing = s3_client.list_object_versions(**params)
        versions = listing.get("Versions", [])
        if not versions:
            logger.info("Bucket %s is already empty", name)
            return

        objects = [
            {"Key": version.get("Key"), "VersionId": version.get("VersionId")}
            for version in versions
        ]
        s3_client.delete_objects(Bucket=name, Delete={"Objects": objects})

        if not listing.get("IsTruncated"):
            break
        params["KeyMarker"] = listing.get("NextKeyMarker")
        logger.info("Requesting next batch | %s", params["KeyMarker"])

    logger.info("Bucket %s is now empty", name)


def get_s3_bucket_versioning(s3_client: Any, bucket: str) -> str:
    """Return the versioning status of the bucket ('' if never configured)."""
    response = s3_client.get_bucket_versioning(Bucket=bucket)
    return response.get("Status") or ""


def get_s3_bucket_policy(s3_client: Any, bucket: str) -> str:
    """Return the resource policy document of the bucket."""
    response = s3_client.get_bucket_policy(Bucket=bucket)
    return response.get("Policy") or ""


def assert_s3_bucket_exists(s3_client: Any, name: str) -> None:
    """Raise the client's error if the bucket does not exist."""
    s3_client.head_bucket(Bucket=name)


def assert_s3_bucket_versioning_exists(s3_client: Any, region: str, bucket_name: str) -> None:
    """Raise BucketVersioningNotEnabledError unless versioning is enabled on the bucket."""
    status = get_s3_bucket_versioning(s3_client, bucket_name)
    if status != "Enabled":
        raise BucketVersioningNotEnabledError(bucket_name, region, status)


def assert_s3_bucket_policy_exists(s3_client: Any, region: str, bucket_name: str) -> None:
    """Raise NoBucketPolicyError if the bucket has no policy attached."""
    policy = get_s3_bucket_policy(s3_client, bucket_name)
    if policy == "":
        raise NoBucketPolicyError(bucket_name, region, policy)