"""Looking up the AWS account of the current caller."""

from __future__ import annotations

from typing import Any


def get_account_id(sts_client: Any) -> str:
    """Return the account ID of the currently authenticated caller."""
    identity = sts_client.get_caller_identity()
    return identity.get("Account", "")


def extract_account_id_from_arn(arn: str) -> str:
    """Return the account ID from an IAM ARN such as arn:aws:iam::123456789012:user/test.

    Raises ValueError if the ARN does not have enough colon-separated parts.
    """
    parts = arn.split(":")
    if len(parts) < 5:
        raise ValueError(f"Unrecognized format for IAM ARN: {arn}")
    return parts[4]