"""Reading and writing SSM parameters."""

from __future__ import annotations

from typing import Any


def get_parameter(ssm_client: Any, key_name: str) -> str:
    """Return the decrypted value of the latest version of the parameter."""
    response = ssm_client.get_parameter(Name=key_name, WithDecryption=True)
    return response["Parameter"]["Value"]


def put_parameter(
    ssm_client: Any, key_name: str, key_description: str, key_value: str
) -> int:
    """Store a new version of the parameter as a SecureString and return the version."""
    response = ssm_client.put_parameter(
        Name=key_name,
        Description=key_description,
        Value=key_value,
        Type="SecureString",
    )
    return response["Version"]