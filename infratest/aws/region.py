"""Choosing AWS regions and listing regions and availability zones."""

from __future__ import annotations

import logging
import os
import random
from collections.abc import Sequence
from typing import Any

from infratest.lists import list_intersection, list_subtract

logger = logging.getLogger(__name__)

# Set this environment variable to force a specific region instead of a random one.
REGION_OVERRIDE_ENV_VAR = "TERRATEST_REGION"

# Used for calls that need a region but where none makes sense, e.g. listing regions.
DEFAULT_REGION = "us-east-1"

# Regions that have been around for at least a year.
STABLE_REGIONS: tuple[str, ...] = (
    "us-east-1",
    "us-east-2",
    "us-west-1",
    "us-west-2",
    "ca-central-1",
    "sa-east-1",
    "eu-west-1",
    "eu-west-2",
    "eu-west-3",
    "eu-central-1",
    "ap-southeast-1",
    "ap-southeast-2",
    "ap-northeast-1",
    "ap-northeast-2",
    "ap-south-1",
)


def get_random_stable_region(
    approved_regions: Sequence[str] | None = None,
    forbidden_regions: Sequence[str] | None = None,
    ec2_client: Any = None,
) -> str:
    """Pick a random stable region, optionally restricted by approved and forbidden lists.

    Approved regions that are not considered stable are ignored.
    """
    candidates = list(STABLE_REGIONS)
    if approved_regions:
        candidates = list_intersection(candidates, approved_regions)
    if forbidden_regions:
        candidates = list_subtract(candidates, forbidden_regions)
    return get_random_region(candidates, None, ec2_client)


def get_random_region(
    approved_regions: Sequence[str] | None = None,
    forbidden_regions: Sequence[str] | None = None,
    ec2_client: Any = None,
) -> str:
    """Pick a random region.

    The region comes from ``approved_regions`` if that is non-empty, otherwise from all
    regions known to the account (looked up with ``ec2_client``). Regions in
    ``forbidden_regions`` are never returned. The environment variable
    REGION_OVERRIDE_ENV_VAR overrides the choice when set.
    """
    override = os.environ.get(REGION_OVERRIDE_ENV_VAR, "")
    if override:
        logger.info(
            "Using AWS region %s from environment variable %s",
            override,
            REGION_OVERRIDE_ENV_VAR,
        )
        return override

    candidates = list(approved_regions or ())
    if not candidates:
        if ec2_client is None:
            raise ValueError(
                "An EC2 client is required to look up regions when none are approved"
            )
        candidates = get_all_aws_regions(ec2_client)

    candidates = list_subtract(candidates, forbidden_regions or ())
    if not candidates:
        raise ValueError("No regions left to pick from")

    region = random.choice(candidates)
    logger.info("Using region %s", region)
    return region


def get_all_aws_regions(ec2_client: Any) -> list[str]:
    """Return the names of all regions available in this account."""
    logger.info("Looking up all AWS regions available in this account")
    response = ec2_client.describe_regions()
    return [region.get("RegionName", "") for region in response.get("Regions", [])]


def get_availability_zones(ec2_client: Any) -> list[str]:
    """Return the names of the availability zones of the client's region."""
    logger.info("Looking up all availability zones available in this account")
    response = ec2_client.describe_availability_zones()
    return [zone.get("ZoneName", "") for zone in response.get("AvailabilityZones", [])]