"""Looking up VPCs and subnets and generating private CIDR blocks."""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import Any, Mapping

_PRIVATE_FIRST_OCTETS = (10, 172, 192)


@dataclass
class Subnet:
    """A subnet in an availability zone."""

    id: str
    availability_zone: str


@dataclass
class Vpc:
    """An Amazon Virtual Private Cloud."""

    id: str
    name: str
    subnets: list[Subnet] = field(default_factory=list)


def get_default_vpc(ec2_client: Any, region: str) -> Vpc:
    """Return the default VPC of the client's region, with its subnets.

    Raises LookupError unless exactly one default VPC exists.
    """
    response = ec2_client.describe_vpcs(
        Filters=[{"Name": "isDefault", "Values": ["true"]}]
    )
    vpcs = response.get("Vpcs", [])
    if len(vpcs) != 1:
        raise LookupError(
            f"Expected to find one default VPC in region {region} but found {len(vpcs)}"
        )

    default_vpc = vpcs[0]
    vpc_id = default_vpc.get("VpcId", "")
    return Vpc(
        id=vpc_id,
        name=find_vpc_name(default_vpc),
        subnets=get_subnets_for_vpc(ec2_client, vpc_id),
    )


def find_vpc_name(vpc: Mapping[str, Any]) -> str:
    """Return the VPC's Name tag, else "Default" for the default VPC, else ''."""
    for tag in vpc.get("Tags") or ():
        if tag.get("Key") == "Name":
            return tag.get("Value", "")
    return "Default" if vpc.get("IsDefault") else ""


def get_subnets_for_vpc(ec2_client: Any, vpc_id: str) -> list[Subnet]:
    """Return the subnets of the given VPC."""
    response = ec2_client.describe_subnets(
        Filters=[{"Name": "vpc-id", "Values": [vpc_id]}]
    )
    return [
        Subnet(
            id=subnet.get("SubnetId", ""),
            availability_zone=subnet.get("AvailabilityZone", ""),
        )
        for subnet in response.get("Subnets", [])
    ]


def get_random_private_cidr_block(routing_prefix: int) -> str:
    """Return a random RFC 1918 CIDR block with the given routing prefix.

    Only prefixes 18 to 32 are supported; other prefixes give 0.0.0.0/<prefix>.
    The result covers a subset of all valid ranges.
    """
    octets = (0, 0, 0, 0)

    if routing_prefix == 32:
        first = random.choice(_PRIVATE_FIRST_OCTETS)
        if first == 10:
            second = random.randint(0, 255)
        elif first == 172:
            second = random.randint(16, 31)
        else:
            second = 168
        octets = (first, second, random.randint(0, 255), random.randint(0, 255))
    elif 24 <= routing_prefix <= 31:
        first = random.choice(_PRIVATE_FIRST_OCTETS)
        if first == 10:
            octets = (10, random.randint(0, 255), random.randint(0, 255), 0)
        elif first == 172:
            octets = (172, 16, 0, 0)
        else:
            octets = (192, 168, 0, 0)
    elif 18 <= routing_prefix <= 23:
        first = random.choice(_PRIVATE_FIRST_OCTETS)
        octets = {10: (10, 0, 0, 0), 172: (172, 16, 0, 0), 192: (192, 168, 0, 0)}[first]

    return "{}.{}.{}.{}/{}".format(*octets, routing_prefix)


def get_first_two_octets(cidr_block: str) -> str:
    """Return the first two octets of a CIDR block, e.g. "10.100" for 10.100.0.0/28."""
    address = cidr_block.split("/")[0]
    octets = address.split(".")
    return f"{octets[0]}.{octets[1]}"