# infratest

Building blocks for tests that create and check real infrastructure. The
package has no dependencies outside the standard library.

## What is in it

| Module | What it gives you |
| --- | --- |
| `infratest.lists` | `list_contains`, `list_intersection` (deduplicated, in the order of the first list) and `list_subtract` |
| `infratest.multierror` | `MultiError`, an exception holding several errors, and `new_multi_error(*errors)`, which drops `None` values and returns `None` when nothing is left |
| `infratest.environment` | `get_first_non_empty_env_var_or_empty_string` and `get_first_non_empty_env_var_or_fatal`, which raises `EmptyEnvVarsError` |
| `infratest.files` | `file_exists`, folder copying with filters, copying Terraform or Terragrunt folders to a fresh temporary directory, path predicates, `copy_file` and `write_file_with_same_permissions` |
| `infratest.docker_compose` | `Options` and `run_docker_compose` |
| `infratest.aws.errors` | the exceptions raised by the AWS helpers |
| `infratest.aws.region` | random region choice, listing regions and availability zones |
| `infratest.aws.vpc` | `Vpc`, `Subnet`, the default VPC and its subnets, random private CIDR blocks, `get_first_two_octets` |
| `infratest.aws.ec2` | instance IPs and hostnames, instance lookup by tag or filters, tags, AMI launch permissions, deregistering AMIs, terminating instances, deleting EBS snapshots |
| `infratest.aws.ami` | newest AMI for an owner and filters, ready-made lookups for Ubuntu 14.04/16.04, CentOS 7, Amazon Linux and ECS-optimized Amazon Linux, deleting an AMI with its snapshots |
| `infratest.aws.asg` | `AsgCapacityInfo`, instance IDs of an Auto Scaling Group, `wait_for_capacity` |
| `infratest.aws.s3` | creating, tagging lookup, versioning, policies, emptying and deleting buckets, reading objects, and `assert_*` checks |
| `infratest.aws.sqs` | random queues, sending, receiving (`QueueMessageResponse`) and deleting messages |
| `infratest.aws.sns` | creating and deleting topics |
| `infratest.aws.ssm` | `get_parameter` and `put_parameter` (stored as SecureString) |
| `infratest.aws.syslog` | console output of an instance, or of every instance in an Auto Scaling Group |
| `infratest.aws.account` | `get_account_id` and `extract_account_id_from_arn` |

## Examples

### Lists

```python
from infratest.lists import list_intersection, list_subtract

list_intersection(["foo", "bar", "baz", "foo"], ["abc", "foo", "baz"])
# ['foo', 'baz']
list_subtract(["foo", "bar", "baz"], ["abc", "foo", "def"])
# ['bar', 'baz']
```

### Collecting errors

```python
from infratest.multierror import new_multi_error

error = new_multi_error(None, ValueError("first"), KeyError("second"))
if error is not None:
    raise error   # message starts with "Hit multiple errors:"
```

### Copying a Terraform folder for an isolated test run

```python
from infratest.files import copy_terraform_folder_to_temp

workdir = copy_terraform_folder_to_temp("examples/vpc", "test-vpc")
```

The copy is placed in a subfolder, named like the original, of a new
temporary directory. Hidden files and folders, `terraform.tfstate`,
`terraform.tfstate.backup` and `terraform.tfvars` are left out.
`copy_terragrunt_folder_to_temp` keeps `terraform.tfvars` and drops only
state files and hidden entries. Symbolic links are recreated as links and
copied files keep the permissions of the originals.

### Environment variables

```python
from infratest.environment import get_first_non_empty_env_var_or_fatal

region = get_first_non_empty_env_var_or_fatal(["AWS_REGION", "AWS_DEFAULT_REGION"])
```

### docker-compose

```python
from infratest.docker_compose import Options, run_docker_compose

output = run_docker_compose(
    Options(working_dir="compose", env_vars={"APP_PORT": "8080"}),
    "test_web_service",
    "up", "-d",
)
```

`--project-name` is always passed, so containers of different tests stay in
separate projects. The variables in `env_vars` are added to the current
environment. Standard output and standard error come back as one string; a
non-zero exit raises `subprocess.CalledProcessError`.

### AWS

Every AWS helper takes a client object as its first argument (an EC2, Auto
Scaling, S3, SQS, SNS, SSM or STS client with the usual method names such as
`describe_instances` or `get_bucket_versioning`). Your test decides how to
authenticate and which region the client talks to.

```python
from infratest.aws.region import get_random_stable_region
from infratest.aws.vpc import get_default_vpc, get_first_two_octets
from infratest.aws.ec2 import get_public_ip_of_ec2_instance

region = get_random_stable_region(None, ["ap-south-1"])
vpc = get_default_vpc(ec2_client, region)
ip = get_public_ip_of_ec2_instance(ec2_client, "i-0123456789abcdef0", region)

get_first_two_octets("10.100.0.0/28")
# '10.100'
```

Notes on behaviour:

- Setting the `TERRATEST_REGION` environment variable makes
  `get_random_region` and `get_random_stable_region` always return that
  region. `get_random_region` needs an EC2 client only when no approved
  regions are given; it raises `ValueError` if no client is available then,
  or if no region is left to choose from.
- `get_random_private_cidr_block` supports routing prefixes 18 to 32 and
  picks from the RFC 1918 private ranges.
- `wait_for_capacity` and `get_syslog_for_instance` retry: the first with the
  count and sleep you give, the second up to 120 times, 5 seconds apart. Both
  raise the last error if they never succeed.
- `wait_for_queue_message` does not raise; failures, including
  `ReceiveMessageTimeout`, are returned in the `error` field of the
  `QueueMessageResponse`.
- `send_message_to_queue` logs a warning instead of raising when the queue
  no longer exists.
- Lookups that find nothing raise the exceptions in `infratest.aws.errors`,
  for example `IpForEc2InstanceNotFound`, `NotFoundError` or `NoImagesFound`.

Progress is reported through the standard `logging` module.

## What it does not do

- It does not create AWS clients, sessions or credentials; you pass
  ready-made clients in.
- There is no command-line program; everything is called from Python.
- AWS coverage is limited to the modules listed above: there are no helpers
  for IAM, ECS, RDS, KMS, ACM, CloudWatch Logs or DynamoDB, and no fetching
  of files from instances over SSH.