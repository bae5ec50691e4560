"""Running docker-compose from tests."""

from __future__ import annotations

import os
import subprocess
from dataclasses import dataclass, field


@dataclass
class Options:
    """Settings for running docker-compose."""

    working_dir: str | None = None
    env_vars: dict[str, str] = field(default_factory=dict)


def run_docker_compose(options: Options, project_name: str, *args: str) -> str:
    """Run docker-compose with the given arguments and return stdout and stderr combined.

    ``--project-name`` is always passed so that containers from different tests do not
    end up in the same project. Raises CalledProcessError on a non-zero exit.
    """
    command = ["docker-compose", "--project-name", project_name, *args]
    env = {**os.environ, **options.env_vars}
    completed = subprocess.run(
        command,
        cwd=options.working_dir or None,
        env=env,
        stdout=subprocess.PIPE,
        stderr=subprocess.STDOUT,
        text=True,
        check=False,
    )
    if completed.returncode != 0:
        raise subprocess.CalledProcessError(
            completed.returncode, command, output=completed.stdout
        )
    return completed.stdout