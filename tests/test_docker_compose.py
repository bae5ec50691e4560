import subprocess
from unittest import mock

import pytest

from infratest.docker_compose import Options, run_docker_compose


def _completed(returncode, output):
    return subprocess.CompletedProcess(args=[], returncode=returncode, stdout=output)


def test_passes_project_name_and_args(tmp_path):
    options = Options(working_dir=str(tmp_path))
    with mock.patch("subprocess.run", return_value=_completed(0, "started")) as run:
        out = run_docker_compose(options, "my-test", "up", "-d")
    assert out == "started"
    command = run.call_args.args[0]
    assert command == ["docker-compose", "--project-name", "my-test", "up", "-d"]
    assert run.call_args.kwargs["cwd"] == str(tmp_path)


def test_env_vars_are_merged_over_environment(monkeypatch):
    monkeypatch.setenv("INHERITED_VAR", "kept")
    options = Options(env_vars={"EXTRA_VAR": "added"})
    with mock.patch("subprocess.run", return_value=_completed(0, "listing")) as run:
        out = run_docker_compose(options, "proj", "ps")
    assert out == "listing"
    env = run.call_args.kwargs["env"]
    assert env["EXTRA_VAR"] == "added"
    assert env["INHERITED_VAR"] == "kept"


def test_non_zero_exit_raises_with_output():
    with mock.patch("subprocess.run", return_value=_completed(2, "bad things")):
        with pytest.raises(subprocess.CalledProcessError) as info:
            run_docker_compose(Options(), "proj", "down")
    assert info.value.returncode == 2
    assert info.value.output == "bad things"
    assert info.value.cmd[:3] == ["docker-compose", "--project-name", "proj"]


def test_default_options_have_no_working_dir():
    with mock.patch("subprocess.run", return_value=_completed(0, "ok")) as run:
        out = run_docker_compose(Options(), "proj")
    assert out == "ok"
    assert run.call_args.kwargs["cwd"] is None
    assert run.call_args.args[0] == ["docker-compose", "--project-name", "proj"]