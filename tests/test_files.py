import os
import stat
import sys

import pytest

from infratest.files import (
    copy_file,
    copy_folder_contents,
    copy_folder_contents_with_filter,
    copy_folder_to_temp,
    copy_terraform_folder_to_temp,
    copy_terragrunt_folder_to_temp,
    file_exists,
    path_contains_hidden_file_or_folder,
    path_contains_terraform_state,
    path_contains_terraform_state_or_vars,
    write_file_with_same_permissions,
)


def _write(path, text):
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text)


def _snapshot(root):
    """Map each relative path under root to file text, ('link', target) or 'dir'."""
    result = {}
    for dirpath, dirnames, filenames in os.walk(root):
        for name in dirnames + filenames:
            full = os.path.join(dirpath, name)
            rel = os.path.relpath(full, root)
            if os.path.islink(full):
                result[rel] = ("link", os.readlink(full))
            elif os.path.isdir(full):
                result[rel] = "dir"
            else:
                with open(full) as handle:
                    result[rel] = handle.read()
    return result


@pytest.fixture
def original(tmp_path):
    root = tmp_path / "original"
    _write(root / "main.tf", "resource {}")
    _write(root / "terraform.tfstate", "state")
    _write(root / "terraform.tfstate.backup", "backup")
    _write(root / "terraform.tfvars", "vars")
    _write(root / ".hidden-file", "hidden")
    _write(root / ".hidden-folder" / "inside.txt", "inside hidden")
    _write(root / "subfolder" / "nested.txt", "nested")
    _write(root / "subfolder" / ".nested-hidden", "nested hidden")
    return root


def test_file_exists(tmp_path):
    assert file_exists(os.path.abspath(sys.argv[0])) or file_exists(__file__)
    assert file_exists(__file__)
    assert not file_exists("/not/a/real/path")


def test_copy_folder_contents(original, tmp_path):
    dest = tmp_path / "dest"
    dest.mkdir()
    copy_folder_contents(str(original), str(dest))
    assert _snapshot(dest) == _snapshot(original)


def test_copy_folder_contents_with_hidden_files_filter(original, tmp_path):
    dest = tmp_path / "dest"
    dest.mkdir()
    copy_folder_contents_with_filter(
        str(original), str(dest), lambda p: not path_contains_hidden_file_or_folder(p)
    )
    assert _snapshot(dest) == {
        "main.tf": "resource {}",
        "terraform.tfstate": "state",
        "terraform.tfstate.backup": "backup",
        "terraform.tfvars": "vars",
        "subfolder": "dir",
        os.path.join("subfolder", "nested.txt"): "nested",
    }


def test_copy_folder_contents_with_symlinks(tmp_path):
    root = tmp_path / "symlinks"
    _write(root / "foo.txt", "foo")
    os.symlink("foo.txt", root / "bar.txt")
    dest = tmp_path / "dest"
    dest.mkdir()
    copy_folder_contents_with_filter(
        str(root), str(dest), lambda p: not path_contains_hidden_file_or_folder(p)
    )
    assert _snapshot(dest) == _snapshot(root)
    assert os.path.islink(dest / "bar.txt")
    assert (dest / "bar.txt").read_text() == "foo"


def test_copy_folder_contents_with_broken_symlinks(tmp_path):
    root = tmp_path / "symlinks-broken"
    root.mkdir()
    target = str(root / "nonexistent-folder" / "bar.txt")
    os.symlink(target, root / "bar.txt")
    dest = tmp_path / "dest"
    dest.mkdir()
    copy_folder_contents_with_filter(
        str(root), str(dest), lambda p: not path_contains_hidden_file_or_folder(p)
    )
    assert os.readlink(dest / "bar.txt") == target


def test_copy_terraform_folder_to_temp(original):
    dest = copy_terraform_folder_to_temp(str(original), "TestCopyTerraformFolderToTemp")
    assert os.path.basename(dest) == "original"
    assert _snapshot(dest) == {
        "main.tf": "resource {}",
        "subfolder": "dir",
        os.path.join("subfolder", "nested.txt"): "nested",
    }


def test_copy_terragrunt_folder_to_temp(original):
    dest = copy_terragrunt_folder_to_temp(str(original), "TestCopyTerragruntFolderToTemp")
    assert _snapshot(dest) == {
        "main.tf": "resource {}",
        "terraform.tfvars": "vars",
        "subfolder": "dir",
        os.path.join("subfolder", "nested.txt"): "nested",
    }


def test_copy_folder_to_temp_uses_prefix_and_filter(original):
    dest = copy_folder_to_temp(str(original), "my-prefix", lambda p: p.endswith(".tf"))
    assert os.path.basename(os.path.dirname(dest)).startswith("my-prefix")
    assert _snapshot(dest) == {"main.tf": "resource {}"}


@pytest.mark.parametrize(
    "path, expected",
    [
        ("foo/bar", False),
        ("./foo/bar", False),
        ("../foo/bar", False),
        ("foo/.bar", True),
        (".foo/bar", True),
        ("foo/.terraform/baz", True),
    ],
)
def test_path_contains_hidden_file_or_folder(path, expected):
    assert path_contains_hidden_file_or_folder(path.replace("/", os.sep)) is expected


@pytest.mark.parametrize(
    "path, state, state_or_vars",
    [
        ("dir/terraform.tfstate", True, True),
        ("dir/terraform.tfstate.backup", True, True),
        ("dir/terraform.tfvars", False, True),
        ("dir/main.tf", False, False),
    ],
)
def test_terraform_path_predicates(path, state, state_or_vars):
    assert path_contains_terraform_state(path) is state
    assert path_contains_terraform_state_or_vars(path) is state_or_vars


def test_copy_file_preserves_contents_and_permissions(tmp_path):
    src = tmp_path / "script.sh"
    src.write_text("echo hi")
    os.chmod(src, 0o750)
    dest = tmp_path / "copy.sh"
    copy_file(str(src), str(dest))
    assert dest.read_text() == "echo hi"
    assert stat.S_IMODE(os.stat(dest).st_mode) & 0o100


def test_write_file_with_same_permissions_missing_source(tmp_path):
    with pytest.raises(FileNotFoundError):
        write_file_with_same_permissions(
            str(tmp_path / "missing"), str(tmp_path / "out"), b"data"
        )