"""Helpers for copying folders and inspecting paths on the local file system."""

import os
import stat
import tempfile
from collections.abc import Callable

PathFilter = Callable[[str], bool]

_STATE_FILES = frozenset({"terraform.tfstate", "terraform.tfstate.backup"})
_STATE_OR_VARS_FILES = _STATE_FILES | {"terraform.tfvars"}


def file_exists(path: str) -> bool:
    """Return True if the given path exists (following symlinks)."""
    try:
        os.stat(path)
    except OSError:
        return False
    return True


def copy_terraform_folder_to_temp(folder_path: str, temp_folder_prefix: str) -> str:
    """Copy a folder to a fresh temp folder, skipping hidden files, state and tfvars."""
    return copy_folder_to_temp(
        folder_path,
        temp_folder_prefix,
        lambda path: not path_contains_hidden_file_or_folder(path)
        and not path_contains_terraform_state_or_vars(path),
    )


def copy_terragrunt_folder_to_temp(folder_path: str, temp_folder_prefix: str) -> str:
    """Copy a folder to a fresh temp folder, skipping hidden files and state files."""
    return copy_folder_to_temp(
        folder_path,
        temp_folder_prefix,
        lambda path: not path_contains_hidden_file_or_folder(path)
        and not path_contains_terraform_state(path),
    )


def copy_folder_to_temp(
    folder_path: str, temp_folder_prefix: str, filter_fn: PathFilter
) -> str:
    """Copy the filtered contents of a folder into a new temp folder.

    The copy lives in a subfolder named like the original; its path is returned.
    """
    tmp_dir = tempfile.mkdtemp(prefix=temp_folder_prefix)
    folder_name = os.path.basename(os.path.abspath(folder_path))
    dest_folder = os.path.join(tmp_dir, folder_name)
    os.makedirs(dest_folder, mode=0o777, exist_ok=True)
    copy_folder_contents_with_filter(folder_path, dest_folder, filter_fn)
    return dest_folder


def copy_folder_contents(source: str, destination: str) -> None:
    """Copy everything inside ``source`` into ``destination``."""
    copy_folder_contents_with_filter(source, destination, lambda path: True)


def copy_folder_contents_with_filter(
    source: str, destination: str, filter_fn: PathFilter
) -> None:
    """Copy the entries of ``source`` for which ``filter_fn`` is true into ``destination``.

    Directories are copied recursively and symbolic links are recreated as links.
    """
    with os.scandir(source) as scan:
        entries = sorted(scan, key=lambda entry: entry.name)

    for entry in entries:
        src = os.path.join(source, entry.name)
        dest = os.path.join(destination, entry.name)

        if not filter_fn(src):
            continue
        if entry.is_dir(follow_symlinks=False):
            mode = stat.S_IMODE(entry.stat(follow_symlinks=False).st_mode)
            os.makedirs(dest, mode=mode, exist_ok=True)
            copy_folder_contents_with_filter(src, dest, filter_fn)
        elif entry.is_symlink():
            os.symlink(os.readlink(src), dest)
        else:
            copy_file(src, dest)


def path_contains_terraform_state_or_vars(path: str) -> bool:
    """Return True if the path names a Terraform state file or terraform.tfvars."""
    return os.path.basename(path) in _STATE_OR_VARS_FILES


def path_contains_terraform_state(path: str) -> bool:
    """Return True if the path names a Terraform state file."""
    return os.path.basename(path) in _STATE_FILES


def path_contains_hidden_file_or_folder(path: str) -> bool:
    """Return True if any component of the path is hidden (starts with a dot)."""
    return any(
        part.startswith(".") and part not in (".", "..")
        for part in path.split(os.sep)
    )


def copy_file(source: str, destination: str) -> None:
    """Copy a file, giving the copy the permissions of the original."""
    with open(source, "rb") as handle:
        contents = handle.read()
    write_file_with_same_permissions(source, destination, contents)


def write_file_with_same_permissions(
    source: str, destination: str, contents: bytes
) -> None:
    """Write ``contents`` to ``destination`` using the permissions of ``source``."""
    mode = stat.S_IMODE(os.stat(source).st_mode)
    fd = os.open(destination, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, mode)
    with os.fdopen(fd, "wb") as handle:
        handle.write(contents)