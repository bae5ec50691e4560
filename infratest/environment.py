"""Helpers for reading the process environment."""

import os
from collections.abc import Sequence


class EmptyEnvVarsError(Exception):
    """Raised when every one of a list of environment variables is empty."""

    def __init__(self, env_var_names: Sequence[str]) -> None:
        self.env_var_names = list(env_var_names)
        super().__init__(
            f"All of the following env vars {self.env_var_names} are empty. "
            "At least one must be non-empty."
        )


def get_first_non_empty_env_var_or_empty_string(env_var_names: Sequence[str]) -> str:
    """Return the value of the first non-empty variable in ``env_var_names``, or ''."""
    return next(
        (value for name in env_var_names if (value := os.environ.get(name, ""))), ""
    )


def get_first_non_empty_env_var_or_fatal(env_var_names: Sequence[str]) -> str:
    """Like the empty-string variant, but raise EmptyEnvVarsError if all are empty."""
    value = get_first_non_empty_env_var_or_empty_string(env_var_names)
    if not value:
        raise EmptyEnvVarsError(env_var_names)
    return value