"""An exception that bundles several errors together."""

from __future__ import annotations


class MultiError(Exception):
    """Several errors reported as one."""

    def __init__(self, errors: list[BaseException]) -> None:
        self.errors = list(errors)
        super().__init__(str(self))

    def __str__(self) -> str:
        messages = "\n".join(str(err) for err in self.errors if err is not None)
        return f"Hit multiple errors:\n{messages}"


def new_multi_error(*args: BaseException | None) -> MultiError | None:
    """Combine the given errors, ignoring ``None``; return ``None`` if none remain."""
    errors = [err for err in args if err is not None]
    if not errors:
        return None
    return MultiError(errors)