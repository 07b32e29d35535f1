"""Scanner settings.

User-provided configuration for a scan.
Defaults match the host settings screen: lifecycle filter on.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Self

from patchscan.domain.exceptions import InvalidSettingsError
from patchscan.domain.model.lifecycle import COMMON_LIFECYCLE_METHODS

# Key used by the host's persisted settings file
_HOST_FILTER_KEY = "ExcludeCommonLifecycleMethods"


@dataclass(frozen=True, slots=True)
class ScannerSettings:
    """Scan configuration DTO.

    Immutable configuration object with FAIL-FIRST validation.

    Attributes:
        exclude_common_lifecycle_methods: Drop lifecycle targets and handlers.
        lifecycle_methods: Names treated as lifecycle hooks.
        output_dir: Directory report files are written to.
    """

    exclude_common_lifecycle_methods: bool = True
    lifecycle_methods: frozenset[str] = field(default=COMMON_LIFECYCLE_METHODS)
    output_dir: Path = field(default_factory=lambda: Path("logs"))

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not isinstance(self.exclude_common_lifecycle_methods, bool):
            raise InvalidSettingsError(
                "exclude_common_lifecycle_methods",
                f"expected bool, got {type(self.exclude_common_lifecycle_methods).__name__}",
            )
        if not isinstance(self.lifecycle_methods, frozenset):
            raise InvalidSettingsError("lifecycle_methods", "expected frozenset of names")
        if any(not isinstance(name, str) or not name for name in self.lifecycle_methods):
            raise InvalidSettingsError("lifecycle_methods", "names must be non-empty strings")
        if not isinstance(self.output_dir, Path):
            raise InvalidSettingsError("output_dir", "expected pathlib.Path")

    @classmethod
    def from_mapping(cls, data: Mapping[str, object]) -> Self:
        """Build settings from a JSON-style mapping.

        Accepts snake_case keys and the host's 'ExcludeCommonLifecycleMethods'.
        'extra_lifecycle_methods' extends the default set,
        'lifecycle_methods' replaces it.

        Raises:
            InvalidSettingsError: If a value has the wrong type.
        """
        kwargs: dict[str, object] = {}

        for key in ("exclude_common_lifecycle_methods", _HOST_FILTER_KEY):
            if key in data:
                kwargs["exclude_common_lifecycle_methods"] = data[key]

        names = COMMON_LIFECYCLE_METHODS
        if "lifecycle_methods" in data:
            names = _as_names("lifecycle_methods", data["lifecycle_methods"])
        if "extra_lifecycle_methods" in data:
            names = names | _as_names("extra_lifecycle_methods", data["extra_lifecycle_methods"])
        kwargs["lifecycle_methods"] = names

        if "output_dir" in data:
            output_dir = data["output_dir"]
            if not isinstance(output_dir, str) or not output_dir:
                raise InvalidSettingsError("output_dir", "expected non-empty string")
            kwargs["output_dir"] = Path(output_dir)

        return cls(**kwargs)  # type: ignore[arg-type]

    def with_overrides(
        self,
        *,
        exclude_common_lifecycle_methods: bool | None = None,
        output_dir: Path | None = None,
    ) -> ScannerSettings:
        """Return a copy with the given fields replaced. None = keep."""
        return ScannerSettings(
            exclude_common_lifecycle_methods=(
                self.exclude_common_lifecycle_methods
                if exclude_common_lifecycle_methods is None
                else exclude_common_lifecycle_methods
            ),
            lifecycle_methods=self.lifecycle_methods,
            output_dir=self.output_dir if output_dir is None else output_dir,
        )


def _as_names(key: str, value: object) -> frozenset[str]:
    """Validate a JSON list of method names."""
    if not isinstance(value, list) or not all(isinstance(v, str) and v for v in value):
        raise InvalidSettingsError(key, "expected list of non-empty strings")
    return frozenset(value)
