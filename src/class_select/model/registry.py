"""Registry model: declared classes keyed by scope and by option group."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

OPTGROUP_KEY = "optgroup"


def _sorted_bucket(bucket: Mapping[str, str]) -> dict[str, str]:
    return {name: bucket[name] for name in sorted(bucket)}


def _sorted_buckets(buckets: Mapping[str, Mapping[str, str]]) -> dict[str, dict[str, str]]:
    return {key: _sorted_bucket(buckets[key]) for key in sorted(buckets)}


@dataclass(frozen=True)
class ClassRegistry:
    """Every declared class, as ``class name -> label`` buckets.

    ``scopes`` is keyed by scope key (``global``, ``context:<id>``,
    ``context_not:<id>``); ``optgroup`` by group name. Keys and buckets are
    kept sorted so that equal sources give equal registries.
    """

    scopes: dict[str, dict[str, str]] = field(default_factory=dict)
    optgroup: dict[str, dict[str, str]] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "scopes", _sorted_buckets(self.scopes))
        object.__setattr__(self, "optgroup", _sorted_buckets(self.optgroup))

    def lookup(self, scope_key: str) -> dict[str, str]:
        """Return a copy of the bucket for *scope_key*, or an empty dict."""
        return dict(self.scopes.get(scope_key, {}))

    def to_dict(self) -> dict[str, dict]:
        """Serialise for a cache backend: scope keys plus an ``optgroup`` member."""
        data: dict[str, dict] = {key: dict(bucket) for key, bucket in self.scopes.items()}
        if self.optgroup:
            data[OPTGROUP_KEY] = {name: dict(bucket) for name, bucket in self.optgroup.items()}
        return data

    @classmethod
    def from_dict(cls, data: Mapping[str, Mapping]) -> ClassRegistry:
        """Rebuild a registry from :meth:`to_dict` output.

        Raises ValueError when *data* does not have that shape.
        """
        if not isinstance(data, Mapping):
            raise ValueError(f"Registry data must be a mapping, got {type(data).__name__}")
        scopes: dict[str, dict[str, str]] = {}
        optgroup: dict[str, dict[str, str]] = {}
        for key, value in data.items():
            if not isinstance(value, Mapping):
                raise ValueError(f"Registry bucket {key!r} must be a mapping")
            if key == OPTGROUP_KEY:
                for name, bucket in value.items():
                    if not isinstance(bucket, Mapping):
                        raise ValueError(f"Option group {name!r} must be a mapping")
                    optgroup[str(name)] = {str(k): str(v) for k, v in bucket.items()}
            else:
                scopes[str(key)] = {str(k): str(v) for k, v in value.items()}
        return cls(scopes=scopes, optgroup=optgroup)
