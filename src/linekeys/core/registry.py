"""Run-scoped registry of issued keys."""

from __future__ import annotations

from collections.abc import Iterator
from typing import final, override


@final
class KeyRegistry:
    """
    Tracks the keys issued during one conversion run.

    The registry only ever grows. Duplicates get a numeric suffix starting
    at 2 (key, key_2, key_3, ...), so the result depends on the order in
    which keys are requested. Lookup and insert are not atomic; a registry
    must not be shared between concurrent conversions.
    """

    def __init__(self) -> None:
        self._used_keys: set[str] = set()

    def ensure_unique(self, base_key: str) -> str:
        """
        Reserve a unique key derived from base_key.

        Args:
            base_key: Preferred key

        Returns:
            base_key if it was unused, otherwise the first free
            "{base_key}_{n}" with n >= 2
        """
        if base_key not in self._used_keys:
            self._used_keys.add(base_key)
            return base_key

        suffix = 2
        while f"{base_key}_{suffix}" in self._used_keys:
            suffix += 1

        unique_key = f"{base_key}_{suffix}"
        self._used_keys.add(unique_key)
        return unique_key

    def __contains__(self, key: object) -> bool:
        return key in self._used_keys

    def __len__(self) -> int:
        return len(self._used_keys)

    def __iter__(self) -> Iterator[str]:
        return iter(sorted(self._used_keys))

    @override
    def __repr__(self) -> str:
        return f"KeyRegistry({len(self._used_keys)} keys)"
