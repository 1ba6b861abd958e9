"""
Algorithm registry: the ordered list of named sorters under test.

Every sorter satisfies one call contract:

    sort(collection: list[int], compare) -> None

It reorders `collection` in place using `compare(a, b)` as a strict weak
ordering. It may `clone()` or `take()` the comparator as often as it likes,
but must never use an instance after it has been moved from.

Adding a bundled algorithm means adding `cmpbench/algorithms/<name>.py`
with a module-level `sort` and appending `<name>` to `ALGORITHM_NAMES`.
Out-of-tree sorters are registered through a config entry with a `target`:

    {"name": "my_sort", "target": "my_package.sorting:my_sort"}

Public API (stable):
    AlgorithmEntry
    ALGORITHM_NAMES
    default_registry() -> list[AlgorithmEntry]
    resolve_algorithms(entries) -> list[AlgorithmEntry]
"""

from __future__ import annotations

import importlib
from dataclasses import dataclass
from typing import Any, Callable, Dict, Iterable, List, Optional, Union

__all__ = ["AlgorithmEntry", "ALGORITHM_NAMES", "default_registry", "resolve_algorithms"]

# Report order
ALGORITHM_NAMES = (
    "builtin_timsort",
    "heap_sort",
    "insertion_sort",
    "merge_sort",
    "quick_sort",
    "selection_sort",
    "shell_sort",
)


@dataclass(frozen=True)
class AlgorithmEntry:
    name: str
    sorter: Callable[..., None]


def default_registry() -> List[AlgorithmEntry]:
    return resolve_algorithms(ALGORITHM_NAMES)


def resolve_algorithms(entries: Iterable[Union[str, Dict[str, Any]]]) -> List[AlgorithmEntry]:
    """
    Turn config entries into registry entries, keeping their order.

    Parameters
    ----------
    entries : iterable of str or dict
        A bare name selects `cmpbench.algorithms.<name>.sort`. A dict needs a
        string `name` and may give `target` as "module.path:attribute".

    Raises
    ------
    ValueError
        Malformed or duplicate entries.
    ImportError
        The module cannot be imported.
    AttributeError
        The module lacks the sorter, or it is not callable.
    """
    resolved: List[AlgorithmEntry] = []
    seen = set()
    for entry in entries:
        if isinstance(entry, str):
            name, target = entry, None
        elif isinstance(entry, dict):
            name, target = entry.get("name", None), entry.get("target", None)
        else:
            raise ValueError(f"Algorithm entries must be names or mappings; got {entry!r}")

        if not name or not isinstance(name, str):
            raise ValueError("Each algorithm must have a string 'name' field")
        if name in seen:
            raise ValueError(f"Duplicate algorithm name in config: {name}")
        seen.add(name)

        resolved.append(AlgorithmEntry(name=name, sorter=_load_sorter(name, target)))
    return resolved


# ------------------------- helpers ------------------------- #


def _load_sorter(name: str, target: Optional[str]) -> Callable[..., None]:
    if target is None:
        module_path, attr = f"cmpbench.algorithms.{name}", "sort"
    else:
        if not isinstance(target, str) or target.count(":") != 1:
            raise ValueError(f"Algorithm '{name}': 'target' must look like 'package.module:attribute'")
        module_path, attr = target.split(":")

    try:
        mod = importlib.import_module(module_path)
    except Exception as e:
        raise ImportError(f"Could not import algorithm module '{module_path}': {e!r}") from e

    sorter = getattr(mod, attr, None)
    if sorter is None or not callable(sorter):
        raise AttributeError(
            f"Algorithm module '{module_path}' must define a callable `{attr}(collection, compare)`"
        )
    return sorter
