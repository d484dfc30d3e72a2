"""Object-model and container workloads.

Covers attribute hooks on short-lived instances, list sorting, filtering
records, and bulk allocation with partial release.
"""

from __future__ import annotations

import copy
import hashlib
import random
import sys
from operator import itemgetter

from kernel.config import MEMORY_WORKLOAD_CAP


class _HookedRecord:
    """Routes reads of unknown attributes and writes of new ones through hooks."""

    __slots__ = ("_id", "val")

    def __init__(self, record_id: int) -> None:
        object.__setattr__(self, "_id", record_id)
        object.__setattr__(self, "val", "test")

    def __getattr__(self, name: str) -> int:
        # only reached for missing attributes
        if name.startswith("_"):
            raise AttributeError(name)
        return self._id * 2

    def __setattr__(self, name: str, value: object) -> None:
        if name in _HookedRecord.__slots__:
            object.__setattr__(self, name, value)
        else:
            object.__setattr__(self, "val", str(value))

    def __copy__(self) -> _HookedRecord:
        clone = _HookedRecord(self._id)
        object.__setattr__(clone, "val", self.val)
        return clone


def object_attribute_hooks(limit: int) -> int:
    """Create, hook-write, copy and hook-read an object per iteration."""
    checksum = 0
    for i in range(limit):
        obj = _HookedRecord(i)
        obj.dynamic_prop = i
        cloned = copy.copy(obj)
        checksum += cloned.hidden_prop
        del obj, cloned
    return checksum


def array_sorting(limit: int) -> int:
    """Build, shuffle, sort and invert a 201-element list per iteration."""
    total = 0
    for _ in range(limit):
        values = list(range(201))
        random.shuffle(values)
        values.sort()
        flipped = {v: k for k, v in enumerate(values)}
        total += sum(flipped.values())
    return total


def _is_selected(row: dict[str, int]) -> bool:
    return row["score"] > 200 and row["cat"] % 2 == 0


def data_processing(limit: int) -> list[dict[str, int]]:
    """Filter and sort a table of 100 records per iteration."""
    rows = [{"id": k, "score": k * random.randint(1, 10), "cat": k % 5} for k in range(100)]
    selected: list[dict[str, int]] = []
    for _ in range(limit):
        selected = sorted(filter(_is_selected, rows), key=itemgetter("score"), reverse=True)
    return selected


def memory_allocation(limit: int, *, cap: int = MEMORY_WORKLOAD_CAP) -> dict[int, object]:
    """Allocate strings, free every other one, then refill the holes with records.

    Stops allocating once roughly *cap* bytes are held.
    """
    data: dict[int, object] = {}
    held = 0

    allocated = 0
    for i in range(limit):
        if held > cap:
            break
        item = chr(65 + i % 26) * 100 + str(i)
        held += sys.getsizeof(item)
        data[i] = item
        allocated += 1

    for i in range(0, allocated, 2):
        held -= sys.getsizeof(data.pop(i))

    for i in range(0, allocated, 2):
        if held > cap:
            break
        record = {"id": i, "token": hashlib.md5(str(i).encode()).hexdigest(), "active": True}
        held += sys.getsizeof(record)
        data[i] = record

    return data
