"""
benchmarks/suite.py — The default workload suite.

Order and iteration counts are fixed so that reports from different
machines line up row by row.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from benchmarks.compute import branching_logic, math_functions, mesh_projection, recursion
from benchmarks.containers import (
    array_sorting,
    data_processing,
    memory_allocation,
    object_attribute_hooks,
)
from benchmarks.filesystem import file_read, file_write
from benchmarks.randomness import random_basic, random_bytes, random_csprng, random_mersenne
from benchmarks.text import hashing, serialization, string_manipulation
from domain.models import TestDefinition

if TYPE_CHECKING:
    from modules.registry.core import Registry

DEFAULT_SUITE: tuple[TestDefinition, ...] = (
    TestDefinition("Math (Trigonometry & Powers)", 200_000, math_functions),
    TestDefinition("Heavy Geometry (Mesh Projections)", 20_000, mesh_projection),
    TestDefinition("String (Manipulation & Regex)", 20_000, string_manipulation),
    TestDefinition("Loops & Logic (Heavy Branching)", 50_000, branching_logic),
    TestDefinition("Object (Instantiation & Attribute Hooks)", 600_000, object_attribute_hooks),
    TestDefinition("Arrays (Creation & Sorting)", 10_000, array_sorting),
    TestDefinition("Data Processing (Filter & Sort)", 10_000, data_processing),
    TestDefinition("Recursion (Heavy Call Stack)", 1_000_000, recursion),
    TestDefinition("Hashing (SHA-256 & PBKDF2)", 20_000, hashing),
    TestDefinition("JSON & Serialization", 100_000, serialization),
    TestDefinition("Random::random (Basic)", 100_000, random_basic),
    TestDefinition("Random::randint (Mersenne)", 100_000, random_mersenne),
    TestDefinition("Random::randbelow (CSPRNG)", 100_000, random_csprng),
    TestDefinition("Random::urandom (Bytes)", 100_000, random_bytes),
    TestDefinition("IO::File Write", 10_000, file_write),
    TestDefinition("IO::File Read", 10_000, file_read),
    TestDefinition("Memory (Allocation & GC)", 50_000, memory_allocation),
)


def register_default_suite(registry: Registry) -> None:
    """Register every workload of the default suite, in order."""
    for definition in DEFAULT_SUITE:
        registry.add_test(definition.name, definition.iteration_count, definition.workload)
