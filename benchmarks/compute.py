"""CPU-bound workloads: arithmetic, geometry, branching and recursion.

Each workload takes the iteration count and returns a checksum so the
interpreter cannot skip the work.
"""

from __future__ import annotations

import math

# Vertices in the rotating mesh
_MESH_VERTICES = 20

# Depth of the recursive call tree (2**depth leaf calls per loop)
_RECURSION_DEPTH = 5


def math_functions(limit: int) -> float:
    """Trigonometry, powers, logarithms and rounding on every integer below *limit*."""
    r = 0.0
    for i in range(limit):
        b = i % 7
        r = math.sin(i) * math.cos(i)
        math.tan(i)
        math.atan(i)
        math.pow(i >> 2, 2)
        math.sqrt(i)
        math.hypot(i, b)
        math.log(i + 1)
        math.exp(b)
        abs(i - limit)
        math.ceil(i / 3.14)
        math.floor(i / 3.14)
        round(i / 3.14)
        math.isfinite(i)
        math.isnan(i)
    return r


def mesh_projection(limit: int) -> float:
    """Rotate a small mesh in place and accumulate its projected bounding-box area."""
    mesh = [[math.sin(v), math.cos(v), v * 0.1] for v in range(_MESH_VERTICES)]
    accumulated_area = 0.0

    for i in range(limit):
        angle = i * 0.0001
        cos_a = math.cos(angle)
        sin_a = math.sin(angle)

        min_x = min_y = 9999.0
        max_x = max_y = -9999.0

        for vertex in mesh:
            x, y, z = vertex
            rx = x * cos_a - z * sin_a
            rz = x * sin_a + z * cos_a
            ry = y * cos_a - rz * sin_a
            rz2 = y * sin_a + rz * cos_a
            vertex[0], vertex[1], vertex[2] = rx, ry, rz2

            perspective = rz2 + 5.0
            px = rx / perspective
            py = ry / perspective

            min_x = min(min_x, px)
            max_x = max(max_x, px)
            min_y = min(min_y, py)
            max_y = max(max_y, py)

        accumulated_area += (max_x - min_x) * (max_y - min_y)

    return accumulated_area


def branching_logic(limit: int) -> int:
    """Nested loops with data-dependent branches and bit twiddling."""
    x = 1
    y = 0

    for i in range(1, limit + 1):
        for j in range(25):
            if (i % 2 == 0 and x % 3 != 0) or j % 7 == 0:
                x ^= j << 1
            elif (j % 5 == 0) != (x > 10000):
                x = x * 3 + 1
            else:
                x += i >> 2

            case = abs(x ^ j) % 5
            if case == 0:
                y += i
            elif case in (1, 2):
                y -= j // 2
            elif case == 3:
                x = ~x
            else:
                y ^= x

            if x > 1_000_000 or x < -1_000_000:
                x %= 10000

    return x + y


def _recurse(depth: int, x: int, y: int) -> int:
    if depth <= 0:
        return x + y
    return _recurse(depth - 1, x + 1, y) + _recurse(depth - 1, x, y + 1)


def recursion(limit: int) -> int:
    """Roughly *limit* calls spread over full binary call trees."""
    calls_per_loop = 1 << _RECURSION_DEPTH
    result = 0
    for i in range(limit // calls_per_loop):
        result += _recurse(_RECURSION_DEPTH, i, 1)
    return result
