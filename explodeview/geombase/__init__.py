"""
Базовая геометрия для разнесённых видов.

Содержит:
- Box - неподвижный осевыровненный параллелепипед (центр + размеры)
- vec3 - приведение последовательностей к кортежу из трёх float
- X, Y, Z - индексы осей
"""

from .vec import X, Y, Z, AXIS_NAMES, vec3
from .box import Box

__all__ = [
    "X",
    "Y",
    "Z",
    "AXIS_NAMES",
    "vec3",
    "Box",
]
