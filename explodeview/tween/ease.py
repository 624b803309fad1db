"""Функции сглаживания (easing) для движения деталей внутри окна анимации.

Все функции принимают t в диапазоне [0, 1], возвращают значение в том же
диапазоне, монотонны и удовлетворяют f(0) = 0, f(1) = 1. Кривые с выходом
за пределы (Back, Elastic, Bounce) сюда намеренно не входят: деталь не должна
проскакивать собранное положение.

Терминология:
- IN (вход): медленное начало, ускорение к концу
- OUT (выход): быстрое начало, замедление к концу
- IN_OUT: медленное начало и конец, быстрая середина; симметричны:
  f(t) + f(1 - t) = 1
"""

from __future__ import annotations

import math
from enum import Enum, auto
from typing import Callable


class Ease(Enum):
    """
    Закрытый набор кривых, из которого деталь выбирает свою.

    По умолчанию используется IN_OUT_CUBIC: нулевая скорость на обоих
    концах окна, поэтому деталь не «дёргается» на границах.
    """

    LINEAR = auto()

    IN_QUAD = auto()
    OUT_QUAD = auto()
    IN_OUT_QUAD = auto()

    IN_CUBIC = auto()
    OUT_CUBIC = auto()
    IN_OUT_CUBIC = auto()

    IN_QUART = auto()
    OUT_QUART = auto()
    IN_OUT_QUART = auto()

    IN_QUINT = auto()
    OUT_QUINT = auto()
    IN_OUT_QUINT = auto()

    IN_SINE = auto()
    OUT_SINE = auto()
    IN_OUT_SINE = auto()


def linear(t: float) -> float:
    return t


# --- Квадратичные (Quad) ---

def in_quad(t: float) -> float:
    return t * t


def out_quad(t: float) -> float:
    return 1 - (1 - t) * (1 - t)


def in_out_quad(t: float) -> float:
    return 2 * t * t if t < 0.5 else 1 - (-2 * t + 2) ** 2 / 2


# --- Кубические (Cubic) ---

def in_cubic(t: float) -> float:
    return t * t * t


def out_cubic(t: float) -> float:
    return 1 - (1 - t) ** 3


def in_out_cubic(t: float) -> float:
    """Кубический вход-выход: 4t³ до середины, зеркально после."""
    return 4 * t * t * t if t < 0.5 else 1 - (-2 * t + 2) ** 3 / 2


# --- Четвёртая степень (Quart) ---

def in_quart(t: float) -> float:
    return t ** 4


def out_quart(t: float) -> float:
    return 1 - (1 - t) ** 4


def in_out_quart(t: float) -> float:
    return 8 * t ** 4 if t < 0.5 else 1 - (-2 * t + 2) ** 4 / 2


# --- Пятая степень (Quint) ---

def in_quint(t: float) -> float:
    return t ** 5


def out_quint(t: float) -> float:
    return 1 - (1 - t) ** 5


def in_out_quint(t: float) -> float:
    return 16 * t ** 5 if t < 0.5 else 1 - (-2 * t + 2) ** 5 / 2


# --- Синусоидальные (Sine) ---

def in_sine(t: float) -> float:
    """Самое мягкое сглаживание."""
    return 1 - math.cos(t * math.pi / 2)


def out_sine(t: float) -> float:
    return math.sin(t * math.pi / 2)


def in_out_sine(t: float) -> float:
    return -(math.cos(math.pi * t) - 1) / 2


_EASE_FUNCTIONS: dict[Ease, Callable[[float], float]] = {
    Ease.LINEAR: linear,
    Ease.IN_QUAD: in_quad,
    Ease.OUT_QUAD: out_quad,
    Ease.IN_OUT_QUAD: in_out_quad,
    Ease.IN_CUBIC: in_cubic,
    Ease.OUT_CUBIC: out_cubic,
    Ease.IN_OUT_CUBIC: in_out_cubic,
    Ease.IN_QUART: in_quart,
    Ease.OUT_QUART: out_quart,
    Ease.IN_OUT_QUART: in_out_quart,
    Ease.IN_QUINT: in_quint,
    Ease.OUT_QUINT: out_quint,
    Ease.IN_OUT_QUINT: in_out_quint,
    Ease.IN_SINE: in_sine,
    Ease.OUT_SINE: out_sine,
    Ease.IN_OUT_SINE: in_out_sine,
}


def evaluate(ease: Ease, t: float) -> float:
    """Значение кривой в точке t; t за пределами [0, 1] прижимается к границе."""
    if t <= 0.0:
        return 0.0
    if t >= 1.0:
        return 1.0
    return _EASE_FUNCTIONS[ease](t)


def parse(name: str | Ease) -> Ease:
    """Ease по имени ("IN_OUT_CUBIC" или "in_out_cubic")."""
    if isinstance(name, Ease):
        return name
    try:
        return Ease[name.upper()]
    except KeyError:
        raise ValueError(f"Unknown ease '{name}'") from None
