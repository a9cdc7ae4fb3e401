"""Easing curves mapping normalised time in [0, 1] to progress in [0, 1]."""

import math

__all__ = [
    "ease_in_sine",
    "ease_out_sine",
    "ease_in_out_sine",
    "ease_in_quad",
    "ease_out_quad",
    "ease_in_out_quad",
    "ease_in_expo",
    "ease_out_expo",
    "ease_in_out_expo",
]


def ease_in_sine(x: float) -> float:
    return 1.0 - math.cos(x * math.pi / 2.0)


def ease_out_sine(x: float) -> float:
    return math.sin(x * math.pi / 2.0)


def ease_in_out_sine(x: float) -> float:
    return -(math.cos(math.pi * x) - 1.0) / 2.0


def ease_in_quad(x: float) -> float:
    return x * x


def ease_out_quad(x: float) -> float:
    return 1.0 - (1.0 - x) * (1.0 - x)


def ease_in_out_quad(x: float) -> float:
    if x < 0.5:
        return 2.0 * x * x
    return 1.0 - (-2.0 * x + 2.0) ** 2 / 2.0


def ease_in_expo(x: float) -> float:
    if x == 0.0:
        return 0.0
    return 2.0 ** (10.0 * x - 10.0)


def ease_out_expo(x: float) -> float:
    if x == 1.0:
        return 1.0
    return 1.0 - 2.0 ** (-10.0 * x)


def ease_in_out_expo(x: float) -> float:
    if x == 0.0:
        return 0.0
    if x == 1.0:
        return 1.0
    if x < 0.5:
        return 2.0 ** (20.0 * x - 10.0) / 2.0
    return (2.0 - 2.0 ** (-20.0 * x + 10.0)) / 2.0