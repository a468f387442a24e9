"""Currency helpers shared by the rule engine and the quote estimator."""
import math


def round_half_up(value: float) -> int:
    """Nearest integer, halves rounding toward +infinity (2.5 -> 3, -2.5 -> -2)."""
    return int(math.floor(value + 0.5))


def to_thb(amount: float | None, rate: float) -> float:
    return (amount or 0) * rate


def margin_percent(profit: float, revenue: float) -> float:
    if revenue == 0:
        return 0.0
    return profit / revenue * 100
