"""Errors raised by the rate curve library.

All of them derive from ValueError: they signal bad caller input, never a
numeric failure. Out-of-span queries and duplicate-x segments degrade to a
number instead of raising.
"""


class RateCurveError(ValueError):
    pass


class InvalidRangeError(RateCurveError):
    """Utilization window with lower > upper or non-finite bounds."""


class CurveValidationError(RateCurveError):
    """Curve definition rejected by the strict validation layer."""

    def __init__(self, name: str, problems: list[str]) -> None:
        self.name = name
        self.problems = list(problems)
        super().__init__(f"curve '{name}' is invalid: " + "; ".join(self.problems))


class CatalogError(RateCurveError):
    pass
