"""Rendering of numeric results for display."""

from calc_engine.config import settings
from calc_engine.models import FormatPolicy


def format_number(
    value: float,
    policy: FormatPolicy | None = None,
    precision: int | None = None,
) -> str:
    """
    Render a result for display.

    The default SHORTEST policy uses the shortest decimal string that
    round-trips the float and always keeps at least one digit after the
    decimal point, so 7 renders as "7.0". Magnitudes whose shortest form is
    exponential keep Python's exponent notation ("1e+20").
    """
    policy = policy or settings.format_policy
    value = float(value) + 0.0

    if policy == FormatPolicy.FIXED:
        digits = settings.fixed_precision if precision is None else precision
        text = f"{value:.{digits}f}"
        if text.startswith("-") and float(text) == 0:
            text = text[1:]
        return text

    text = repr(value)
    if text.lstrip("-").isdigit():
        text += ".0"
    return text
