"""Amount Conversion — minor-unit integers <-> decimal display values.

Invariants:
    - Storage and comparisons only ever see integer minor units
    - Display values are Decimal quantized to DISPLAY_QUANTUM (never float)
    - to_minor(from_minor(x)) == x for every integer x (no drift on repeat)

Design Decisions:
    - Decimal over float: 0.1 + 0.2 style drift is impossible by construction
    - ROUND_HALF_UP when a display value carries more precision than a minor unit
"""

from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from finboard.core.domain_types import MinorUnits

MINOR_UNITS_PER_UNIT = 100
DISPLAY_QUANTUM = Decimal("0.01")


def convert_amount_from_minor_units(amount: int) -> Decimal:
    """150000 -> Decimal('1500.00'). Pure, exact."""
    if isinstance(amount, bool) or not isinstance(amount, int):
        raise TypeError(f"amount must be int minor units, got {type(amount).__name__}")
    return (Decimal(amount) / MINOR_UNITS_PER_UNIT).quantize(DISPLAY_QUANTUM)


def convert_amount_to_minor_units(amount: Decimal | int | str) -> MinorUnits:
    """Decimal('1500.00') -> 150000. Accepts str/int for form input."""
    try:
        value = Decimal(str(amount))
    except InvalidOperation:
        raise ValueError(f"amount is not a number: {amount!r}")
    if not value.is_finite():
        raise ValueError(f"amount must be finite: {amount!r}")
    minor = (value * MINOR_UNITS_PER_UNIT).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    return MinorUnits(int(minor))
