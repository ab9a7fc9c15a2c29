"""Display helpers for suggestion rows."""


def format_quantity_display(
    quantity: float | int | None,
    unit: str | None,
) -> str:
    """
    Format a quantity and unit as a single display string.

    A quantity of 0 is treated the same as a missing quantity.

    Examples:
        >>> format_quantity_display(2, "shallow 9")
        '2 shallow 9'
        >>> format_quantity_display(None, "cambro")
        'cambro'
        >>> format_quantity_display(0, "lbs")
        'lbs'
        >>> format_quantity_display(2.5, None)
        '2.5'
    """
    if not quantity and not unit:
        return ""
    if quantity and unit:
        return f"{_format_number(quantity)} {unit}"
    if unit:
        return unit
    if quantity:
        return _format_number(quantity)
    return ""


def _format_number(value: float | int) -> str:
    # 2.0 renders as "2"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
