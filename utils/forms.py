# utils/forms.py
# Input checks for the add/edit forms. The stores never validate,
# so everything typed by the user goes through here first.


class FormError(ValueError):
    # Message is shown to the user as-is
    pass


def require_text(label: str, value: str) -> str:
    value = (value or "").strip()
    if not value:
        raise FormError(f"{label} is required.")
    return value


def parse_cost(label: str, value: str) -> float:
    # "150" / "150.50" -> float; blank or non-numeric is rejected
    text = require_text(label, value)
    try:
        return float(text)
    except ValueError:
        raise FormError(f"{label} must be a number.") from None


def parse_quantity(value: str) -> int:
    text = require_text("Quantity", value)
    try:
        qty = int(text)
    except ValueError:
        raise FormError("Quantity must be a whole number.") from None
    if qty <= 0:
        raise FormError("Quantity must be positive.")
    return qty


def require_choice(label: str, value: str, choices) -> str:
    value = require_text(label, value)
    if value not in choices:
        raise FormError(f"{label} must be one of: {', '.join(choices)}.")
    return value
