from decimal import Decimal

from web3 import Web3

UNITS = ("wei", "gwei", "ether")


def _check_unit(unit: str):
    if unit not in UNITS:
        raise ValueError(f"Unsupported unit {unit!r}, expected one of {', '.join(UNITS)}")


def to_wei(amount: int | str | Decimal, unit: str) -> int:
    # Floats are rejected, amounts must be exact.
    if isinstance(amount, float):
        raise TypeError("Pass amounts as int, str or Decimal, not float")
    _check_unit(unit)
    return Web3.to_wei(amount, unit)


def from_wei(value: int, unit: str) -> int | Decimal:
    _check_unit(unit)
    return Web3.from_wei(value, unit)


def format_ether(value: int) -> str:
    """Render a wei amount as a plain ether string, e.g. 1500000000000000000 -> '1.5'."""
    # All 18 decimals kept, no context rounding.
    text = format(Decimal(from_wei(value, "ether")), "f")
    if "." in text:
        text = text.rstrip("0").rstrip(".")
    return text
