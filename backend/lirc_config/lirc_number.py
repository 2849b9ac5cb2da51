import re

_LIRC_NUMBER = re.compile(r"^([+-]?)(?:0[xX]([0-9a-fA-F]+)|(0[0-7]*)|([1-9][0-9]*))$")
_DECIMAL = re.compile(r"^[+-]?[0-9]+$")


def parse_lirc_number(text: str) -> int:
    """Parses a lircd.conf integer literal: decimal, 0x hexadecimal or 0 octal, optionally signed."""
    match = _LIRC_NUMBER.match((text or "").strip())
    if not match:
        raise ValueError(f"Invalid number: {text!r}")

    sign, hex_digits, octal_digits, decimal_digits = match.groups()
    if hex_digits is not None:
        value = int(hex_digits, 16)
    elif octal_digits is not None:
        value = int(octal_digits, 8)
    else:
        value = int(decimal_digits, 10)
    return -value if sign == "-" else value


def parse_decimal(text: str) -> int:
    if not _DECIMAL.match(text or ""):
        raise ValueError(f"Invalid decimal number: {text!r}")
    return int(text, 10)


def is_decimal(text: str) -> bool:
    return bool(_DECIMAL.match(text or ""))
