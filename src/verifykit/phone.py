"""Phone number normalization for a single home country."""

from __future__ import annotations

from verifykit.models.request import PhoneNumber

DEFAULT_COUNTRY_CODE = "98"


class PhoneNormalizer:
    """Rewrite loosely formatted numbers into ``+<country code><digits>``.

    This is a narrow heuristic for one home country, not a general E.164
    parser. It never rejects input: malformed numbers come back as a
    best-effort canonical string and the provider decides whether they are
    deliverable. Numbers that already carry a ``+`` (including foreign ones)
    are left as they are.

    Example:
        >>> PhoneNormalizer("98").normalize("0912 345 6789")
        '+989123456789'
        >>> PhoneNormalizer("98").normalize("989123456789")
        '+989123456789'
        >>> PhoneNormalizer("98").normalize("+44 7911 123456")
        '+447911123456'
    """

    def __init__(self, country_code: str = DEFAULT_COUNTRY_CODE) -> None:
        code = country_code.lstrip("+")
        if not code.isascii() or not code.isdigit() or not 1 <= len(code) <= 3:
            raise ValueError(f"Invalid country calling code: {country_code!r}")
        self._country_code = code

    @property
    def country_code(self) -> str:
        return self._country_code

    def normalize(self, raw: str) -> PhoneNumber:
        cleaned = _clean(raw)
        home = self._country_code

        if cleaned.startswith("+"):
            if len(cleaned) == 1:
                return PhoneNumber(f"+{home}")
            return PhoneNumber(cleaned)
        if cleaned.startswith("00"):
            # International access prefix.
            return PhoneNumber(f"+{cleaned[2:] or home}")
        if cleaned.startswith("0"):
            return PhoneNumber(f"+{home}{cleaned[1:]}")
        if cleaned.startswith(home):
            return PhoneNumber(f"+{cleaned}")
        return PhoneNumber(f"+{home}{cleaned}")


def _clean(raw: str) -> str:
    """Keep ASCII digits and a ``+`` only when it precedes the first digit."""
    kept = [ch for ch in raw or "" if ch == "+" or "0" <= ch <= "9"]
    digits = "".join(ch for ch in kept if ch != "+")
    if kept and kept[0] == "+":
        return f"+{digits}"
    return digits


def normalize_phone(raw: str, country_code: str = DEFAULT_COUNTRY_CODE) -> PhoneNumber:
    """Normalize *raw* for the home country *country_code*.

    Args:
        raw: Phone number in any common format.
        country_code: Home country calling code without ``+`` (default: "98").

    Returns:
        The number as ``+`` followed by digits.
    """
    return PhoneNormalizer(country_code).normalize(raw)
