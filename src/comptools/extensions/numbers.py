"""Locale-invariant float parsing.

The numeric grammar is never read from the process locale: callers pass a
``NumberFormat`` (or rely on ``INVARIANT``), so "0.123" means the same thing
under de_DE as under en_US.

Accepted shape ("any" number style):

    [ws] ["("] [cur] [sign] [cur] digits [dec frac] [exp [sign] digits] [cur] [sign] [cur] [")"] [ws]

  - group separators may appear anywhere in the integer part, after its first digit
  - at most one sign and at most one currency symbol
  - parentheses mean negative and exclude an explicit sign
  - NaN / Infinity symbols are matched case-insensitively
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import cached_property

from comptools.errors import ConfigError, NumberFormatError


@dataclass(frozen=True)
class NumberFormat:
    """Symbols used by ``generic_parse``; defaults are the invariant ones."""

    decimal_separator: str = "."
    group_separator: str = ","
    exponent_markers: str = "eE"
    positive_sign: str = "+"
    negative_sign: str = "-"
    currency_symbol: str = "¤"
    nan_symbol: str = "NaN"
    positive_infinity_symbol: str = "Infinity"
    negative_infinity_symbol: str = "-Infinity"

    def __post_init__(self) -> None:
        for name in (
            "decimal_separator",
            "group_separator",
            "exponent_markers",
            "positive_sign",
            "negative_sign",
            "currency_symbol",
        ):
            v = getattr(self, name)
            if not isinstance(v, str) or not v:
                raise ConfigError(f"NumberFormat.{name} must be a non-empty string")
        if self.decimal_separator == self.group_separator:
            raise ConfigError("NumberFormat: decimal and group separators must differ")
        if self.positive_sign == self.negative_sign:
            raise ConfigError("NumberFormat: positive and negative signs must differ")
        if any(ch.isdigit() for ch in self.decimal_separator + self.group_separator):
            raise ConfigError("NumberFormat: separators cannot contain digits")

    @cached_property
    def _pattern(self) -> re.Pattern[str]:
        cur = re.escape(self.currency_symbol)
        sign = f"(?:{re.escape(self.positive_sign)}|{re.escape(self.negative_sign)})"
        dec = re.escape(self.decimal_separator)
        grp = re.escape(self.group_separator)
        exp = "[" + re.escape(self.exponent_markers) + "]"
        return re.compile(
            rf"""
            (?P<open>\(\s*)?
            (?P<lcur1>{cur})?
            (?P<lsign>{sign})?
            (?P<lcur2>{cur})?
            (?P<int>[0-9](?:[0-9]|{grp})*)?
            (?:{dec}(?P<frac>[0-9]*))?
            (?:{exp}(?P<esign>{sign})?(?P<exp>[0-9]+))?
            (?P<tcur1>{cur})?
            (?P<tsign>{sign})?
            (?P<tcur2>{cur})?
            (?P<close>\s*\))?
            """,
            re.VERBOSE,
        )

    def parse(self, s: str) -> float:
        if not isinstance(s, str):
            raise TypeError(f"expected str, got {type(s).__name__}")
        text = s.strip()
        if not text:
            raise NumberFormatError("empty numeric string")

        special = self._parse_special(text)
        if special is not None:
            return special

        m = self._pattern.fullmatch(text)
        if m is None:
            raise NumberFormatError(f"not a number: {s!r}")

        int_part = (m.group("int") or "").replace(self.group_separator, "")
        frac_part = m.group("frac") or ""
        if not int_part and not frac_part:
            raise NumberFormatError(f"no digits in {s!r}")

        curs = [g for g in ("lcur1", "lcur2", "tcur1", "tcur2") if m.group(g)]
        if len(curs) > 1:
            raise NumberFormatError(f"more than one currency symbol in {s!r}")

        lsign, tsign = m.group("lsign"), m.group("tsign")
        if lsign and tsign:
            raise NumberFormatError(f"more than one sign in {s!r}")
        sign = lsign or tsign

        parens = bool(m.group("open")), bool(m.group("close"))
        if parens[0] != parens[1]:
            raise NumberFormatError(f"unbalanced parentheses in {s!r}")
        if parens[0] and sign:
            raise NumberFormatError(f"sign inside parentheses in {s!r}")

        negative = parens[0] or sign == self.negative_sign
        esign = "-" if m.group("esign") == self.negative_sign else "+"
        literal = f"{int_part or '0'}.{frac_part or '0'}e{esign}{m.group('exp') or '0'}"
        value = float(literal)
        return -value if negative else value

    def _parse_special(self, text: str) -> float | None:
        folded = text.casefold()
        if folded == self.nan_symbol.casefold():
            return float("nan")
        if folded == self.negative_infinity_symbol.casefold():
            return float("-inf")
        pos = self.positive_infinity_symbol.casefold()
        if folded in (pos, self.positive_sign.casefold() + pos):
            return float("inf")
        return None


INVARIANT = NumberFormat()


def generic_parse(s: str, fmt: NumberFormat = INVARIANT) -> float:
    """Parse ``s`` with ``fmt``; raise NumberFormatError when it is not a number."""
    return fmt.parse(s)


def generic_try_parse(s: str | None, fmt: NumberFormat = INVARIANT) -> tuple[bool, float]:
    """Like ``generic_parse`` but returns ``(ok, value)``; value is 0.0 on failure."""
    if not isinstance(s, str):
        return False, 0.0
    try:
        return True, fmt.parse(s)
    except NumberFormatError:
        return False, 0.0
