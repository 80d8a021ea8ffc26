"""Number formatting, base conversion and small arithmetic puzzles."""

from __future__ import annotations

import math
from dataclasses import dataclass

DIGIT_WORDS = (
    "zero", "one", "two", "three", "four",
    "five", "six", "seven", "eight", "nine",
)

_MARS_DIGITS = "0123456789ABC"
_SUITS = "SHCD"
_DECK_SIZE = 54
_KNUTS_PER_SICKLE = 29
_SICKLES_PER_GALLEON = 17


def format_sum(a: int, b: int) -> str:
    """Return ``a + b`` with digits grouped in threes by commas."""
    return f"{a + b:,}"


def spell_digit_sum(digits: str) -> str:
    """Spell out, digit by digit in English, the sum of the digits of ``digits``."""
    if not digits.isdigit():
        raise ValueError(f"not a string of digits: {digits!r}")
    total = sum(int(char) for char in digits)
    return " ".join(DIGIT_WORDS[int(char)] for char in str(total))


def _digit_value(char: str) -> int:
    return int(char, 36)


def _value_in_radix(text: str, radix: int) -> int:
    total = 0
    for char in text:
        total = total * radix + _digit_value(char)
    return total


def find_radix(n1: str, n2: str, tag: int, radix: int) -> int | None:
    """Find the radix that makes the other number equal to the tagged one.

    ``tag`` says which of ``n1`` and ``n2`` is written in ``radix``.
    Returns ``None`` when no radix works.
    """
    if tag not in (1, 2):
        raise ValueError(f"tag must be 1 or 2, not {tag}")
    known, unknown = (n1, n2) if tag == 1 else (n2, n1)
    target = _value_in_radix(known, radix)
    smallest = max(max(_digit_value(char) for char in unknown) + 1, 2)
    current = _value_in_radix(unknown, radix)
    if current == target:
        return smallest if len(unknown) == 1 else radix

    low = smallest
    high = radix if current > target else max(2, target + 1)
    while True:
        mid = (low + high) // 2
        value = _value_in_radix(unknown, mid)
        if value == target:
            return max(2, target + 1) if mid > target else mid
        if value < target:
            low = mid + 1
        else:
            high = mid - 1
        if high < low:
            return None


def is_prime(n: int) -> bool:
    """Return whether ``n`` is a prime number."""
    if n < 2:
        return False
    return all(n % divisor for divisor in range(2, math.isqrt(n) + 1))


def _reverse_in_radix(number: int, radix: int) -> int:
    result = 0
    while number:
        number, digit = divmod(number, radix)
        result = result * radix + digit
    return result


def is_reversible_prime(number: int, radix: int) -> bool:
    """Return whether ``number`` and its digit reversal in ``radix`` are both prime."""
    return is_prime(number) and is_prime(_reverse_in_radix(number, radix))


def base_digits(number: int, base: int) -> list[int]:
    """Return the digits of ``number`` in ``base``, most significant first."""
    if number < 0:
        raise ValueError("number must not be negative")
    if base < 2:
        raise ValueError("base must be at least 2")
    digits = []
    while number:
        number, digit = divmod(number, base)
        digits.append(digit)
    return digits[::-1] or [0]


def palindrome_in_base(number: int, base: int) -> tuple[bool, list[int]]:
    """Return whether ``number`` reads the same both ways in ``base``, and its digits."""
    digits = base_digits(number, base)
    return digits == digits[::-1], digits


def double_number(number: str) -> tuple[bool, str]:
    """Double a decimal number; report whether the result permutes its digits."""
    if not number.isdigit():
        raise ValueError(f"not a string of digits: {number!r}")
    width = len(number)
    doubled = str(int(number) * 2).zfill(width)
    if len(doubled) > width:
        return False, doubled
    return sorted(number) == sorted(doubled), doubled


def palindromic_steps(number: str, max_steps: int) -> tuple[str, int]:
    """Add the reversal until a palindrome appears or ``max_steps`` are used."""
    if not number.isdigit():
        raise ValueError(f"not a string of digits: {number!r}")
    steps = 0
    while number != number[::-1] and steps < max_steps:
        number = str(int(number) + int(number[::-1])).zfill(len(number))
        steps += 1
    return number, steps


def _mars_pair(value: int) -> str:
    if not 0 <= value < 13 * 13:
        raise ValueError(f"color component out of range: {value}")
    high, low = divmod(value, 13)
    return _MARS_DIGITS[high] + _MARS_DIGITS[low]


def mars_color(red: int, green: int, blue: int) -> str:
    """Return the colour written with two base-13 digits per component."""
    return "#" + "".join(_mars_pair(value) for value in (red, green, blue))


def _initial_deck() -> list[str]:
    deck = [f"{suit}{rank}" for suit in _SUITS for rank in range(1, 14)]
    return deck + ["J1", "J2"]


def shuffle_cards(times: int, permutation: list[int]) -> list[str]:
    """Shuffle the 54-card deck ``times`` times; card i moves to ``permutation[i]``."""
    if sorted(permutation) != list(range(1, _DECK_SIZE + 1)):
        raise ValueError("permutation must hold each of 1..54 exactly once")
    deck = _initial_deck()
    for _ in range(times):
        shuffled = [""] * _DECK_SIZE
        for card, position in zip(deck, permutation):
            shuffled[position - 1] = card
        deck = shuffled
    return deck


def count_ones(number: int) -> int:
    """Count the digit 1 in all the decimal numbers from 1 to ``number``."""
    if number < 0:
        raise ValueError("number must not be negative")
    total = 0
    factor = 1
    while factor <= number:
        high, rest = divmod(number, factor * 10)
        digit, low = divmod(rest, factor)
        total += high * factor
        if digit > 1:
            total += factor
        elif digit == 1:
            total += low + 1
        factor *= 10
    return total


@dataclass(frozen=True)
class Money:
    """An amount in Galleons, Sickles and Knuts."""

    galleon: int = 0
    sickle: int = 0
    knut: int = 0

    @classmethod
    def parse(cls, text: str) -> Money:
        """Parse ``Galleon.Sickle.Knut``."""
        parts = text.strip().split(".")
        if len(parts) != 3:
            raise ValueError(f"expected Galleon.Sickle.Knut, got {text!r}")
        try:
            galleon, sickle, knut = (int(part) for part in parts)
        except ValueError as exc:
            raise ValueError(f"expected Galleon.Sickle.Knut, got {text!r}") from exc
        return cls(galleon, sickle, knut)

    def __add__(self, other: object) -> Money:
        if not isinstance(other, Money):
            return NotImplemented
        knut = self.knut + other.knut
        sickle = self.sickle + other.sickle + knut // _KNUTS_PER_SICKLE
        galleon = self.galleon + other.galleon + sickle // _SICKLES_PER_GALLEON
        return Money(galleon, sickle % _SICKLES_PER_GALLEON, knut % _KNUTS_PER_SICKLE)

    def __str__(self) -> str:
        return f"{self.galleon}.{self.sickle}.{self.knut}"


def prime_factors(number: int) -> list[tuple[int, int]]:
    """Return ``(prime, exponent)`` pairs of ``number`` in increasing order."""
    if number < 1:
        raise ValueError("number must be positive")
    factors = []
    remaining = number
    divisor = 2
    while divisor * divisor <= remaining:
        if remaining % divisor == 0:
            count = 0
            while remaining % divisor == 0:
                remaining //= divisor
                count += 1
            factors.append((divisor, count))
        divisor += 1
    if remaining > 1:
        factors.append((remaining, 1))
    return factors


def format_factorization(number: int) -> str:
    """Write ``number`` as ``N=p1^k1*p2*...``."""
    terms = [
        str(prime) if exponent == 1 else f"{prime}^{exponent}"
        for prime, exponent in prime_factors(number)
    ]
    return f"{number}={'*'.join(terms) or number}"