import math

import pytest

from patsolve.numbers import (
    Money,
    base_digits,
    count_ones,
    double_number,
    find_radix,
    format_factorization,
    format_sum,
    is_prime,
    is_reversible_prime,
    mars_color,
    palindrome_in_base,
    palindromic_steps,
    prime_factors,
    shuffle_cards,
    spell_digit_sum,
)


def test_format_sum_worked_example():
    assert format_sum(-1000000, 9) == "-999,991"


@pytest.mark.parametrize("a,b", [(0, 0), (123, 877), (-5, 2), (999999, 1), (1000000, -1)])
def test_format_sum_round_trip(a, b):
    text = format_sum(a, b)
    assert int(text.replace(",", "")) == a + b
    groups = text.lstrip("-").split(",")
    assert all(len(group) == 3 for group in groups[1:])
    assert 1 <= len(groups[0]) <= 3


def test_spell_digit_sum():
    assert spell_digit_sum("0") == "zero"
    assert spell_digit_sum("12345") == "one five"


def test_spell_digit_sum_maps_back():
    words = spell_digit_sum("99999999").split()
    names = ["zero", "one", "two", "three", "four", "five", "six", "seven", "eight", "nine"]
    assert int("".join(str(names.index(word)) for word in words)) == 9 * 8


def test_spell_digit_sum_rejects_non_digits():
    with pytest.raises(ValueError):
        spell_digit_sum("12a")


def test_find_radix_sample():
    assert find_radix("6", "110", 1, 10) == 2


def test_find_radix_impossible():
    assert find_radix("1", "ab", 1, 2) is None


def test_find_radix_equal_strings_keep_radix():
    assert find_radix("10", "10", 1, 10) == 10


def test_find_radix_round_trip():
    unknown = "".join(str(d) for d in base_digits(100, 7))
    assert find_radix("100", unknown, 1, 10) == 7
    assert find_radix(unknown, "100", 2, 10) == 7


def test_find_radix_bad_tag():
    with pytest.raises(ValueError):
        find_radix("1", "1", 3, 10)


@pytest.mark.parametrize("n", [2, 3, 5, 7, 11, 13, 97])
def test_is_prime_true(n):
    assert is_prime(n)


@pytest.mark.parametrize("n", [1, 4, 9, 15, 91, 100])
def test_is_prime_false(n):
    assert not is_prime(n)


def test_is_reversible_prime():
    assert is_reversible_prime(73, 10)
    assert is_reversible_prime(23, 2)
    assert not is_reversible_prime(23, 10)


@pytest.mark.parametrize("number,base", [(0, 2), (1, 10), (255, 16), (1000, 7), (27, 2)])
def test_base_digits_round_trip(number, base):
    digits = base_digits(number, base)
    assert sum(d * base ** i for i, d in enumerate(reversed(digits))) == number
    assert all(0 <= d < base for d in digits)


def test_base_digits_rejects_bad_base():
    with pytest.raises(ValueError):
        base_digits(5, 1)


def test_palindrome_in_base():
    assert palindrome_in_base(27, 2) == (True, base_digits(27, 2))
    flag, digits = palindrome_in_base(121, 5)
    assert flag is (digits == digits[::-1])
    assert palindrome_in_base(0, 10) == (True, [0])


def test_double_number_sample():
    assert double_number("1234567899") == (True, "2469135798")


def test_double_number_with_carry():
    flag, doubled = double_number("999")
    assert flag is False
    assert int(doubled) == 2 * 999


def test_double_number_invariant():
    flag, doubled = double_number("12")
    assert int(doubled) == 24
    assert flag is False


def test_palindromic_steps_sample():
    assert palindromic_steps("67", 3) == ("484", 2)


def test_palindromic_steps_limit():
    number, steps = palindromic_steps("69", 1)
    assert steps == 1
    assert int(number) == 69 + 96


def test_palindromic_steps_already_palindrome():
    assert palindromic_steps("121", 5) == ("121", 0)


def test_mars_color_sample():
    assert mars_color(15, 43, 71) == "#123456"
    assert mars_color(0, 0, 0) == "#000000"


@pytest.mark.parametrize("rgb", [(168, 0, 100), (13, 26, 1), (5, 167, 12)])
def test_mars_color_round_trip(rgb):
    text = mars_color(*rgb)
    assert text.startswith("#") and len(text) == 7
    assert tuple(int(text[i:i + 2], 13) for i in (1, 3, 5)) == rgb


def test_mars_color_out_of_range():
    with pytest.raises(ValueError):
        mars_color(169, 0, 0)


def test_shuffle_identity():
    deck = shuffle_cards(3, list(range(1, 55)))
    assert deck[0] == "S1"
    assert deck[-1] == "J2"
    assert deck == shuffle_cards(0, list(range(1, 55)))


def test_shuffle_cycle_returns_to_start():
    shift = [(i + 1) % 54 + 1 for i in range(54)]
    assert shuffle_cards(54, shift) == shuffle_cards(0, shift)
    once = shuffle_cards(1, shift)
    assert sorted(once) == sorted(shuffle_cards(0, shift))
    assert once[1] == "S1"


def test_shuffle_rejects_bad_permutation():
    with pytest.raises(ValueError):
        shuffle_cards(1, [1] * 54)


def test_count_ones_sample():
    assert count_ones(12) == 5


@pytest.mark.parametrize("n", [1, 9, 10, 11, 99, 100, 101, 199, 1000, 2345])
def test_count_ones_increment(n):
    assert count_ones(n) - count_ones(n - 1) == str(n).count("1")


def test_money_sample():
    assert str(Money.parse("3.2.1") + Money.parse("10.16.27")) == "14.1.28"


def test_money_round_trip():
    assert str(Money.parse("7.16.28")) == "7.16.28"
    assert Money.parse("7.16.28") + Money() == Money.parse("7.16.28")


def test_money_carries():
    total = Money(0, 16, 28) + Money(0, 0, 1)
    assert total == Money(1, 0, 0)


def test_money_parse_rejects_garbage():
    with pytest.raises(ValueError):
        Money.parse("1.2")
    with pytest.raises(ValueError):
        Money.parse("a.b.c")


def test_factorization_sample():
    assert format_factorization(97532468) == "97532468=2^2*11*17*101*1291"
    assert format_factorization(1) == "1=1"


@pytest.mark.parametrize("n", [2, 12, 360, 9973, 1024, 999999])
def test_prime_factors_product(n):
    factors = prime_factors(n)
    assert math.prod(p ** e for p, e in factors) == n
    assert all(is_prime(p) for p, _ in factors)
    assert [p for p, _ in factors] == sorted(p for p, _ in factors)


def test_prime_factors_rejects_zero():
    with pytest.raises(ValueError):
        prime_factors(0)