import pytest

from patsolve.strings import longest_palindrome, smallest_number, subtract_chars, u_shape


def _unwrap(lines):
    sides = lines[:-1]
    return (
        "".join(line[0] for line in sides)
        + lines[-1]
        + "".join(line[-1] for line in reversed(sides))
    )


def test_u_shape_sample():
    assert u_shape("helloworld!") == ["h   !", "e   d", "l   l", "lowor"]


@pytest.mark.parametrize("text", ["hello", "abcdefgh", "PATest1234567", "x" * 80])
def test_u_shape_invariants(text):
    lines = u_shape(text)
    widths = {len(line) for line in lines}
    assert len(widths) == 1
    assert len(lines) <= len(lines[-1])
    assert _unwrap(lines) == text


def test_u_shape_empty():
    with pytest.raises(ValueError):
        u_shape("")


def test_smallest_number_sample():
    assert smallest_number(["32", "321", "3214", "0229", "87"]) == "22932132143287"


def test_smallest_number_all_zero():
    assert smallest_number(["0", "00"]) == "0"


def test_smallest_number_uses_all_digits():
    segments = ["9", "40", "123", "7"]
    result = smallest_number(segments)
    assert sorted(result) == sorted("".join(segments))
    assert int(result) <= int("".join(segments))
    assert int(result) <= int("".join(reversed(segments)))


def test_longest_palindrome_sample():
    assert longest_palindrome("Is PAT&TAP symmetric?") == 11


def test_longest_palindrome_whole_and_inner():
    assert longest_palindrome("abcba") == len("abcba")
    assert longest_palindrome("xabbay") == len("abba")


def test_longest_palindrome_empty():
    assert longest_palindrome("") == 0


def test_longest_palindrome_with_sentinel_like_chars():
    assert longest_palindrome("^$$^") == len("^$$^")


def test_subtract_chars_removes_all():
    s1, s2 = "They are students.", "aeiou"
    result = subtract_chars(s1, s2)
    assert not set(result) & set(s2)
    remaining = iter(s1)
    assert all(char in remaining for char in result)


def test_subtract_chars_empty_second():
    assert subtract_chars("keep me", "") == "keep me"


def test_subtract_chars_everything():
    assert subtract_chars("abcabc", "cba") == ""