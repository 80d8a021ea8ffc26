from patsolve.polynomials import add_polynomials, format_polynomial, multiply_polynomials

A = {1: 2.4, 0: 3.2}
B = {2: 1.5, 1: 0.5}


def test_add_sample():
    assert format_polynomial(add_polynomials(A, B)) == "3 2 1.5 1 2.9 0 3.2"


def test_multiply_sample():
    assert format_polynomial(multiply_polynomials(A, B)) == "3 3 3.6 2 6.0 1 1.6"


def test_add_is_commutative():
    assert add_polynomials(A, B) == add_polynomials(B, A)


def test_add_cancels_to_empty():
    negated = {e: -c for e, c in A.items()}
    assert add_polynomials(A, negated) == {}
    assert format_polynomial(add_polynomials(A, negated)) == "0"


def test_add_empty_is_identity():
    assert add_polynomials(A, {}) == A


def test_multiply_by_one_is_identity():
    assert multiply_polynomials(A, {0: 1.0}) == A


def test_multiply_by_empty():
    assert multiply_polynomials(A, {}) == {}


def test_multiply_drops_tiny_terms():
    assert multiply_polynomials({0: 0.3}, {0: 0.3}) == {}


def test_result_is_descending():
    product = multiply_polynomials({0: 1.0, 3: 2.0}, {1: 1.0, 0: 1.0})
    assert list(product) == sorted(product, reverse=True)


def test_format_orders_terms():
    assert format_polynomial({0: 1.0, 2: 2.0}) == "2 2 2.0 0 1.0"