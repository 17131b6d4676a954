"""Factorial of a non-negative integer."""

_FACTORIAL_TABLE_SIZE = 21


def _factorial_table(size: int) -> tuple:
    table = [1]
    for k in range(1, size):
        table.append(table[-1] * k)
    return tuple(table)


_FACTORIALS = _factorial_table(_FACTORIAL_TABLE_SIZE)


def factorial(n: int) -> int:
    r"""Factorial n!.

    Values up to 20! (the largest degree a control polygon realistically
    reaches) are read from a precomputed table. Larger arguments are
    computed exactly by continuing the product from the end of the table.

    Parameters
    ----------
    n : int
        Non-negative integer.

    Returns
    -------
    int
        n!

    Raises
    ------
    ValueError
        If n is negative.

    Examples
    --------
    >>> factorial(0)
    1
    >>> factorial(5)
    120
    """
    n = int(n)

    if n < 0:
        raise ValueError(f"n must be non-negative, got {n}")

    if n < _FACTORIAL_TABLE_SIZE:
        return _FACTORIALS[n]

    result = _FACTORIALS[-1]
    for k in range(_FACTORIAL_TABLE_SIZE, n + 1):
        result *= k
    return result
