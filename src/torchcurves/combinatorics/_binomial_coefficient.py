from ._factorial import factorial


def binomial_coefficient(n: int, k: int) -> int:
    r"""
    Binomial coefficient.

    Computes C(n, k) = n! / (k! * (n-k)!) in exact integer arithmetic.

    Parameters
    ----------
    n : int
        Number of items to choose from. Must be non-negative.
    k : int
        Number of items to choose. Must satisfy 0 <= k <= n.

    Returns
    -------
    int
        The binomial coefficient C(n, k).

    Raises
    ------
    ValueError
        If k is outside [0, n].

    Examples
    --------
    >>> [binomial_coefficient(3, k) for k in range(4)]
    [1, 3, 3, 1]
    """
    n = int(n)
    k = int(k)

    if k < 0 or k > n:
        raise ValueError(f"k must satisfy 0 <= k <= n, got n={n}, k={k}")

    return factorial(n) // (factorial(k) * factorial(n - k))
