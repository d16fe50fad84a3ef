"""Number-theory helpers: powers, primes, factorisation and small sequences."""

from __future__ import annotations

import math
from collections.abc import Sequence

MOD = 1_000_000_007

_ROMAN = (
    (1000, "M"),
    (900, "CM"),
    (500, "D"),
    (400, "CD"),
    (100, "C"),
    (90, "XC"),
    (50, "L"),
    (40, "XL"),
    (10, "X"),
    (9, "IX"),
    (5, "V"),
    (4, "IV"),
    (1, "I"),
)


def mod_pow(base: int, exponent: int, modulus: int = MOD) -> int:
    """Return ``base ** exponent % modulus`` by binary exponentiation.

    Negative bases give a non-negative result.
    """
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    if modulus < 1:
        raise ValueError("modulus must be positive")
    result = 1 % modulus
    base %= modulus
    while exponent:
        if exponent & 1:
            result = result * base % modulus
        base = base * base % modulus
        exponent >>= 1
    return result


def is_prime(n: int) -> bool:
    """Return True if ``n`` is prime, testing divisors of the form 6k +/- 1."""
    if n <= 1:
        return False
    if n <= 3:
        return True
    if n % 2 == 0 or n % 3 == 0:
        return False
    i = 5
    while i * i <= n:
        if n % i == 0 or n % (i + 2) == 0:
            return False
        i += 6
    return True


def chinese_remainder(moduli: Sequence[int], remainders: Sequence[int]) -> int:
    """Return the smallest positive x with ``x % m == r`` for each pair.

    Searches upward from 1. Raises ValueError if the lists differ in length,
    a modulus is not positive, or no such x exists.
    """
    if len(moduli) != len(remainders):
        raise ValueError("moduli and remainders must have the same length")
    if any(m < 1 for m in moduli):
        raise ValueError("moduli must be positive")
    limit = math.lcm(*moduli) if moduli else 1
    for x in range(1, limit + 1):
        if all(x % m == r for m, r in zip(moduli, remainders)):
            return x
    raise ValueError("the congruences have no common solution")


def power(base: int, exponent: int) -> int:
    """Return ``base ** exponent`` by repeated squaring."""
    if exponent < 0:
        raise ValueError("exponent must not be negative")
    if exponent == 0:
        return 1
    if exponent == 1:
        return base
    half = power(base, exponent // 2)
    return base * half * half if exponent % 2 else half * half


def fibonacci(count: int) -> list[int]:
    """Return the first ``count`` Fibonacci numbers, starting 1, 1, 2."""
    numbers: list[int] = []
    a, b = 1, 0
    for _ in range(count):
        a, b = b, a + b
        numbers.append(b)
    return numbers


def gcd(a: int, b: int) -> int:
    """Return the greatest common divisor of two integers (never negative)."""
    while a:
        a, b = b % a, a
    return abs(b)


def count_primes(limit: int) -> int:
    """Return how many primes are less than or equal to ``limit``."""
    return sum(1 for n in range(2, limit + 1) if is_prime(n))


def is_leap_year(year: int) -> bool:
    """Return True for Gregorian leap years."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def sieve(limit: int) -> list[int]:
    """Return every prime below ``limit`` using the sieve of Eratosthenes."""
    if limit < 2:
        return []
    flags = [True] * limit
    flags[0] = flags[1] = False
    for i in range(2, math.isqrt(limit - 1) + 1):
        if flags[i]:
            flags[i * i :: i] = [False] * len(range(i * i, limit, i))
    return [n for n, prime in enumerate(flags) if prime]


def smallest_prime_factors(limit: int) -> list[int]:
    """Return a table whose entry n is the smallest prime factor of n.

    The table covers ``0..limit-1``; entries 0 and 1 are 0 and 1.
    """
    spf = list(range(max(limit, 0)))
    for i in range(2, math.isqrt(max(limit - 1, 0)) + 1):
        if spf[i] == i:
            for j in range(i * i, limit, i):
                if spf[j] == j:
                    spf[j] = i
    return spf


def prime_factors(n: int, spf: Sequence[int] | None = None) -> list[int]:
    """Return the prime factors of ``n`` in non-decreasing order, with repeats.

    Uses a smallest-prime-factor table, built when not given. Raises
    ValueError if ``n`` is below one or beyond the table.
    """
    if n < 1:
        raise ValueError("n must be positive")
    table = smallest_prime_factors(n + 1) if spf is None else spf
    if n >= len(table):
        raise ValueError("n is beyond the factor table")
    factors: list[int] = []
    while n != 1:
        factor = table[n]
        factors.append(factor)
        n //= factor
    return factors


def nth_ugly_number(n: int) -> int:
    """Return the n-th number whose only prime factors are 2, 3 and 5.

    The sequence starts with 1.
    """
    if n < 1:
        raise ValueError("n must be positive")
    ugly = [1]
    i2 = i3 = i5 = 0
    while len(ugly) < n:
        nxt = min(ugly[i2] * 2, ugly[i3] * 3, ugly[i5] * 5)
        ugly.append(nxt)
        if nxt == ugly[i2] * 2:
            i2 += 1
        if nxt == ugly[i3] * 3:
            i3 += 1
        if nxt == ugly[i5] * 5:
            i5 += 1
    return ugly[n - 1]


def is_palindrome_number(n: int) -> bool:
    """Return True if the decimal digits of ``n`` read the same both ways.

    Negative numbers are not palindromes.
    """
    if n < 0:
        return False
    digits = []
    while n > 0:
        digits.append(n % 10)
        n //= 10
    return digits == digits[::-1]


def collatz_sequence(start: int) -> list[int]:
    """Return the Collatz sequence from ``start`` down to and including 1."""
    if start < 1:
        raise ValueError("start must be positive")
    sequence = [start]
    while start != 1:
        start = start // 2 if start % 2 == 0 else 3 * start + 1
        sequence.append(start)
    return sequence


def to_roman(number: int) -> str:
    """Return ``number`` in Roman numerals; 0 gives an empty string."""
    if number < 0:
        raise ValueError("number must not be negative")
    parts = []
    for value, symbol in _ROMAN:
        count, number = divmod(number, value)
        parts.append(symbol * count)
    return "".join(parts)