"""Pure domain functions: integer validation, GCD, primality.

Nothing here touches I/O or configuration; every call is independent.
"""
__all__ = ["integers", "gcd", "primes"]
