#!/usr/bin/env python3
"""
Example usage of fast exponentiation with and without a modulus.
Prints a fixed set of examples to stdout.
"""

from fast_power import fast_power, fast_power_mod


def main():
    # Example 1: Fast power without modulus
    print("=== Fast Power (Integer) ===")
    base = 2
    exponent = 10
    print(f"{base}^{exponent} = {fast_power(base, exponent)}")

    # Example 2: Fast power with modulus
    print("\n=== Fast Power Mod (Modular Exponentiation) ===")
    base = 2
    exponent = 10
    modulus = 1000
    print(f"({base}^{exponent}) % {modulus} = {fast_power_mod(base, exponent, modulus)}")

    # Example 3: Larger numbers with modulus
    base = 12345
    exponent = 67890
    modulus = 1000000007  # Common large prime
    print(f"({base}^{exponent}) % {modulus} = {fast_power_mod(base, exponent, modulus)}")

    return 0


if __name__ == "__main__":
    main()
