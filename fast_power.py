"""
Fast (binary) exponentiation with and without a modulus.

Both loops scan the exponent right-to-left (LSB first): multiply the
accumulator when the current bit is set, square the base every iteration.
The modular loop reduces exact products, so any modulus is handled. The
plain loop wraps its base and every product to WORD_BITS two's-complement,
matching a machine with 64-bit signed registers.
"""

import logging

logger = logging.getLogger(__name__)

# Simulated register width
WORD_BITS = 64


def wrap(value, bits=WORD_BITS):
    """
    Wrap an integer to a signed two's-complement value of the given width.

    Args:
        value (int): Any integer
        bits (int): Register width in bits

    Returns:
        int: value reduced into [-2^(bits-1), 2^(bits-1))
    """
    if bits < 2:
        raise ValueError("Register width must be at least 2 bits")

    mask = (1 << bits) - 1
    value &= mask
    if value & (1 << (bits - 1)):  # Sign bit set
        value -= 1 << bits
    return value


def truncated_mod(value, modulus):
    """Remainder with the sign of the dividend, like a hardware divider."""
    remainder = abs(value) % modulus
    return -remainder if value < 0 else remainder


def fast_power_mod(base, exponent, modulus):
    """
    Compute (base^exponent) % modulus with binary exponentiation.

    The base is reduced before the loop and both products are reduced on
    every step, so intermediates stay below modulus^2.

    Args:
        base (int): Base value
        exponent (int): Non-negative exponent
        modulus (int): Modulus, at least 1

    Returns:
        int: base^exponent mod modulus, in [0, modulus) for non-negative base
    """
    if modulus < 1:
        raise ValueError("Modulus must be a positive integer")
    if exponent < 0:
        raise ValueError("Negative exponents not supported")
    if modulus == 1:
        return 0  # Every integer is 0 mod 1

    base = truncated_mod(base, modulus)
    result = 1
    mult_counter = 0
    while exponent > 0:
        if exponent & 1:
            result = truncated_mod(result * base, modulus)
            mult_counter += 1
        base = truncated_mod(base * base, modulus)
        mult_counter += 1
        exponent >>= 1

    logger.debug("fast_power_mod: %d multiplications (mod %d)", mult_counter, modulus)
    return result


def fast_power(base, exponent, bits=WORD_BITS):
    """
    Compute base^exponent with binary exponentiation and no reduction.

    Overflow wraps silently at the register width. Use fast_power_checked
    when the caller needs to know.
    """
    if exponent < 0:
        raise ValueError("Negative exponents not supported")

    base = wrap(base, bits)
    result = 1
    mult_counter = 0
    while exponent > 0:
        if exponent & 1:
            result = wrap(result * base, bits)
            mult_counter += 1
        base = wrap(base * base, bits)
        mult_counter += 1
        exponent >>= 1

    logger.debug("fast_power: %d multiplications", mult_counter)
    return result


def fast_power_checked(base, exponent, bits=WORD_BITS):
    """
    Like fast_power, but also report whether the true result overflowed.

    Returns:
        tuple: (wrapped result, overflowed flag)
    """
    result = fast_power(base, exponent, bits)

    if abs(base) <= 1:
        overflowed = False  # Powers of 0, 1 and -1 are 0, 1 or -1
    elif exponent >= bits:
        overflowed = True  # |base|^exponent >= 2^bits
    else:
        overflowed = base ** exponent != result
    if overflowed:
        logger.debug("fast_power_checked: result exceeds %d-bit range", bits)
    return result, overflowed
