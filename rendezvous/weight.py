from .validation import MASK64

# MurmurHash3 fmix64 constants
FMIX_C1 = 0xFF51AFD7ED558CCD
FMIX_C2 = 0xC4CEB9FE1A85EC53


def weight(x: int, y: int) -> int:
    """Combine two 64-bit values into a scrambled 64-bit weight.

    The inputs are XORed, so ``weight(x, y) == weight(y, x)``, and the result
    is run through the MurmurHash3 64-bit finalizer.
    """
    acc = (x ^ y) & MASK64
    acc ^= acc >> 33
    acc = (acc * FMIX_C1) & MASK64
    acc ^= acc >> 33
    acc = (acc * FMIX_C2) & MASK64
    acc ^= acc >> 33
    return acc
