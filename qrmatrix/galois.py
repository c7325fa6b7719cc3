"""
Reed-Solomon error correction over GF(256).

QR codes use the field generated by x^8 + x^4 + x^3 + x^2 + 1 (0x11D) with
alpha = 2 and the generator polynomial (x - a^0)(x - a^1)...(x - a^(n-1)).
These are the reedsolo defaults, so the library does the field arithmetic.
"""

from functools import lru_cache

import reedsolo

PRIMITIVE_POLYNOMIAL = 0x11D
GENERATOR = 2
FIRST_CONSECUTIVE_ROOT = 0


@lru_cache(maxsize=None)
def _codec(ecc_length: int) -> reedsolo.RSCodec:
    return reedsolo.RSCodec(
        ecc_length, fcr=FIRST_CONSECUTIVE_ROOT, prim=PRIMITIVE_POLYNOMIAL, generator=GENERATOR)


class GaloisFieldCodec:
    """
    Compute the error correction codewords of a data block.
    """

    def encode(self, data_block, ecc_length: int) -> list[int]:
        """
        Divide data_block * x^ecc_length by the generator polynomial.

        @param data_block: Data codewords, highest degree coefficient first
        @param ecc_length: Number of error correction codewords to produce
        @return: Remainder coefficients, highest degree first
        """
        if ecc_length <= 0:
            return []
        full = _codec(ecc_length).encode(bytes(data_block))
        return list(full[-ecc_length:])

    def generator_polynomial(self, ecc_length: int) -> list[int]:
        """
        Build the degree ecc_length generator polynomial.

        @param ecc_length: Degree of the polynomial
        @return: Coefficients, highest degree first (leading coefficient is 1)
        """
        reedsolo.init_tables(PRIMITIVE_POLYNOMIAL, GENERATOR)
        return list(reedsolo.rs_generator_poly(ecc_length, FIRST_CONSECUTIVE_ROOT, GENERATOR))
