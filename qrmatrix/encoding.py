"""
Byte-mode data encoding.

Turns a payload into the final bit sequence of a symbol: ISO-8859-1
conversion, mode and length header, padding, Reed-Solomon blocks,
interleaving and bit serialisation.
"""

import logging

from .errors import CapacityExceededError, InvalidParameterError
from .galois import GaloisFieldCodec
from .profile import SymbolProfile

logger = logging.getLogger(__name__)

# Byte mode indicator
MODE_INDICATOR = 0b0100

PAD_CODEWORDS = (0xEC, 0x11)


def to_latin1(payload) -> bytes:
    """
    Convert a payload to ISO-8859-1 bytes.

    @param payload: Text or bytes-like object
    @return: One byte per character
    """
    if isinstance(payload, str):
        try:
            return payload.encode("iso-8859-1")
        except UnicodeEncodeError as exc:
            raise InvalidParameterError(
                f"Character {payload[exc.start]!r} at position {exc.start} is not in ISO-8859-1") from exc
    if isinstance(payload, (bytes, bytearray, memoryview)):
        return bytes(payload)
    raise InvalidParameterError(f"Payload must be str or bytes, got {type(payload).__name__}")


def encode_string(payload, max_length: int, strict: bool = False) -> list[int]:
    """
    Convert the payload to codewords, truncated to the symbol capacity.

    @param payload: Text or bytes to encode
    @param max_length: Maximum number of bytes the symbol can hold
    @param strict: Raise CapacityExceededError instead of truncating
    @return: List of byte values
    """
    data = to_latin1(payload)
    if len(data) > max_length:
        if strict:
            raise CapacityExceededError(f"Payload is {len(data)} bytes, the symbol holds {max_length}")
        logger.warning("Payload truncated from %d to %d bytes", len(data), max_length)
        data = data[:max_length]
    return list(data)


def add_informations(input_bytes, length_bits: int = 8) -> list[int]:
    """
    Prepend the mode indicator and character count to the payload.

    The 4-bit mode shifts everything after it by half a byte, so the stream is
    rebuilt nibble by nibble: each output byte is the low nibble of one unit
    followed by the high nibble of the next. The trailing half byte left over
    is the 4-bit terminator.

    @param input_bytes: Payload codewords
    @param length_bits: Width of the character count field (8 or 16)
    @return: Header and payload packed into whole bytes
    """
    length = len(input_bytes)
    nibbles = [MODE_INDICATOR]
    for shift in range(length_bits - 4, -1, -4):
        nibbles.append((length >> shift) & 0xF)
    for byte in input_bytes:
        nibbles.append(byte >> 4)
        nibbles.append(byte & 0xF)
    nibbles.append(0)
    return [(nibbles[i] << 4) | nibbles[i + 1] for i in range(0, len(nibbles), 2)]


def fill_sequence(encoded_data, final_length: int) -> list[int]:
    """
    Pad the codewords with alternating 0xEC, 0x11 up to final_length.

    @param encoded_data: Codewords produced so far
    @param final_length: Target number of data codewords
    @return: New list of max(final_length, len(encoded_data)) codewords
    """
    padded = list(encoded_data)
    for i in range(len(padded), final_length):
        padded.append(PAD_CODEWORDS[(i - len(encoded_data)) % 2])
    return padded


def split_blocks(data_cw, profile: SymbolProfile) -> list[list[int]]:
    """Cut the padded data codewords into the profile's Reed-Solomon blocks."""
    blocks = []
    start = 0
    for length in profile.blocks.block_lengths():
        blocks.append(list(data_cw[start:start + length]))
        start += length
    return blocks


def interleave(blocks) -> list[int]:
    """
    Read blocks column by column, skipping blocks that are already exhausted.
    """
    longest = max((len(b) for b in blocks), default=0)
    return [block[i] for i in range(longest) for block in blocks if i < len(block)]


def add_error_correction(encoded_data, profile: SymbolProfile, codec: GaloisFieldCodec = None) -> list[int]:
    """
    Compute the error correction of every block and interleave the result.

    @param encoded_data: Padded data codewords
    @param profile: Symbol profile giving the block layout
    @param codec: Reed-Solomon codec, a fresh one by default
    @return: Interleaved data codewords followed by interleaved ECC codewords
    """
    codec = codec or GaloisFieldCodec()
    data_blocks = split_blocks(encoded_data, profile)
    ecc_blocks = [codec.encode(block, profile.ecc_per_block) for block in data_blocks]
    return interleave(data_blocks) + interleave(ecc_blocks)


def bytes_to_bits(data) -> list[bool]:
    """Expand bytes to booleans, most significant bit first."""
    return [bool((byte >> (7 - i)) & 1) for byte in data for i in range(8)]


def bits_to_bytes(bits) -> list[int]:
    """Pack booleans back into bytes, most significant bit first."""
    result = []
    for i in range(0, len(bits), 8):
        value = 0
        for bit in bits[i:i + 8]:
            value = (value << 1) | int(bool(bit))
        result.append(value)
    return result


def encode_codewords(payload, profile: SymbolProfile, strict: bool = False) -> list[int]:
    """
    Run the whole encoding pipeline up to the interleaved codewords.

    @param payload: Text or bytes to encode
    @param profile: Symbol profile of the target symbol
    @param strict: Refuse to truncate oversized payloads
    @return: profile.total_codewords codewords
    """
    input_bytes = encode_string(payload, profile.max_input_length, strict)
    framed = add_informations(input_bytes, profile.length_field_bits)
    padded = fill_sequence(framed, profile.data_codewords)
    return add_error_correction(padded, profile)


def byte_mode_encoding(payload, profile: SymbolProfile, strict: bool = False) -> list[bool]:
    """
    Encode a payload into the bit sequence placed in the matrix.

    @param payload: Text or bytes to encode
    @param profile: Symbol profile of the target symbol
    @param strict: Refuse to truncate oversized payloads
    @return: 8 * profile.total_codewords booleans
    """
    return bytes_to_bits(encode_codewords(payload, profile, strict))
