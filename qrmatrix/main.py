"""
Interactive QR code generator.

Prompts for the text and symbol settings, optionally walks through every step
of the construction, prints the result and saves it as a PNG image.
"""

import logging

from .encoding import add_error_correction, add_informations, bytes_to_bits, encode_string, fill_sequence
from .errors import QRError
from .generator import choose_version, make_qr
from .masks import MASK_COUNT
from .matrix import add_data_information, construct_matrix
from .profile import CorrectionLevel, SymbolProfile
from .render import matrix_to_text, save_matrix_as_image


def ask(prompt: str, default: str = "") -> str:
    return input(prompt).strip() or default


def explain_steps(text: str, profile: SymbolProfile):
    """
    Print the intermediate results of the pipeline for one symbol.

    @param text: Input text
    @param profile: Symbol profile in use
    """
    input_bytes = encode_string(text, profile.max_input_length)
    print("\nStep 1: Input bytes (ISO-8859-1).")
    print(input_bytes)
    input("Press Enter to continue...")

    framed = add_informations(input_bytes, profile.length_field_bits)
    print("\nStep 2: Mode indicator and length header added.")
    print(framed)
    input("Press Enter to continue...")

    padded = fill_sequence(framed, profile.data_codewords)
    print("\nStep 3: Padded to the data capacity.")
    print(padded)
    input("Press Enter to continue...")

    codewords = add_error_correction(padded, profile)
    print("\nStep 4: Interleaved data + error correction codewords.")
    print(codewords)
    input("Press Enter to continue...")

    m = construct_matrix(profile, 0)
    print("\nStep 5: Function patterns and format information (mask 0).")
    print(matrix_to_text(m))
    input("Press Enter to continue...")

    add_data_information(m, bytes_to_bits(codewords), 0)
    print("\nStep 6: Data placed and masked (mask 0 shown).")
    print(matrix_to_text(m))
    input("Press Enter to continue...")


def main():
    """
    Main entry point for the QR code generator.

    1. Text input collection
    2. Error correction level, version and mask selection
    3. Optional step-by-step explanation
    4. Mask optimisation and output
    """
    text = input("Enter text to encode: ")
    explain = ask("Would you like to see the step-by-step of the QR code's creation? (y/n): ").lower() == 'y'
    logging.basicConfig(level=logging.DEBUG if explain else logging.WARNING,
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        level = CorrectionLevel.parse(ask("Error correction level (L/M/Q/H) [L]: ", "L"))
        version_text = ask("Version (1-40, blank for the smallest that fits): ")
        version = int(version_text) if version_text else choose_version(len(text.encode("iso-8859-1")), level)
        mask_text = ask(f"Mask (0-{MASK_COUNT - 1}, blank to pick the best): ")
        mask = int(mask_text) if mask_text else None
        filename = ask("Save the image as [qr_output.png]: ", "qr_output.png")

        print(f"Using Version {version} QR Code!")
        if explain:
            explain_steps(text, SymbolProfile(version, level))

        symbol = make_qr(text, version=version, correction_level=level, mask=mask)
    except UnicodeEncodeError:
        print("The text contains characters outside ISO-8859-1.")
        return
    except (QRError, ValueError) as exc:
        print(f"Could not create the QR code: {exc}")
        return

    print(f"\nMask: {symbol.mask} (score {symbol.score})")
    print(matrix_to_text(symbol.matrix, border=2))
    save_matrix_as_image(symbol.matrix, filename)
    print(f"\nQR code saved as: {filename}!")


if __name__ == '__main__':
    main()
