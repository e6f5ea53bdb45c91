""" Decode the escape forms allowed in output text. """
from syntax import ESC, HEX_PAIR_RX, OUTPUT_ENCODING


def decode_escapes(text: str) -> bytes:
    """
    Rewrite `\\033` to the ESC byte and `\\xHH` to the byte HH.
    Any other backslash is copied through unchanged; plain text is
    encoded as UTF-8.
    """
    result = bytearray()
    i = 0
    n = len(text)

    while i < n:
        if text[i] != "\\":
            result += text[i].encode(OUTPUT_ENCODING)
            i += 1
            continue

        if text[i + 1:i + 4] == "033":
            result += ESC
            i += 4
            continue

        if text[i + 1:i + 2] == "x" and HEX_PAIR_RX.match(text[i + 2:i + 4]):
            result.append(int(text[i + 2:i + 4], 16))
            i += 4
            continue

        result += b"\\"
        i += 1

    return bytes(result)
