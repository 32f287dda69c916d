from pyoscmd.domain.entities import DecodedText


def decode(data: bytes | bytearray | memoryview) -> DecodedText:
    """Decodes child output, falling back to U+FFFD replacement on invalid UTF-8."""
    raw = bytes(data)
    try:
        return DecodedText(lossy=False, data=raw.decode("utf-8"))
    except UnicodeDecodeError:
        return DecodedText(lossy=True, data=raw.decode("utf-8", errors="replace"))
