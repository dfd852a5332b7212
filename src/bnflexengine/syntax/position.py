"""Position utilities for BNF lines.

AST positions are byte offsets into the line buffer. Editors address
columns either in bytes (Neovim) or in characters; these helpers convert
between the two for UTF-8 lines.

A byte starts a character unless it is a UTF-8 continuation byte
(0b10xxxxxx). Invalid sequences therefore count one character per lead
byte, which keeps both functions total on arbitrary bytes.
"""

__all__ = ["byte_offset", "column_offset"]


def _is_char_start(byte: int) -> bool:
    return byte & 0xC0 != 0x80


def column_offset(line: bytes, pos: int) -> int:
    """Get 0-based character column from byte offset.

    Args:
        line: Line bytes
        pos: Byte offset into line

    Returns:
        Number of characters before ``pos``

    Example:
        >>> line = '"ä" <b>'.encode()
        >>> column_offset(line, 5)  # '<' after a two-byte character
        4

    Note:
        Offsets past the end are clamped to the line length.
    """
    if pos < 0:
        msg = f"Position must be >= 0, got {pos}"
        raise ValueError(msg)
    pos = min(pos, len(line))  # Clamp to line length
    return sum(1 for byte in line[:pos] if _is_char_start(byte))


def byte_offset(line: bytes, column: int) -> int:
    """Get byte offset of a 0-based character column.

    Inverse of :func:`column_offset` for offsets on character boundaries.

    Example:
        >>> byte_offset('"ä" <b>'.encode(), 4)
        5
    """
    if column < 0:
        msg = f"Column must be >= 0, got {column}"
        raise ValueError(msg)
    seen = 0
    for index, byte in enumerate(line):
        if _is_char_start(byte):
            if seen == column:
                return index
            seen += 1
    return len(line)
