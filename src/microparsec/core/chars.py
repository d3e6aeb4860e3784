ASCII_DIGITS = frozenset("0123456789")

# Unicode White_Space property. str.isspace() differs from it: it also
# accepts the information separators U+001C..U+001F.
WHITE_SPACE = frozenset(
    chr(cp) for cp in (
        *range(0x09, 0x0E), 0x20, 0x85, 0xA0, 0x1680, *range(0x2000, 0x200B),
        0x2028, 0x2029, 0x202F, 0x205F, 0x3000,
    )
)
