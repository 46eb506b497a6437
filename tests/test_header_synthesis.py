from lice.header import is_current, synthesize
from lice.styles import EXTENSION_STYLES, STYLE_C_LIKE, STYLE_DASH, STYLE_HASH

TEMPLATE = "Copyright X\nAll rights reserved"


def test_hash_style_example():
    assert synthesize(TEMPLATE, STYLE_HASH) == "# Copyright X\n# All rights reserved\n\n"


def test_block_style_wraps_and_separates():
    out = synthesize(TEMPLATE, STYLE_C_LIKE)
    assert out == "/*\n * Copyright X\n * All rights reserved\n */\n\n"


def test_trailing_whitespace_trimmed_and_blank_lines_kept():
    raw = "Line one   \n\nLine three\t\n"
    assert synthesize(raw, STYLE_DASH) == "-- Line one\n-- \n-- Line three\n\n"


def test_crlf_template():
    assert synthesize("A\r\nB\r\n", STYLE_HASH) == "# A\n# B\n\n"


def test_every_style_detects_its_own_header():
    for ext, profile in EXTENSION_STYLES.items():
        header = synthesize(TEMPLATE, profile)
        assert is_current(header, header), ext
        assert is_current(header + "body\n", header), ext
