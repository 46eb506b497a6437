from lice.header import Outcome, is_current, replace, synthesize
from lice.styles import STYLE_C_LIKE, STYLE_DOUBLE_SLASH, STYLE_HASH

TEMPLATE = "Copyright X\nAll rights reserved"


def test_python_shebang_example():
    header = synthesize(TEMPLATE, STYLE_HASH)
    new, outcome = replace("#!/usr/bin/env python\nprint(1)\n", header, STYLE_HASH)
    assert new == "#!/usr/bin/env python\n# Copyright X\n# All rights reserved\n\nprint(1)\n"
    assert outcome is Outcome.INSERTED


def test_line_style_replaces_stale_header():
    header = synthesize(TEMPLATE, STYLE_DOUBLE_SLASH)
    content = "// Copyright Old\n// Old terms\n\nfn main() {}\n"
    new, outcome = replace(content, header, STYLE_DOUBLE_SLASH)
    assert new == header + "fn main() {}\n"
    assert outcome is Outcome.UPDATED


def test_line_style_only_one_separator_consumed():
    header = synthesize(TEMPLATE, STYLE_HASH)
    content = "# old\n\n\nimport os\n"
    new, _ = replace(content, header, STYLE_HASH)
    assert new == header + "\nimport os\n"


def test_line_style_header_only_file_ends_with_newline():
    header = synthesize(TEMPLATE, STYLE_HASH)
    new, _ = replace("# just a comment", header, STYLE_HASH)
    assert new.endswith("\n")
    assert is_current(new, header)


def test_line_style_empty_file():
    header = synthesize(TEMPLATE, STYLE_HASH)
    new, outcome = replace("", header, STYLE_HASH)
    assert new == header
    assert outcome is Outcome.INSERTED


def test_block_insert_when_no_comment():
    header = synthesize(TEMPLATE, STYLE_C_LIKE)
    content = "#include <stdio.h>\n"
    new, outcome = replace(content, header, STYLE_C_LIKE)
    assert new == header + content
    assert outcome is Outcome.INSERTED


def test_block_update_discards_old_comment():
    header = synthesize(TEMPLATE, STYLE_C_LIKE)
    content = "\n/*\n * Copyright Old\n */\n\n\nint x;\n"
    new, outcome = replace(content, header, STYLE_C_LIKE)
    assert new == header + "int x;\n"
    assert outcome is Outcome.UPDATED


def test_block_unterminated_left_untouched():
    header = synthesize(TEMPLATE, STYLE_C_LIKE)
    content = "/*\n * Copyright Old\n\nint x;\n"
    new, outcome = replace(content, header, STYLE_C_LIKE)
    assert new == content
    assert outcome is Outcome.SKIPPED_MALFORMED


def test_block_closer_search_starts_after_opener():
    header = synthesize(TEMPLATE, STYLE_C_LIKE)
    new, outcome = replace("/*/ never closed\nint x;\n", header, STYLE_C_LIKE)
    assert outcome is Outcome.SKIPPED_MALFORMED


def test_block_style_keeps_shebang_first():
    header = synthesize(TEMPLATE, STYLE_C_LIKE)
    content = "#!/usr/bin/tcc -run\nint main(void) { return 0; }\n"
    new, _ = replace(content, header, STYLE_C_LIKE)
    assert new.startswith("#!/usr/bin/tcc -run\n" + header)
    assert is_current(new, header)

    stale = "#!/usr/bin/tcc -run\n/* old */\nint main(void) { return 0; }\n"
    new, outcome = replace(stale, header, STYLE_C_LIKE)
    assert outcome is Outcome.UPDATED
    assert new == "#!/usr/bin/tcc -run\n" + header + "int main(void) { return 0; }\n"


def test_replace_is_idempotent_through_detector():
    for profile in (STYLE_C_LIKE, STYLE_HASH, STYLE_DOUBLE_SLASH):
        header = synthesize(TEMPLATE, profile)
        new, _ = replace("#!/bin/sh\nbody line\n", header, profile)
        assert is_current(new, header)


def test_crlf_shebang_kept_exact_for_line_style():
    header = synthesize(TEMPLATE, STYLE_HASH)
    new, _ = replace("#!/bin/sh\r\n# old\r\n\r\necho hi\r\n", header, STYLE_HASH)
    assert new == "#!/bin/sh\r\n" + header + "echo hi\n"
    assert is_current(new, header)


def test_shebang_without_newline_gets_one():
    header = synthesize(TEMPLATE, STYLE_HASH)
    new, _ = replace("#!/bin/sh", header, STYLE_HASH)
    assert new == "#!/bin/sh\n" + header
