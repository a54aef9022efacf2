"""Tests for the color placeholder table."""

import re
from concurrent.futures import ThreadPoolExecutor

from jiramd.config import defaults
from jiramd.md import ColorPlaceholders
from jiramd.md.placeholders import generate_marker

MARKER_RE = re.compile(r"CLRM[0-9a-f]{16}")


def test_marker_format():
    marker = generate_marker()
    assert MARKER_RE.fullmatch(marker)
    assert generate_marker() != marker


def test_tables_get_their_own_reset_marker():
    assert ColorPlaceholders().reset_marker != ColorPlaceholders().reset_marker


def test_process_named_color():
    table = ColorPlaceholders()
    result = table.process_color_tags("{color:red}hello{color}")

    markers = MARKER_RE.findall(result)
    assert len(markers) == 2
    assert markers[1] == table.reset_marker
    assert result == f"{markers[0]}hello{table.reset_marker}"
    assert len(table) == 1
    assert table.get(markers[0]) == "\033[31m"
    assert table.expand(result) == "\033[31mhello\033[0m"


def test_invalid_color_keeps_content_only():
    table = ColorPlaceholders()
    assert table.process_color_tags("{color:notacolor}x{color}") == "x"
    assert len(table) == 0


def test_bare_color_tag_keeps_content_only():
    table = ColorPlaceholders()
    assert table.process_color_tags("a {color}x{color} b") == "a x b"
    assert len(table) == 0


def test_whitespace_and_case_in_spec():
    messy = ColorPlaceholders()
    clean = ColorPlaceholders()
    assert messy.expand(
        messy.process_color_tags("{color: RED }x{color}")
    ) == clean.expand(clean.process_color_tags("{color:red}x{color}"))


def test_multiple_regions_share_reset_marker():
    table = ColorPlaceholders()
    result = table.process_color_tags(
        "{color:blue}one{color} and {color:#0f0}two{color}"
    )
    assert len(table) == 2
    assert result.count(table.reset_marker) == 2
    assert table.expand(result) == (
        "\033[34mone\033[0m and \033[38;2;0;255;0mtwo\033[0m"
    )


def test_non_greedy_and_multiline_regions():
    table = ColorPlaceholders()
    result = table.process_color_tags(
        "{color:red}a\nb{color} plain {color:green}c{color}"
    )
    assert table.expand(result) == (
        "\033[31ma\nb\033[0m plain \033[32mc\033[0m"
    )


def test_expand_without_placeholders_is_identity():
    table = ColorPlaceholders()
    table.process_color_tags("{color:red}x{color}")
    assert table.expand("nothing to see") == "nothing to see"


def test_expand_tolerates_dropped_placeholders():
    table = ColorPlaceholders()
    result = table.process_color_tags("{color:red}x{color}")
    # A renderer that kept the reset marker but lost the opening one
    rendered = result[result.index("x") :]
    assert table.expand(rendered) == "x" + defaults.ANSI_RESET


def test_dangling_placeholders_stay_visible():
    producer = ColorPlaceholders()
    other = ColorPlaceholders()
    result = producer.process_color_tags("{color:red}x{color}")
    assert other.expand(result) == result


def test_concurrent_processing_on_one_table():
    table = ColorPlaceholders()
    texts = [f"{{color:green}}item {i}{{color}}" for i in range(200)]

    with ThreadPoolExecutor(max_workers=8) as executor:
        results = list(executor.map(table.process_color_tags, texts))

    assert len(table) == len(texts)
    expanded = [table.expand(result) for result in results]
    assert expanded == [f"\033[32mitem {i}\033[0m" for i in range(len(texts))]


def test_verbose_logs_unknown_color(capsys):
    table = ColorPlaceholders(verbose=True)
    table.process_color_tags("{color:notacolor}x{color}")
    assert "Ignoring unknown color 'notacolor'" in capsys.readouterr().err


def test_quiet_by_default(capsys):
    table = ColorPlaceholders()
    table.process_color_tags("{color:notacolor}x{color}")
    assert capsys.readouterr().err == ""
