import random

from exchange.csv_parser import decode_text, parse_csv

HEADER = "url,beschreibung,channel,dauer,gesehen,mediaType,stichwort"


def test_blank_lines_skipped_and_optional_fields_empty():
    body = f"{HEADER}\nhttps://x.com,,,,,,\n\nhttps://y.com,Y,,,,,"
    result = parse_csv(body)

    assert [r.url for r in result.records] == ["https://x.com", "https://y.com"]
    assert result.diagnostics == []
    x, y = result.records
    assert (x.description, x.channel, x.duration, x.media_type, x.keywords) == (None,) * 5
    assert x.seen is False
    assert y.description == "Y"


def test_malformed_rows_reported_not_fatal():
    body = "\n".join([
        HEADER,
        "https://ok1.com,A,,,,,",
        ",missing url,,,,,",
        'https://bad.com,"broken,,,,,',
        "https://ok2.com,B,,,,,",
    ])
    result = parse_csv(body)

    assert len(result.records) == 2
    assert [d.line for d in result.diagnostics] == [3, 4]
    assert "url is required" in result.diagnostics[0].reason


def test_counts_independent_of_row_order():
    """k valid + m malformed rows → k records and m diagnostics, any order."""
    valid = [f"https://v{n}.com,Title {n},,,true,,tag" for n in range(6)]
    invalid = [",no url,,,,,", 'https://q.com,"open,,,,,', "   ,blank url"]
    rows = valid + invalid

    for seed in range(5):
        random.Random(seed).shuffle(rows)
        result = parse_csv("\n".join([HEADER, *rows]))
        assert len(result.records) == len(valid)
        assert len(result.diagnostics) == len(invalid)


def test_header_is_not_validated():
    result = parse_csv("whatever,header\nhttps://a.com,,,,,,")
    assert len(result.records) == 1


def test_empty_and_header_only_documents():
    assert parse_csv("").records == []
    assert parse_csv(HEADER).records == []
    assert parse_csv(HEADER + "\n").diagnostics == []


def test_bytes_with_bom_and_crlf():
    body = ("\ufeff" + HEADER + "\r\nhttps://a.com,Ä Beschreibung,,,true,,\r\n").encode("utf-8")
    result = parse_csv(body)

    assert len(result.records) == 1
    assert result.records[0].description == "Ä Beschreibung"
    assert result.records[0].seen is True


def test_line_numbers_count_blank_lines():
    body = f"{HEADER}\n\n\n,bad"
    result = parse_csv(body)
    assert result.diagnostics[0].line == 4


def test_rows_carry_source_line():
    result = parse_csv(f"{HEADER}\nhttps://a.com\n\nhttps://b.com")
    assert [line for line, _ in result.rows] == [2, 4]


def test_quoted_blank_url_is_a_line_diagnostic():
    result = parse_csv(f'{HEADER}\n"   ",Title,,,,,\nhttps://ok.com,,,,,,')

    assert [r.url for r in result.records] == ["https://ok.com"]
    assert [(d.line, d.reason) for d in result.diagnostics] == [(2, "url is required")]


def test_decode_text_strips_bom_from_bytes_and_str():
    assert decode_text(b"\xef\xbb\xbfurl") == "url"
    assert decode_text("\ufeffurl") == "url"
    assert decode_text("plain") == "plain"
