import asyncio

import pytest

from ollama_api import StreamDecodingError
from ollama_api.models import PullModelResponse
from ollama_api.services.streaming import iter_ndjson, parse_chunk


async def chunked(*chunks):
    for chunk in chunks:
        yield chunk


async def collect(items):
    return [item async for item in items]


def test_single_line():
    items = list(parse_chunk(b'{"status":"pulling manifest"}', PullModelResponse))
    assert [i.status for i in items] == ["pulling manifest"]
    assert items[0].digest is None


def test_lines_are_yielded_in_order():
    chunk = b'{"status":"pulling manifest"}\n{"status":"verifying sha256 digest"}'
    items = list(parse_chunk(chunk, PullModelResponse))
    assert [i.status for i in items] == ["pulling manifest", "verifying sha256 digest"]


def test_trailing_newline_and_whitespace_are_ignored():
    chunk = b'{"status":"a"}\n\n  \n{"status":"b"}\n \r\n'
    assert [i.status for i in parse_chunk(chunk, PullModelResponse)] == ["a", "b"]


def test_empty_chunk_yields_nothing():
    assert list(parse_chunk(b"", PullModelResponse)) == []


def test_progress_fields_are_optional():
    chunk = b'{"status":"pulling 8eeb52df","digest":"sha256:8eeb","total":2142590208,"completed":241970}\n{"status":"success","digest":null}'
    progress, done = parse_chunk(chunk, PullModelResponse)
    assert progress.total == 2142590208
    assert progress.completed == 241970
    assert done.status == "success"
    assert done.digest is None


def test_bad_line_after_good_one():
    items = parse_chunk(b'{"status":"pulling manifest"}\nnot json', PullModelResponse)
    assert next(items).status == "pulling manifest"
    with pytest.raises(StreamDecodingError) as excinfo:
        next(items)
    assert "PullModelResponse" in str(excinfo.value)


def test_invalid_utf8():
    with pytest.raises(StreamDecodingError, match="utf8"):
        list(parse_chunk(b"\xff\xfe", PullModelResponse))


def test_objects_split_across_chunks():
    chunks = chunked(b'{"status":"pul', b'ling manifest"}\n{"status":', b'"success"}')
    items = asyncio.run(collect(iter_ndjson(chunks, PullModelResponse)))
    assert [i.status for i in items] == ["pulling manifest", "success"]


def test_several_lines_in_one_chunk_and_a_split_utf8_character():
    encoded = '{"status":"café"}\n'.encode()
    split = encoded.index(b"\xc3") + 1
    chunks = chunked(b'{"status":"a"}\n{"status":"b"}\n' + encoded[:split], encoded[split:])
    items = asyncio.run(collect(iter_ndjson(chunks, PullModelResponse)))
    assert [i.status for i in items] == ["a", "b", "café"]


def test_whitespace_tail_is_not_decoded():
    items = asyncio.run(collect(iter_ndjson(chunked(b'{"status":"a"}\n', b"  "), PullModelResponse)))
    assert [i.status for i in items] == ["a"]
