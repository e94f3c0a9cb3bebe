"""Tests for the debug serialization of fragments"""

import json
import uuid
from datetime import datetime
from decimal import Decimal

from sqlfrag import sql
from sqlfrag.utils.serialize import MAX_SAFE_INTEGER, dump_fragment, to_debug_value


class TestToDebugValue:
    """Tests for to_debug_value()"""

    def test_plain_values_pass_through(self):
        assert to_debug_value(1) == 1
        assert to_debug_value("foo") == "foo"
        assert to_debug_value(None) is None
        assert to_debug_value(True) is True
        assert to_debug_value(1.5) == 1.5

    def test_big_integers_get_suffix(self):
        assert to_debug_value(10) == 10
        assert to_debug_value(MAX_SAFE_INTEGER) == MAX_SAFE_INTEGER
        assert to_debug_value(MAX_SAFE_INTEGER + 1) == f"{MAX_SAFE_INTEGER + 1}n"
        assert to_debug_value(-(10**20)) == "-100000000000000000000n"

    def test_bytes_render_as_buffer(self):
        assert to_debug_value(b"") == {"type": "Buffer", "data": []}
        assert to_debug_value(b"ab") == {"type": "Buffer", "data": [97, 98]}
        assert to_debug_value(bytearray(b"\x00\xff")) == {"type": "Buffer", "data": [0, 255]}
        assert to_debug_value(memoryview(b"a")) == {"type": "Buffer", "data": [97]}

    def test_non_finite_floats_become_null(self):
        assert to_debug_value(float("nan")) is None
        assert to_debug_value(float("inf")) is None

    def test_containers_are_converted(self):
        assert to_debug_value([10**20, b"a"]) == ["100000000000000000000n", {"type": "Buffer", "data": [97]}]
        assert to_debug_value({"n": 10**20}) == {"n": "100000000000000000000n"}


class TestDumpFragment:
    """Tests for dump_fragment() and Fragment.to_string()"""

    def test_compact(self):
        assert dump_fragment("a = ?", (1,)) == '{"query":"a = ?","params":[1]}'

    def test_pretty(self):
        fragment = sql("select {}", 1)
        assert fragment.to_string(pretty=True) == '{\n  "query": "select ?",\n  "params": [\n    1\n  ]\n}'

    def test_str_is_compact_json(self):
        fragment = sql("select * from {} where a = {}", sql.id("foo"), 10**20)
        assert str(fragment) == '{"query":"select * from \\"foo\\" where a = ?","params":["100000000000000000000n"]}'

    def test_non_json_values_fall_back_to_str(self):
        stamp = datetime(2024, 1, 2, 3, 4, 5)
        token = uuid.UUID("12345678-1234-5678-1234-567812345678")
        output = json.loads(dump_fragment("?, ?, ?", (stamp, Decimal("1.10"), token)))
        assert output["params"] == ["2024-01-02 03:04:05", "1.10", "12345678-1234-5678-1234-567812345678"]

    def test_non_ascii_kept(self):
        assert dump_fragment("select ?", ("年金",)) == '{"query":"select ?","params":["年金"]}'
