"""
Tests for request body serialization
"""
import json
from dataclasses import dataclass

import pytest

from seam_http.utils.serialization import encode_form, encode_json


@dataclass
class Order:
    item: str
    qty: int


class TestEncodeForm:
    """Test form-urlencoded encoding"""

    def test_mapping(self):
        assert encode_form({"q": "hello world", "page": 2}) == "q=hello+world&page=2"

    def test_pairs_keep_order_and_duplicates(self):
        assert encode_form([("b", "1"), ("a", "2"), ("b", "3")]) == "b=1&a=2&b=3"

    def test_sequence_values_repeat_key(self):
        assert encode_form({"tag": ["x", "y"]}) == "tag=x&tag=y"

    def test_none_values_dropped(self):
        assert encode_form({"a": "1", "b": None}) == "a=1"

    def test_dataclass(self):
        assert encode_form(Order(item="pen", qty=3)) == "item=pen&qty=3"

    def test_unsupported_type(self):
        with pytest.raises(TypeError, match="Cannot form-encode int"):
            encode_form(42)


class TestEncodeJson:
    """Test JSON encoding"""

    def test_compact(self):
        assert encode_json({"name": "café", "n": [1, 2]}) == b'{"name":"caf\\u00e9","n":[1,2]}'

    def test_dataclass(self):
        assert json.loads(encode_json(Order(item="pen", qty=3))) == {"item": "pen", "qty": 3}

    def test_unserializable(self):
        with pytest.raises(TypeError):
            encode_json({"value": object()})
