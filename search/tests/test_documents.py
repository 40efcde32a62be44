import pytest

from search.documents import Document
from search.exceptions import DecodeError, EngineError


class TestDocument:
    def test_to_source_uses_engine_field_names(self):
        doc = Document(username="johndoe", email="john@example.com", real_name="John Doe")
        assert doc.to_source() == {"username": "johndoe", "email": "john@example.com", "real_name": "John Doe"}

    def test_from_source_round_trip(self):
        doc = Document(username="jane", email="jane@example.org", real_name="Jane Roe")
        assert Document.from_source(doc.to_source()) == doc

    def test_missing_fields_decode_to_empty(self):
        doc = Document.from_source({"username": "solo"})
        assert doc == Document(username="solo", email="", real_name="")

    def test_extra_fields_are_ignored(self):
        doc = Document.from_source({"username": "a", "email": "b", "real_name": "c", "age": 3})
        assert doc.real_name == "c"

    @pytest.mark.parametrize("source", [None, "johndoe", ["johndoe"], {"username": 42}, {"email": ["x"]}])
    def test_bad_source_raises_decode_error(self, source):
        with pytest.raises(DecodeError):
            Document.from_source(source)

    def test_decode_error_is_engine_error(self):
        assert issubclass(DecodeError, EngineError)

    def test_null_fields_decode_to_empty(self):
        doc = Document.from_source({"username": "johndoe", "email": None, "real_name": None})
        assert doc == Document(username="johndoe", email="", real_name="")
