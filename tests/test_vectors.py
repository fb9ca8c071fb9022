# =============================================================================
# Unit Tests — Vector Codec
# =============================================================================
# Pure functions, no database needed.
# =============================================================================

import pytest

from app.exceptions import ValidationError
from app.services.vectors import VEC_ERROR, decode_vec, encode_vec


class TestEncodeVec:
    """Tests for encoding a vector to its stored text form."""

    def test_none_is_stored_as_null(self):
        assert encode_vec(None) is None

    def test_compact_json(self):
        assert encode_vec([1.5, -2, 3]) == "[1.5,-2,3]"

    def test_empty_list_is_not_null(self):
        """An empty vector is stored, distinct from no vector."""
        assert encode_vec([]) == "[]"

    @pytest.mark.parametrize(
        "bad",
        [["a"], [1, "2"], [True], [None], [[1, 2]], [float("nan")]],
    )
    def test_non_numeric_element_rejected(self, bad):
        with pytest.raises(ValidationError) as exc_info:
            encode_vec(bad)
        assert exc_info.value.message == VEC_ERROR
        assert exc_info.value.status_code == 400

    @pytest.mark.parametrize("bad", ["1,2,3", {"x": 1}, 5, True])
    def test_non_list_rejected(self, bad):
        with pytest.raises(ValidationError):
            encode_vec(bad)


class TestDecodeVec:
    """Tests for decoding stored vector text. Never raises."""

    def test_null_and_empty(self):
        assert decode_vec(None) is None
        assert decode_vec("") is None

    def test_round_trip(self):
        vec = [1.5, -2, 3]
        assert decode_vec(encode_vec(vec)) == vec

    def test_empty_array(self):
        assert decode_vec("[]") == []

    def test_invalid_json_is_none(self):
        assert decode_vec("[1, 2") is None

    def test_non_array_is_none(self):
        assert decode_vec('{"a": 1}') is None
        assert decode_vec("42") is None

    def test_invalid_json_is_logged(self, caplog):
        with caplog.at_level("WARNING", logger="app.services.vectors"):
            decode_vec("garbage")
        assert "not valid JSON" in caplog.text


class TestLargeNumbers:
    """Integers are checked against the range of a double, never converted."""

    def test_int_beyond_double_range_rejected(self):
        with pytest.raises(ValidationError):
            encode_vec([10 ** 400])

    def test_negative_int_beyond_double_range_rejected(self):
        with pytest.raises(ValidationError):
            encode_vec([-(10 ** 400)])

    def test_large_int_within_range_kept(self):
        assert encode_vec([10 ** 300]) == "[" + "1" + "0" * 300 + "]"

    def test_deeply_nested_stored_text_is_none(self):
        assert decode_vec("[" * 100_000 + "]" * 100_000) is None
