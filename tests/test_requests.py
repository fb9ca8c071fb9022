# =============================================================================
# Unit Tests — Request Body Parsing
# =============================================================================
# parse_user_payload() must never raise: anything unparseable becomes an
# empty payload, which the routes then reject as "Missing name or email".
# =============================================================================

from app.models.requests import UserPayload, parse_user_payload


class TestParseUserPayload:
    """Tests for lenient request body parsing."""

    def test_full_body(self):
        payload = parse_user_payload(
            b'{"name": "Ann", "email": "a@x.com", "vec": [1, 2.5]}'
        )
        assert payload.name == "Ann"
        assert payload.email == "a@x.com"
        assert payload.vec == [1, 2.5]
        assert payload.has_identity

    def test_invalid_json_is_empty(self):
        assert parse_user_payload(b"{not json") == UserPayload()

    def test_empty_body_is_empty(self):
        assert parse_user_payload(b"") == UserPayload()

    def test_non_utf8_is_empty(self):
        assert parse_user_payload(b"\xff\xfe\xfa") == UserPayload()

    def test_non_object_is_empty(self):
        assert parse_user_payload(b'["Ann", "a@x.com"]') == UserPayload()
        assert parse_user_payload(b'"Ann"') == UserPayload()

    def test_wrong_field_type_is_empty(self):
        payload = parse_user_payload(b'{"name": ["Ann"], "email": "a@x.com"}')
        assert payload == UserPayload()
        assert not payload.has_identity

    def test_numbers_coerced_to_text(self):
        payload = parse_user_payload(b'{"name": 42, "email": "a@x.com"}')
        assert payload.name == "42"

    def test_unknown_fields_ignored(self):
        payload = parse_user_payload(
            b'{"name": "Ann", "email": "a@x.com", "id": 99, "role": "admin"}'
        )
        assert payload.has_identity
        assert not hasattr(payload, "role")

    def test_vec_kept_unvalidated(self):
        """vec is checked by the encoder, not the parser."""
        payload = parse_user_payload(b'{"name": "A", "email": "b", "vec": ["a"]}')
        assert payload.vec == ["a"]


class TestHasIdentity:
    """Tests for the name/email presence check."""

    def test_missing_email(self):
        assert not UserPayload(name="Bob").has_identity

    def test_empty_strings(self):
        assert not UserPayload(name="", email="a@x.com").has_identity
        assert not UserPayload(name="Ann", email="").has_identity

    def test_null_fields(self):
        assert not parse_user_payload(b'{"name": null, "email": null}').has_identity


class TestUnparseableBodies:
    """Bodies the JSON parser cannot handle still degrade to empty."""

    def test_deeply_nested_json_is_empty(self):
        body = b'{"x": ' + b"[" * 100_000 + b"]" * 100_000 + b"}"
        assert parse_user_payload(body) == UserPayload()


class TestZeroIdentity:
    """A numeric 0 for name or email counts as missing."""

    def test_zero_name_is_missing(self):
        payload = parse_user_payload(b'{"name": 0, "email": "a@x.com"}')
        assert payload.name is None
        assert not payload.has_identity

    def test_zero_email_is_missing(self):
        assert not parse_user_payload(b'{"name": "Ann", "email": 0.0}').has_identity

    def test_nonzero_number_still_counts(self):
        assert parse_user_payload(b'{"name": 7, "email": "a@x.com"}').has_identity
