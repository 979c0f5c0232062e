import json
import unittest

from user_api.codec import build_user, dumps, encode_user, parse_body, user_key
from user_api.errors import BadRequest


class CodecTests(unittest.TestCase):
    def test_user_key_appends_json_suffix(self):
        self.assertEqual(user_key("abc"), "abc.json")

    def test_empty_bodies_parse_to_empty_record(self):
        for body in (None, "", "   ", b""):
            self.assertEqual(parse_body(body), {})

    def test_parse_bytes_body(self):
        self.assertEqual(parse_body(b'{"name":"test"}'), {"name": "test"})

    def test_malformed_body_is_bad_request(self):
        with self.assertRaises(BadRequest) as ctx:
            parse_body("{not json")
        self.assertEqual(ctx.exception.status_code, 400)
        self.assertEqual(ctx.exception.message, "Invalid JSON body")

    def test_non_object_body_is_bad_request(self):
        for body in ("[1, 2]", '"text"', "42", "null"):
            with self.assertRaises(BadRequest):
                parse_body(body)

    def test_non_standard_constants_are_bad_requests(self):
        for body in ('{"a": NaN}', '{"a": Infinity}', '{"a": -Infinity}'):
            with self.assertRaises(BadRequest) as ctx:
                parse_body(body)
            self.assertEqual(ctx.exception.message, "Invalid JSON body")

    def test_non_utf8_bytes_body_is_bad_request(self):
        with self.assertRaises(BadRequest) as ctx:
            parse_body(b'{"name": "\xff"}')
        self.assertEqual(ctx.exception.message, "Invalid JSON body")

    def test_dumps_rejects_nan(self):
        with self.assertRaises(ValueError):
            dumps({"a": float("nan")})

    def test_lone_surrogate_is_escaped(self):
        user = build_user("abc", parse_body('{"a": "\\ud800"}'))
        self.assertEqual(encode_user(user), b'{"a":"\\ud800","id":"abc"}')
        self.assertEqual(json.loads(encode_user(user)), user)

    def test_build_user_overrides_caller_id(self):
        fields = {"id": "spoofed", "name": "test"}
        user = build_user("real-id", fields)
        self.assertEqual(user, {"id": "real-id", "name": "test"})
        # Caller's dict is left alone.
        self.assertEqual(fields["id"], "spoofed")

    def test_encode_user_is_compact_utf8(self):
        encoded = encode_user({"name": "Zoë", "id": "abc"})
        self.assertEqual(encoded, '{"name":"Zoë","id":"abc"}'.encode("utf-8"))
        self.assertEqual(json.loads(encoded), {"name": "Zoë", "id": "abc"})


if __name__ == "__main__":
    unittest.main()
