import base64
import json
import unittest
from unittest.mock import patch

from user_api import lambdas
from user_api.storage import InMemoryBlobStore


class LambdaHandlerTests(unittest.TestCase):
    def setUp(self):
        self.store = InMemoryBlobStore()
        patcher = patch("user_api.lambdas.get_blob_store", return_value=self.store)
        patcher.start()
        self.addCleanup(patcher.stop)

    def test_post_then_get_user(self):
        created = lambdas.post_user(
            {"pathParameters": None, "body": '{"name":"test"}'}, None
        )
        self.assertEqual(created["statusCode"], 201)
        self.assertEqual(created["headers"]["Content-Type"], "application/json")
        user = json.loads(created["body"])
        self.assertEqual(user["name"], "test")

        fetched = lambdas.get_user({"pathParameters": {"id": user["id"]}}, None)
        self.assertEqual(fetched["statusCode"], 200)
        self.assertEqual(json.loads(fetched["body"]), user)

    def test_put_user_decodes_base64_body(self):
        self.store.put_bytes("abc.json", b'{"id":"abc"}')
        event = {
            "pathParameters": {"id": "abc"},
            "body": base64.b64encode(b'{"name":"new"}').decode("ascii"),
            "isBase64Encoded": True,
        }
        response = lambdas.put_user(event, None)
        self.assertEqual(response["statusCode"], 200)
        self.assertEqual(json.loads(response["body"]), {"name": "new", "id": "abc"})

    def test_invalid_base64_body_is_bad_request(self):
        self.store.put_bytes("abc.json", b'{"id":"abc"}')
        event = {
            "pathParameters": {"id": "abc"},
            "body": "not base64!",
            "isBase64Encoded": True,
        }
        response = lambdas.put_user(event, None)
        self.assertEqual(response["statusCode"], 400)
        self.assertEqual(response["body"], '{"error":"Invalid base64 body"}')
        self.assertEqual(self.store.get_bytes("abc.json"), b'{"id":"abc"}')

    def test_get_user_without_path_parameters(self):
        response = lambdas.get_user({"pathParameters": None, "body": None}, None)
        self.assertEqual(response["statusCode"], 400)
        self.assertEqual(response["body"], '{"error":"Missing UUID"}')


if __name__ == "__main__":
    unittest.main()
