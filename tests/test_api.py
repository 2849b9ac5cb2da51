import os
import tempfile
import unittest

from fastapi.testclient import TestClient

import main

CONFIG = """\
begin remote
  name  tv
  bits  8
  header 9000 4500
  begin codes
    power 0x1
    mute  0x2
  end codes
end remote
begin remote
  name  codes_only
  begin codes
    ok 0x3
  end codes
end remote
"""


class TestApi(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.config_path = os.path.join(self._tmp.name, "lircd.conf")
        with open(self.config_path, "w", encoding="windows-1252") as f:
            f.write(CONFIG)

        self._saved = dict(vars(main.env))
        main.env.lirc_config_path = self.config_path
        main.env.accept_lirc_code = False
        main.env.generate_parameters = True
        main.env.alternating_signs = False
        main.env.api_key = ""
        main.env.max_upload_bytes = 1024 * 1024
        self.client = TestClient(main.app)

    def tearDown(self):
        vars(main.env).update(self._saved)
        self._tmp.cleanup()

    def test_health(self):
        response = self.client.get("/api/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"ok": True})

    def test_status_config(self):
        response = self.client.get("/api/status/config")
        self.assertEqual(response.json()["lirc_config_path"], self.config_path)

    def test_list_remotes(self):
        response = self.client.get("/api/lirc/remotes")
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual([r["name"] for r in body["remotes"]], ["tv"])
        self.assertEqual(body["remotes"][0]["binary_parameters"], {"header": [9000, 4500]})

    def test_get_remote(self):
        response = self.client.get("/api/lirc/remotes/tv")
        self.assertEqual(response.status_code, 200)
        self.assertEqual([c["name"] for c in response.json()["commands"]], ["power", "mute"])
        missing = self.client.get("/api/lirc/remotes/radio")
        self.assertEqual(missing.status_code, 404)
        self.assertEqual(missing.json()["code"], "remote_not_found")

    def test_missing_config_path(self):
        main.env.lirc_config_path = os.path.join(self._tmp.name, "missing")
        response = self.client.get("/api/lirc/remotes")
        self.assertEqual(response.status_code, 404)
        self.assertEqual(response.json()["code"], "config_missing")

    def test_unreadable_config(self):
        main.env.lirc_config_encoding = "no-such-charset"
        response = self.client.get("/api/lirc/remotes")
        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.json()["code"], "config_unreadable")

    def test_parse_with_overrides(self):
        response = self.client.post(
            "/api/lirc/parse",
            json={"text": CONFIG, "source": "pasted", "accept_lirc_code": True, "generate_parameters": False},
        )
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["source"], "pasted")
        self.assertEqual([r["name"] for r in body["remotes"]], ["tv", "codes_only"])
        self.assertIsNone(body["remotes"][0]["unary_parameters"])
        self.assertFalse(body["remotes"][1]["has_timing_info"])

    def test_parse_requires_api_key(self):
        main.env.api_key = "secret"
        self.assertEqual(self.client.post("/api/lirc/parse", json={"text": CONFIG}).status_code, 401)
        response = self.client.post("/api/lirc/parse", json={"text": CONFIG}, headers={"X-API-Key": "secret"})
        self.assertEqual(response.status_code, 200)

    def test_parse_rejects_large_text(self):
        main.env.max_upload_bytes = 10
        self.assertEqual(self.client.post("/api/lirc/parse", json={"text": CONFIG}).status_code, 413)


if __name__ == "__main__":
    unittest.main()
