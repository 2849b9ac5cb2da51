import unittest

from lirc_config.models import XY, Command, Remote
from remote_set import DocumentBuilder


def sample_remotes():
    cooked = Remote(
        name="tv",
        flags=["SPACE_ENC", "CONST_LENGTH"],
        unary_parameters={"bits": 16},
        binary_parameters={"header": XY(9000, 4500)},
        commands=[Command.cooked("power", [0x10EF])],
        source="tv.conf",
    )
    raw = Remote(
        name="amp",
        unary_parameters={"gap": 40000},
        commands=[Command.raw("mute", [560, 1690, 560])],
        source="amp.conf",
    )
    return [cooked, raw]


class TestDocumentBuilder(unittest.TestCase):
    def test_builds_parameters_and_commands(self):
        document = DocumentBuilder().build(sample_remotes(), "lircd.conf.d", True, False)
        self.assertEqual(document.source, "lircd.conf.d")
        tv, amp = document.remotes
        self.assertEqual(tv.flags, ["SPACE_ENC", "CONST_LENGTH"])
        self.assertTrue(tv.has_timing_info)
        self.assertEqual(tv.unary_parameters, {"bits": 16})
        self.assertEqual(tv.binary_parameters, {"header": (9000, 4500)})
        self.assertEqual(tv.commands[0].codes, [0x10EF])
        self.assertIsNone(tv.commands[0].durations)
        self.assertEqual(amp.commands[0].durations, [560, 1690, 560])
        self.assertIsNone(amp.commands[0].codes)

    def test_parameters_can_be_left_out(self):
        document = DocumentBuilder().build(sample_remotes(), "x", False, False)
        self.assertIsNone(document.remotes[0].unary_parameters)
        self.assertIsNone(document.remotes[0].binary_parameters)

    def test_alternating_signs(self):
        document = DocumentBuilder().build(sample_remotes(), "x", True, True)
        self.assertEqual(document.remotes[1].commands[0].durations, [560, -1690, 560])

    def test_signed_durations_pass_through(self):
        remote = Remote(name="amp", unary_parameters={"gap": 40000}, commands=[Command.raw("mute", [560, -1690, 560])])
        document = DocumentBuilder().build([remote], "x", True, False)
        self.assertEqual(document.remotes[0].commands[0].durations, [560, -1690, 560])

    def test_document_serializes_to_json(self):
        document = DocumentBuilder().build(sample_remotes(), "x", True, False)
        payload = document.model_dump()
        self.assertEqual(payload["remotes"][0]["name"], "tv")
        self.assertIn('"power"', document.model_dump_json())


if __name__ == "__main__":
    unittest.main()
