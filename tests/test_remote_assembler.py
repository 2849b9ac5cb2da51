import unittest

from lirc_config.remote_assembler import RemoteAssembler


def assemble(text, accept_lirc_code=False, source="test.conf"):
    return RemoteAssembler(text.splitlines(keepends=True), source=source, accept_lirc_code=accept_lirc_code).remotes()


WELL_FORMED = """\
begin remote
  name  tv
  bits  8
begin codes
  power 0x1
end codes
end remote
"""

MISSING_END_CODES = """\
begin remote
  name  broken
  bits  8
begin codes
  power 0x1
end remote
"""

RAW_REMOTE = """\
# recorded with irrecord
begin remote
  name  amp
  flags RAW_CODES
  eps   30
  aeps  100
  gap   40000
  begin raw_codes
    name power
      9000 4500 560 560
    name mute
      560 1690
  end raw_codes
end remote
"""

CODES_ONLY = """\
begin remote
  name  lirccode
  driver irman
  begin codes
    ok 0x5
  end codes
end remote
"""


class TestRemoteAssembler(unittest.TestCase):
    def test_end_to_end_cooked_remote(self):
        remotes = assemble(WELL_FORMED)
        self.assertEqual(len(remotes), 1)
        remote = remotes[0]
        self.assertEqual(remote.name, "tv")
        self.assertTrue(remote.has_timing_info)
        self.assertEqual(remote.unary_parameters, {"bits": 8})
        self.assertEqual(len(remote.commands), 1)
        self.assertEqual(remote.commands[0].name, "power")
        self.assertEqual(remote.commands[0].codes, (1,))
        self.assertEqual(remote.source, "test.conf")

    def test_malformed_block_is_dropped(self):
        remotes = assemble(MISSING_END_CODES + WELL_FORMED)
        self.assertEqual([r.name for r in remotes], ["tv"])

    def test_raw_remote(self):
        remotes = assemble(RAW_REMOTE)
        self.assertEqual(len(remotes), 1)
        remote = remotes[0]
        self.assertEqual(remote.flags, ["RAW_CODES"])
        self.assertTrue(all(c.is_raw for c in remote.commands))
        self.assertEqual([c.name for c in remote.commands], ["power", "mute"])
        self.assertEqual(remote.commands[1].durations, (560, 1690))

    def test_timingless_remote_is_filtered(self):
        with self.assertLogs("remote_assembler", level="WARNING") as logs:
            remotes = assemble(CODES_ONLY + WELL_FORMED)
        self.assertEqual([r.name for r in remotes], ["tv"])
        self.assertIn("lirccode", logs.output[0])

    def test_timingless_remote_is_accepted_on_request(self):
        remotes = assemble(CODES_ONLY, accept_lirc_code=True)
        self.assertEqual(len(remotes), 1)
        self.assertFalse(remotes[0].has_timing_info)
        self.assertEqual(remotes[0].driver, "irman")
        self.assertEqual(remotes[0].commands[0].codes, (5,))

    def test_remotes_are_linked_in_order(self):
        second = WELL_FORMED.replace("name  tv", "name  vcr")
        remotes = assemble(WELL_FORMED + "\n" + second)
        self.assertEqual([r.name for r in remotes], ["tv", "vcr"])
        self.assertIs(remotes[0].next_remote, remotes[1])
        self.assertIsNone(remotes[1].next_remote)

    def test_truncated_file_keeps_earlier_remotes(self):
        remotes = assemble(WELL_FORMED + "begin remote\nname cut\nbits 8\nbegin codes\npower 0x2\n")
        self.assertEqual([r.name for r in remotes], ["tv"])

    def test_missing_end_remote_swallows_next_block(self):
        text = WELL_FORMED.replace("end remote\n", "") + WELL_FORMED.replace("tv", "vcr")
        self.assertEqual(assemble(text), [])

    def test_content_outside_blocks_is_ignored(self):
        remotes = assemble("garbage line\nend codes\n" + WELL_FORMED + "trailing junk\n")
        self.assertEqual([r.name for r in remotes], ["tv"])

    def test_keywords_are_case_insensitive(self):
        text = "BEGIN REMOTE\nName tv\nBits 8\nBegin Codes\npower 0x1\nEND CODES\nEnd Remote\n"
        remotes = assemble(text)
        self.assertEqual(len(remotes), 1)
        self.assertEqual(remotes[0].name, "tv")
        self.assertTrue(remotes[0].has_timing_info)

    def test_empty_input(self):
        self.assertEqual(assemble(""), [])


if __name__ == "__main__":
    unittest.main()
