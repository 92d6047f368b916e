import io
import json
import unittest
from contextlib import redirect_stderr

from optionpy import ConsoleLogger, Some, NONE, from_nullable, instrument, traced


class TestConsoleLogger(unittest.TestCase):
    def test_level_filtering(self):
        logger = ConsoleLogger(level="WARN")
        buf = io.StringIO()
        with redirect_stderr(buf):
            logger.info("hidden")
            logger.warn("shown")
        lines = buf.getvalue().strip().splitlines()
        self.assertEqual(len(lines), 1)
        self.assertIn("optionpy WARN: shown", lines[0])

    def test_unknown_level(self):
        logger = ConsoleLogger(level="loud")
        self.assertEqual(logger.level_name, "INFO")
        logger.set_level("nope")
        self.assertEqual(logger.level_name, "INFO")
        logger.set_level("debug")
        self.assertEqual(logger.level_name, "DEBUG")

    def test_bind_and_json(self):
        logger = ConsoleLogger(name="t", json_output=True).bind(req="r1")
        buf = io.StringIO()
        with redirect_stderr(buf):
            logger.error("bad", code=3)
        rec = json.loads(buf.getvalue().strip())
        self.assertEqual(rec["name"], "t")
        self.assertEqual(rec["level"], "ERROR")
        self.assertEqual(rec["fields"], {"req": "r1", "code": 3})

    def test_plain_fields_sorted(self):
        buf = io.StringIO()
        with redirect_stderr(buf):
            ConsoleLogger().info("m", b=2, a=1)
        self.assertTrue(buf.getvalue().rstrip().endswith("m a=1 b=2"))


class TestInstrument(unittest.TestCase):
    def test_logs_outcome(self):
        logger = ConsoleLogger(level="DEBUG", json_output=True)
        users = {1: "ann"}
        lookup = instrument("user.lookup", lambda uid: from_nullable(users.get(uid)), logger=logger, tags={"svc": "u"})
        buf = io.StringIO()
        with redirect_stderr(buf):
            self.assertEqual(lookup(1), Some("ann"))
            self.assertIs(lookup(2), NONE)
        recs = [json.loads(l) for l in buf.getvalue().strip().splitlines()]
        self.assertEqual([r["msg"] for r in recs], [
            "start user.lookup", "end user.lookup -> Some(ann)",
            "start user.lookup", "end user.lookup -> None",
        ])
        self.assertEqual(recs[1]["fields"]["outcome"], "some")
        self.assertEqual(recs[3]["fields"]["outcome"], "none")
        self.assertEqual(recs[0]["fields"]["svc"], "u")

    def test_failure_logged_and_reraised(self):
        logger = ConsoleLogger(level="ERROR")

        @traced("parse", logger=logger)
        def parse(s: str):
            return Some(int(s))

        buf = io.StringIO()
        with redirect_stderr(buf):
            self.assertEqual(parse("4"), Some(4))
            with self.assertRaises(ValueError):
                parse("x")
        out = buf.getvalue()
        self.assertIn("ERROR: fail parse:", out)
        self.assertIn("error=ValueError", out)
        self.assertEqual(parse.__name__, "parse")
