import json
import unittest

from util.functions import is_present, merge_dicts, to_compact_json


class FunctionsTest(unittest.TestCase):

    def test_to_compact_json_has_no_whitespace(self):
        result = to_compact_json({"a": 1, "b": [1, 2], "c": {"d": None}})

        self.assertEqual(result, '{"a":1,"b":[1,2],"c":{"d":null}}')

    def test_to_compact_json_keeps_insertion_order(self):
        result = to_compact_json({"z": 1, "a": 2, "m": 3})

        self.assertEqual(result, '{"z":1,"a":2,"m":3}')

    def test_to_compact_json_keeps_unicode(self):
        result = to_compact_json({"text": "Ćao 👋"})

        self.assertEqual(result, '{"text":"Ćao 👋"}')

    def test_to_compact_json_booleans(self):
        result = to_compact_json({"yes": True, "no": False})

        self.assertEqual(result, '{"yes":true,"no":false}')
        self.assertEqual(json.loads(result), {"yes": True, "no": False})

    def test_merge_dicts_overrides_win(self):
        base = {"a": 1, "b": 2}

        result = merge_dicts(base, {"b": 3, "c": 4})

        self.assertEqual(result, {"a": 1, "b": 3, "c": 4})

    def test_merge_dicts_does_not_mutate_inputs(self):
        base = {"a": 1}
        overrides = {"b": 2}

        result = merge_dicts(base, overrides)

        self.assertEqual(base, {"a": 1})
        self.assertEqual(overrides, {"b": 2})
        self.assertIsNot(result, base)

    def test_merge_dicts_none_overrides(self):
        result = merge_dicts({"a": 1}, None)

        self.assertEqual(result, {"a": 1})

    def test_merge_dicts_is_shallow(self):
        base = {"nested": {"a": 1}}

        result = merge_dicts(base, {"nested": {"b": 2}})

        self.assertEqual(result, {"nested": {"b": 2}})

    def test_to_compact_json_non_finite_numbers_become_null(self):
        result = to_compact_json({"nan": float("nan"), "inf": [float("inf"), -float("inf")], "ok": 1.5})

        self.assertEqual(result, '{"nan":null,"inf":[null,null],"ok":1.5}')

    def test_is_present_counts_empty_containers(self):
        self.assertTrue(is_present({}))
        self.assertTrue(is_present([]))
        self.assertTrue(is_present({"url": "https://x.com"}))

    def test_is_present_uses_truthiness_for_scalars(self):
        self.assertFalse(is_present(None))
        self.assertFalse(is_present(""))
        self.assertFalse(is_present(0))
        self.assertFalse(is_present(False))
        self.assertTrue(is_present("x"))
        self.assertTrue(is_present(True))
