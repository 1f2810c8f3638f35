from __future__ import annotations

import unittest

import numpy as np

from flot_html.config_tree import ConfigTree, to_json
from flot_html.errors import ConfigPathError


class ConfigTreeTests(unittest.TestCase):
    def test_missing_path_reads_none(self) -> None:
        tree = ConfigTree()
        self.assertIsNone(tree.get("grid", "markings", 3, "color"))
        self.assertFalse(tree.contains("grid"))

    def test_set_autovivifies_objects_and_arrays(self) -> None:
        tree = ConfigTree()
        tree.set("yaxes", 1, "position", value="right")
        self.assertEqual(tree.to_dict(), {"yaxes": [{}, {"position": "right"}]})

    def test_set_through_scalar_fails(self) -> None:
        tree = ConfigTree({"legend": "off"})
        with self.assertRaises(ConfigPathError):
            tree.set("legend", "show", value=False)
        self.assertEqual(tree.get("legend"), "off")

    def test_ensure_keeps_existing_node(self) -> None:
        tree = ConfigTree()
        first = tree.ensure("grid", "markings", default=[])
        first.append({"color": "red"})
        again = tree.ensure("grid", "markings", default=[])
        self.assertIs(first, again)
        self.assertEqual(len(again), 1)

    def test_append_and_last(self) -> None:
        tree = ConfigTree()
        self.assertEqual(tree.append("items", value={"a": 1}), 0)
        self.assertEqual(tree.append("items", value={"a": 2}), 1)
        self.assertEqual(tree.last("items"), {"a": 2})

    def test_last_on_missing_or_empty_array_fails(self) -> None:
        tree = ConfigTree({"items": []})
        with self.assertRaises(ConfigPathError):
            tree.last("items")
        with self.assertRaises(ConfigPathError):
            tree.last("nothing")

    def test_ensure_slot_pads_with_empty_objects(self) -> None:
        tree = ConfigTree()
        slot = tree.ensure_slot("yaxes", index=1)
        slot["min"] = 0
        self.assertEqual(tree.get("yaxes"), [{}, {"min": 0}])
        tree.ensure_slot("yaxes", index=0)
        self.assertEqual(len(tree.get("yaxes")), 2)

    def test_remove_returns_dropped_node(self) -> None:
        tree = ConfigTree({"legend": {"show": False, "position": "ne"}})
        self.assertFalse(tree.remove("legend", "show"))
        self.assertIsNone(tree.remove("legend", "show"))
        self.assertEqual(tree.get("legend"), {"position": "ne"})

    def test_values_are_coerced_on_write(self) -> None:
        tree = ConfigTree()
        tree.set("ticks", value=(np.float64(1.5), np.int64(2)))
        tree.set("nested", value=ConfigTree({"a": [1, 2]}))
        self.assertEqual(tree.get("ticks"), [1.5, 2])
        self.assertIsInstance(tree.get("ticks", 1), int)
        self.assertEqual(tree.get("nested"), {"a": [1, 2]})
        with self.assertRaises(TypeError):
            tree.set("bad", value=object())

    def test_json_is_compact_and_ordered(self) -> None:
        tree = ConfigTree()
        tree.set("label", value="x")
        tree.set("data", value=[[0.0, 1.0], [1.0, 4.5]])
        tree.set("lines", "show", value=True)
        self.assertEqual(tree.to_json(), '{"label":"x","data":[[0,1],[1,4.5]],"lines":{"show":true}}')

    def test_json_passes_non_finite_through(self) -> None:
        self.assertEqual(to_json([float("nan"), float("inf")]), "[NaN,Infinity]")

    def test_update_merges_into_object(self) -> None:
        tree = ConfigTree()
        tree.update("grid", values={"color": "red", "margin": 4})
        tree.update("grid", values={"margin": 8})
        self.assertEqual(tree.get("grid"), {"color": "red", "margin": 8})
        tree.set("label", value="x")
        with self.assertRaises(ConfigPathError):
            tree.update("label", values={"a": 1})

    def test_to_dict_is_a_copy(self) -> None:
        tree = ConfigTree({"grid": {"color": "red"}})
        snapshot = tree.to_dict()
        snapshot["grid"]["color"] = "blue"
        self.assertEqual(tree.get("grid", "color"), "red")


if __name__ == "__main__":
    unittest.main()
