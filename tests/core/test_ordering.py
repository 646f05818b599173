# SPDX-FileCopyrightText: 2025-2026 Jiri Vyskocil <jiri@vyskocil.com>
#
# SPDX-License-Identifier: Apache-2.0

import math
import random
import unittest

from rucker.core import ordering
from rucker.core.errors import MalformedReference
from rucker.core.reference import parse

PREFERRED_ORDER = [
    "z.com/zzz/bar:_override",
    "a.com/yyy/bar",
    "a.com/yyy/bar:latest",
    "a.com/foo/bar:r9.0",
    "a.com/foo/bar:1.2",
    "b.com/aaa/bar:latest",
    "foo/bar:r10.1",
    "aaa/bar:r9.0",
    "foo/bar:r9.0",
    "zzz/bar:r9.0",
    "zzz/bar:r9.0-alpha",
    "zzz/bar:r9.0-beta",
    "foo/bar:r0.1",
    "a.com/foo/helper",
    "foo/helper",
    "a.com/foo/zazz",
]


class VersionRankTests(unittest.TestCase):
    def test_version_rank_cases(self) -> None:
        cases = [
            ("", -math.inf, "untagged is always fresh"),
            ("latest", -math.inf, "latest is always fresh"),
            ("_override", -math.inf, "force marker"),
            ("_1.5", -math.inf, "force marker wins over digits"),
            ("9.0", -9.0, "plain decimal"),
            ("r10.1", -10.1, "prefixed decimal"),
            ("v2", -2.0, "integer"),
            ("1.2.3", -1.2, "first decimal pair only"),
            ("r9.0-alpha", -9.0, "suffix ignored"),
            ("stable", 0.0, "no digits"),
            ("<none>", 0.0, "none sentinel"),
        ]
        for tag, expected, description in cases:
            with self.subTest(tag=tag, msg=description):
                self.assertEqual(ordering.version_rank(tag), expected)

    def test_ordinariness(self) -> None:
        self.assertEqual(ordering.ordinariness("_x"), -1)
        self.assertEqual(ordering.ordinariness("latest"), 1)
        self.assertEqual(ordering.ordinariness(""), 1)

    def test_registry_rank_explicit_before_absent(self) -> None:
        self.assertLess(ordering.registry_rank("a.com"), ordering.registry_rank(None))
        self.assertLess(ordering.registry_rank("a.com"), ordering.registry_rank("b.com"))
        # Registry text that would beat a string sentinel still ranks as explicit
        self.assertLess(ordering.registry_rank("||||||||"), ordering.registry_rank(None))
        self.assertLess(ordering.registry_rank("~~~"), ordering.registry_rank(None))


class SortKeyTests(unittest.TestCase):
    def test_sort_key_fields(self) -> None:
        key = ordering.sort_key(parse("a.com/foo/bar:r9.0"))
        self.assertEqual(key, ("bar", 1, (0, "a.com"), -9.0, "r9.0", "foo"))

    def test_sort_key_accepts_strings(self) -> None:
        self.assertEqual(ordering.sort_key("bar"), ("bar", 1, (1, ""), -math.inf, "", ""))

    def test_sort_key_propagates_parse_failure(self) -> None:
        with self.assertRaises(MalformedReference):
            ordering.sort_key("Bar")

    def test_preferred_order_from_shuffled_input(self) -> None:
        rng = random.Random(1234)
        for _ in range(5):
            shuffled = PREFERRED_ORDER[:]
            rng.shuffle(shuffled)
            result = [r.raw for r in ordering.sort_references(shuffled)]
            self.assertEqual(result, PREFERRED_ORDER)

    def test_fixed_slug_and_registry_order(self) -> None:
        refs = ["bar:1.2", "bar:r9.0", "bar", "bar:_override", "bar:latest"]
        result = [r.raw for r in ordering.sort_references(refs)]
        self.assertEqual(result, ["bar:_override", "bar", "bar:latest", "bar:r9.0", "bar:1.2"])

    def test_fresh_markers_before_numbers(self) -> None:
        refs = ["foo/bar:1.2", "foo/bar:9.0", "foo/bar:latest", "foo/bar"]
        result = [r.tag for r in ordering.sort_references(refs)]
        self.assertEqual(result, [None, "latest", "9.0", "1.2"])

    def test_force_marker_precedence(self) -> None:
        others = ["latest", "", "9.0", "stable", "r100"]
        for other in others:
            with self.subTest(other=other):
                forced = parse("a.com/foo/bar:_pin")
                plain = parse(f"a.com/foo/bar:{other}" if other else "a.com/foo/bar")
                self.assertLess(ordering.sort_key(forced), ordering.sort_key(plain))

    def test_force_marker_beats_registry(self) -> None:
        self.assertLess(
            ordering.sort_key("foo/bar:_pin"), ordering.sort_key("a.com/foo/bar:latest")
        )

    def test_registry_preference(self) -> None:
        self.assertLess(ordering.sort_key("a.com/foo/bar:1.0"), ordering.sort_key("foo/bar:1.0"))

    def test_same_slug_is_contiguous(self) -> None:
        result = ordering.sort_references(PREFERRED_ORDER[::-1])
        slugs = [r.slug for r in result]
        seen: list[str] = []
        for slug in slugs:
            if not seen or seen[-1] != slug:
                self.assertNotIn(slug, seen)
                seen.append(slug)
        self.assertEqual(seen, ["bar", "helper", "zazz"])

    def test_best_reference(self) -> None:
        self.assertEqual(ordering.best_reference(PREFERRED_ORDER[::-1]).raw, PREFERRED_ORDER[0])
        self.assertEqual(ordering.best_reference(["foo/bar:1.0", "foo/bar:2.0"]).raw, "foo/bar:2.0")
        self.assertIsNone(ordering.best_reference([]))

    def test_group_by_slug(self) -> None:
        groups = ordering.group_by_slug(["foo/helper", "bar:1", "bar:2", "a.com/foo/helper"])
        self.assertEqual(list(groups), ["bar", "helper"])
        self.assertEqual([r.raw for r in groups["bar"]], ["bar:2", "bar:1"])
        self.assertEqual([r.raw for r in groups["helper"]], ["a.com/foo/helper", "foo/helper"])
