from __future__ import annotations

import sys
import unittest
from collections import deque
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from hateoas_links.services.param_binder import (
    NamedBinder,
    ParamStyle,
    PositionalBinder,
    create_binder,
)
from hateoas_links.services.template_errors import SubResourceOrderError, UnresolvedPlaceholderError


class NamedBinderTests(unittest.TestCase):
    def test_replace_mandatory(self) -> None:
        binder = NamedBinder({"owner": "octo", "repo": "hello", "unused": 1})

        url = binder.replace_mandatory("https://api.github.com/repos/{owner}/{repo}")

        self.assertEqual(url, "https://api.github.com/repos/octo/hello")

    def test_replace_mandatory_converts_values_to_text(self) -> None:
        url = NamedBinder({"id": 42}).replace_mandatory("https://x.com/items/{id}")

        self.assertEqual(url, "https://x.com/items/42")

    def test_none_value_is_not_supplied(self) -> None:
        binder = NamedBinder({"user": None})

        self.assertEqual(binder.replace_mandatory("https://x.com/users/{user}"), "https://x.com/users/{user}")
        self.assertEqual(binder.compute_optional_params(["user"]), {})

    def test_compute_optional_params_keeps_declared_order(self) -> None:
        binder = NamedBinder({"order": "desc", "page": 2, "sort": None, "query": "kara"})

        optional = binder.compute_optional_params(["page", "per_page", "sort", "order"])

        self.assertEqual(list(optional.items()), [("page", 2), ("order", "desc")])

    def test_apply_sub_resources_in_key_order(self) -> None:
        queue = deque(["owner", "repo"])
        binder = NamedBinder({"owner": "o1", "useless": "x", "repo": "r1"})

        url = binder.apply_sub_resources("https://x.com/starred{/owner}{/repo}", queue)

        self.assertEqual(url, "https://x.com/starred/o1/r1")
        self.assertEqual(queue, deque())

    def test_apply_sub_resources_keys_out_of_template_order_raise(self) -> None:
        binder = NamedBinder({"repo": "r1", "owner": "o1"})

        with self.assertRaises(SubResourceOrderError) as ctx:
            binder.apply_sub_resources("https://x.com/starred{/owner}{/repo}", deque(["owner", "repo"]))

        self.assertEqual(ctx.exception.missing, "owner")

    def test_apply_sub_resources_leaves_trailing_slots(self) -> None:
        queue = deque(["owner", "repo"])

        url = NamedBinder({"owner": "o1"}).apply_sub_resources("https://x.com/starred{/owner}{/repo}", queue)

        self.assertEqual(url, "https://x.com/starred/o1{/repo}")
        self.assertEqual(queue, deque(["repo"]))

    def test_apply_sub_resources_requires_left_to_right(self) -> None:
        with self.assertRaises(SubResourceOrderError) as ctx:
            NamedBinder({"repo": "r1"}).apply_sub_resources(
                "https://x.com/starred{/owner}{/repo}", deque(["owner", "repo"])
            )

        self.assertEqual(ctx.exception.missing, "owner")
        self.assertIn('"owner" is missing', str(ctx.exception))


class PositionalBinderTests(unittest.TestCase):
    def test_replace_mandatory_consumes_values_in_order(self) -> None:
        binder = PositionalBinder(["octo", "hello", "extra"])

        url = binder.replace_mandatory("https://api.github.com/repos/{owner}/{repo}")

        self.assertEqual(url, "https://api.github.com/repos/octo/hello")
        self.assertEqual(binder.values, deque(["extra"]))

    def test_replace_mandatory_with_none_raises(self) -> None:
        with self.assertRaises(UnresolvedPlaceholderError) as ctx:
            PositionalBinder([None]).replace_mandatory("https://x.com/search?q={query}")

        self.assertEqual(ctx.exception.placeholders, ["query"])

    def test_compute_optional_params_skips_none_but_keeps_empty_string(self) -> None:
        binder = PositionalBinder([2, None, "", "desc"])

        optional = binder.compute_optional_params(["page", "per_page", "sort", "order"])

        self.assertEqual(list(optional.items()), [("page", 2), ("sort", ""), ("order", "desc")])
        self.assertEqual(binder.values, deque())

    def test_compute_optional_params_past_the_end(self) -> None:
        optional = PositionalBinder(["js"]).compute_optional_params(["type", "page"])

        self.assertEqual(optional, {"type": "js"})

    def test_apply_sub_resources(self) -> None:
        queue = deque(["owner", "repo"])

        url = PositionalBinder(["o1"]).apply_sub_resources("https://x.com/starred{/owner}{/repo}", queue)

        self.assertEqual(url, "https://x.com/starred/o1{/repo}")
        self.assertEqual(queue, deque(["repo"]))

    def test_apply_sub_resources_with_gap_raises(self) -> None:
        with self.assertRaises(SubResourceOrderError) as ctx:
            PositionalBinder([None, "r1"]).apply_sub_resources(
                "https://x.com/starred{/owner}{/repo}", deque(["owner", "repo"])
            )

        self.assertEqual(ctx.exception.missing, "owner")


class CreateBinderTests(unittest.TestCase):
    def test_dispatch_on_shape(self) -> None:
        self.assertEqual(create_binder(None).style, ParamStyle.named)
        self.assertEqual(create_binder({"a": 1}).style, ParamStyle.named)
        self.assertEqual(create_binder([1]).style, ParamStyle.positional)
        self.assertEqual(create_binder(("a",)).style, ParamStyle.positional)

    def test_rejects_other_shapes(self) -> None:
        with self.assertRaises(TypeError):
            create_binder("owner")


if __name__ == "__main__":
    unittest.main()
