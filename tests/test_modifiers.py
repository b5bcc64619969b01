from __future__ import annotations

import math
import unittest

import torch

from ui_modifiers import modifiers as mod
from ui_modifiers.geometry import CENTER, TOP_RIGHT, BoxConstraints, EdgeInsets, Offset, Size
from ui_modifiers.matrix import compose, rotation_z, translation
from ui_modifiers.style.theme import ThemeData
from ui_modifiers.text.component import TextComponent
from ui_modifiers.wrappers import (
    Align,
    AspectRatio,
    Baseline,
    Center,
    ClipOval,
    ClipPath,
    ClipRect,
    ConstrainedBox,
    Expanded,
    FittedBox,
    FractionallySizedBox,
    IntrinsicHeight,
    IntrinsicWidth,
    LimitedBox,
    Offstage,
    Opacity,
    OverflowBox,
    Padding,
    SizedBox,
    SizedOverflowBox,
    Theme,
    Transform,
)


def _cases() -> list[tuple[str, type, dict[str, object]]]:
    return [
        ("padding", Padding, {}),
        ("center", Center, {}),
        ("align", Align, {"alignment": CENTER}),
        ("aspect_ratio", AspectRatio, {"ratio": 2}),
        ("baseline", Baseline, {"baseline": 1.0, "baseline_type": "alphabetic"}),
        ("constrained_box", ConstrainedBox, {"constraints": BoxConstraints()}),
        ("expanded", Expanded, {"flex": 1}),
        ("fitted_box", FittedBox, {}),
        ("fractionally_sized_box", FractionallySizedBox, {}),
        ("intrinsic_height", IntrinsicHeight, {}),
        ("intrinsic_width", IntrinsicWidth, {"step_width": 1.0, "step_height": 1.0}),
        ("limited_box", LimitedBox, {}),
        ("offstage", Offstage, {"offstage": True}),
        ("overflow_box", OverflowBox, {"min_width": 1.0, "max_width": 1.0, "min_height": 1.0, "max_height": 1.0}),
        ("sized_box", SizedBox, {"width": 1.0, "height": 1.0}),
        ("sized_overflow_box", SizedOverflowBox, {"size": Size(1.0, 1.0)}),
        ("transform", Transform, {"matrix": compose(translation(3, 4), rotation_z(0.3)), "alignment": CENTER}),
        ("rotate", Transform, {"angle": 10}),
        ("translate", Transform, {"offset": Offset(10, 20)}),
        ("scale", Transform, {"scale": 2}),
        ("clip_oval", ClipOval, {}),
        ("clip_path", ClipPath, {}),
        ("clip_rect", ClipRect, {}),
        ("opacity", Opacity, {"opacity": 0.5}),
        ("theme", Theme, {"data": ThemeData()}),
    ]


class ModifierKindTests(unittest.TestCase):
    def test_every_modifier_returns_its_wrapper_kind_around_the_same_child(self) -> None:
        for name, kind, params in _cases():
            with self.subTest(modifier=name):
                text = TextComponent(text="Hello")
                wrapped = getattr(mod, name)(text, **params)
                self.assertIs(type(wrapped), kind)
                self.assertIs(wrapped.child, text)
                self.assertEqual(wrapped.children(), (text,))

    def test_method_suffix_matches_free_function(self) -> None:
        for name, kind, params in _cases():
            with self.subTest(modifier=name):
                text = TextComponent(text="Hello")
                wrapped = getattr(text, name)(**params)
                self.assertIs(type(wrapped), kind)
                self.assertIs(wrapped.child, text)

    def test_wrapping_twice_nests_two_distinct_wrappers(self) -> None:
        text = TextComponent(text="Hello")
        inner = mod.padding(text)
        outer = mod.padding(inner)
        self.assertIsNot(outer, inner)
        self.assertIs(type(outer), Padding)
        self.assertIs(outer.child, inner)
        self.assertIs(inner.child, text)

    def test_same_arguments_build_fresh_nodes(self) -> None:
        text = TextComponent(text="Hello")
        first = mod.opacity(text, 0.5)
        second = mod.opacity(text, 0.5)
        self.assertIsNot(first, second)
        self.assertNotEqual(first, second)
        self.assertIs(first.child, second.child)

    def test_original_component_is_untouched(self) -> None:
        text = TextComponent(text="Hello", font_size_px=12.0)
        before = text.to_dict()
        text.clip_rect().scale(scale=3).theme(data=ThemeData()).padding()
        self.assertEqual(text.to_dict(), before)


class ModifierDefaultsTests(unittest.TestCase):
    def setUp(self) -> None:
        self.text = TextComponent(text="Hello")

    def test_padding_defaults_to_eight_on_every_side(self) -> None:
        wrapped = mod.padding(self.text)
        self.assertEqual(wrapped.insets, EdgeInsets(left=8.0, top=8.0, right=8.0, bottom=8.0))

    def test_padding_accepts_explicit_insets(self) -> None:
        wrapped = self.text.padding(EdgeInsets.symmetric(horizontal=4.0))
        self.assertEqual((wrapped.insets.left, wrapped.insets.top), (4.0, 0.0))

    def test_center_factors_unset(self) -> None:
        wrapped = mod.center(self.text)
        self.assertIsNone(wrapped.width_factor)
        self.assertIsNone(wrapped.height_factor)
        self.assertEqual(wrapped.alignment, CENTER)
        self.assertIsInstance(wrapped, Align)

    def test_limited_box_defaults_to_infinity(self) -> None:
        wrapped = mod.limited_box(self.text)
        self.assertTrue(math.isinf(wrapped.max_width))
        self.assertTrue(math.isinf(wrapped.max_height))

    def test_fitted_box_defaults_to_contain_center(self) -> None:
        wrapped = mod.fitted_box(self.text)
        self.assertEqual(wrapped.fit, "contain")
        self.assertEqual(wrapped.alignment, CENTER)

    def test_fractionally_sized_box_defaults(self) -> None:
        wrapped = mod.fractionally_sized_box(self.text)
        self.assertEqual(wrapped.alignment, CENTER)
        self.assertIsNone(wrapped.width_factor)
        self.assertIsNone(wrapped.height_factor)

    def test_overflow_and_sized_box_default_to_center(self) -> None:
        overflow = mod.overflow_box(self.text)
        sized = mod.sized_box(self.text)
        self.assertEqual(overflow.alignment, CENTER)
        self.assertIsNone(overflow.max_width)
        self.assertEqual(sized.alignment, CENTER)
        self.assertIsNone(sized.width)

    def test_sized_box_keeps_alignment(self) -> None:
        wrapped = mod.sized_box(self.text, alignment=TOP_RIGHT, width=3.0)
        self.assertEqual(wrapped.alignment, TOP_RIGHT)
        self.assertEqual(wrapped.width, 3.0)

    def test_intrinsic_width_steps_unset(self) -> None:
        wrapped = mod.intrinsic_width(self.text)
        self.assertIsNone(wrapped.step_width)
        self.assertIsNone(wrapped.step_height)

    def test_clip_behavior_defaults(self) -> None:
        self.assertEqual(mod.clip_oval(self.text).clip_behavior, "anti_alias")
        self.assertEqual(mod.clip_path(self.text).clip_behavior, "anti_alias")
        self.assertEqual(mod.clip_rect(self.text).clip_behavior, "hard_edge")
        self.assertIsNone(mod.clip_oval(self.text).clipper)

    def test_transform_family_hit_tests_through_by_default(self) -> None:
        self.assertTrue(mod.translate(self.text, offset=Offset(1, 1)).transform_hit_tests)
        self.assertTrue(mod.scale(self.text, scale=2).transform_hit_tests)
        self.assertTrue(mod.transform(self.text, matrix=torch.eye(4)).transform_hit_tests)
        self.assertIsNone(mod.transform(self.text, matrix=torch.eye(4)).alignment)

    def test_theme_is_not_top_level_by_default(self) -> None:
        wrapped = mod.theme(self.text, data=ThemeData())
        self.assertFalse(wrapped.is_top_level)


class ModifierScenarioTests(unittest.TestCase):
    def test_aspect_ratio_keeps_ratio(self) -> None:
        text = TextComponent(text="Hello")
        wrapped = mod.aspect_ratio(text, 2)
        self.assertEqual(wrapped.ratio, 2)
        self.assertIs(wrapped.child, text)

    def test_sized_overflow_box(self) -> None:
        text = TextComponent(text="Hello")
        wrapped = mod.sized_overflow_box(text, size=Size(1.0, 1.0))
        self.assertEqual(wrapped.size, Size(1.0, 1.0))
        self.assertEqual(wrapped.alignment, CENTER)

    def test_chain_nests_outermost_last(self) -> None:
        text = TextComponent(text="Hello")
        result = text.clip_oval().translate(offset=Offset(10, 20)).padding()
        self.assertIs(type(result), Padding)
        self.assertIs(type(result.child), Transform)
        self.assertIs(type(result.child.child), ClipOval)
        self.assertIs(result.child.child.child, text)
        self.assertEqual(float(result.child.matrix[0, 3]), 10.0)
        self.assertEqual(float(result.child.matrix[1, 3]), 20.0)

    def test_offstage_and_opacity_forward_values(self) -> None:
        text = TextComponent(text="Hello")
        self.assertTrue(mod.offstage(text, True).is_offstage)
        self.assertEqual(mod.opacity(text, 0.25).alpha, 0.25)
        self.assertEqual(mod.baseline(text, baseline=12.0, baseline_type="ideographic").baseline_offset, 12.0)

    def test_to_dict_describes_nesting(self) -> None:
        text = TextComponent(text="Hello")
        payload = text.opacity(0.5).padding().to_dict()
        self.assertEqual(payload["type"], "Padding")
        self.assertEqual(payload["insets"], {"left": 8.0, "top": 8.0, "right": 8.0, "bottom": 8.0})
        self.assertEqual(payload["child"]["type"], "Opacity")
        self.assertEqual(payload["child"]["alpha"], 0.5)
        self.assertEqual(payload["child"]["child"]["text"], "Hello")


if __name__ == "__main__":
    unittest.main()
