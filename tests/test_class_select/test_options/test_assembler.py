"""Tests for assembling grouped class options per context."""

import pytest

from class_select.model import OptionGroup, OptionSet
from class_select.options import ContextLabels, TextProvider, assemble_options
from class_select.registry import build_registry

MARKER = "custom_class"
PREFIX = "custom_class"


def assemble(text: str, context_id: str, **kwargs) -> OptionSet:
    texts = kwargs.pop("texts", TextProvider())
    labels = kwargs.pop("labels", ContextLabels(texts=texts))
    return assemble_options(build_registry(text, MARKER), context_id, labels, PREFIX, texts)


def group_keys(option_set: OptionSet) -> list[str]:
    return [g.key for g in option_set.groups]


def all_classes(option_set: OptionSet) -> set[str]:
    return {name for g in option_set.groups for name in g.options}


# ---------------------------------------------------------------------------
# Empty results
# ---------------------------------------------------------------------------


class TestEmptyResults:
    @pytest.mark.parametrize("context_id", ["row", "photo", "rich-text", ""])
    def test_empty_source(self, context_id):
        option_set = assemble("", context_id)
        assert option_set == OptionSet()
        assert option_set.is_empty
        assert option_set.placeholder is None

    def test_only_other_contexts_declared(self):
        option_set = assemble('[custom_class class="a" scope="photo"]', "row")
        assert option_set.is_empty

    def test_everything_excluded(self):
        text = '[custom_class class="a" scope="global, !row"]'
        option_set = assemble(text, "row")
        assert option_set.is_empty


# ---------------------------------------------------------------------------
# Scoping
# ---------------------------------------------------------------------------


class TestScoping:
    def test_global_group(self):
        option_set = assemble('[custom_class class="a" label="A"]', "row")
        assert option_set.groups == (
            OptionGroup(
                key="optgroup-custom_class-global",
                label="Custom global classes:",
                options={"a": "A"},
            ),
        )
        assert option_set.placeholder == "- Choose a class -"

    def test_context_group_uses_context_name(self):
        option_set = assemble('[custom_class class="a" scope="row"]', "row")
        assert option_set.groups == (
            OptionGroup(
                key="optgroup-custom_class-row",
                label="Custom Row classes:",
                options={"a": "a"},
            ),
        )

    def test_unknown_context_named_by_id(self):
        option_set = assemble('[custom_class class="a" scope="photo"]', "photo")
        assert option_set.groups[0].label == "Custom photo classes:"

    def test_registered_context_name(self):
        texts = TextProvider()
        labels = ContextLabels({"photo": "Photo"}, texts=texts)
        option_set = assemble(
            '[custom_class class="a" scope="photo"]', "photo", texts=texts, labels=labels
        )
        assert option_set.groups[0].label == "Custom Photo classes:"

    def test_context_group_listed_before_global(self):
        text = '[custom_class class="a"][custom_class class="b" scope="row"]'
        option_set = assemble(text, "row")
        assert group_keys(option_set) == [
            "optgroup-custom_class-row",
            "optgroup-custom_class-global",
        ]

    def test_exclusion_overrides_global(self):
        text = """
        [custom_class class="shared" scope="global"]
        [custom_class class="shared" scope="!rowX"]
        [custom_class class="other"]
        """
        for context_id in ("row", "photo", "rowx-wide"):
            assert "shared" in all_classes(assemble(text, context_id))
        for context_id in ("rowx", "rowX"):
            option_set = assemble(text, context_id)
            assert "shared" not in all_classes(option_set)
            assert "other" in all_classes(option_set)

    def test_mixed_case_context_matches_lowercased_scope(self):
        text = '[custom_class class="a" scope="Row"]'
        option_set = assemble(text, "ROW")
        assert option_set.groups[0].options == {"a": "a"}
        assert option_set.groups[0].key == "optgroup-custom_class-ROW"

    def test_exclusion_does_not_touch_context_group(self):
        text = '[custom_class class="a" scope="row, !row"]'
        option_set = assemble(text, "row")
        assert option_set.groups[0].options == {"a": "a"}

    def test_comment_declaration_end_to_end(self):
        text = '/* [custom_class class="my-cls" label="My Class" scope="global, !rich-text" /] */'

        excluded = assemble(text, "rich-text")
        assert "optgroup-custom_class-global" not in group_keys(excluded)
        assert "my-cls" not in all_classes(excluded)

        included = assemble(text, "row")
        global_group = included.groups[0]
        assert global_group.key == "optgroup-custom_class-global"
        assert global_group.options == {"my-cls": "My Class"}


# ---------------------------------------------------------------------------
# Custom groups
# ---------------------------------------------------------------------------


class TestCustomGroups:
    def test_grouped_classes_leave_global(self):
        text = """
        [custom_class class="shadow" label="Shadow" group="Effects"]
        [custom_class class="blur" label="Blur" group="Effects"]
        [custom_class class="plain"]
        """
        option_set = assemble(text, "row")
        assert group_keys(option_set) == [
            "optgroup-custom_class-global",
            "optgroup-custom_class-effects",
        ]
        assert option_set.groups[0].options == {"plain": "plain"}
        assert option_set.groups[1].label == "Effects"
        assert option_set.groups[1].options == {"blur": "Blur", "shadow": "Shadow"}

    def test_only_grouped_classes_no_global_group(self):
        text = '[custom_class class="a" group="Effects"][custom_class class="b" group="Effects"]'
        option_set = assemble(text, "row")
        assert group_keys(option_set) == ["optgroup-custom_class-effects"]
        assert option_set.groups[0].options == {"a": "a", "b": "b"}

    def test_excluded_class_removed_from_group(self):
        text = """
        [custom_class class="a" group="Effects"]
        [custom_class class="b" group="Effects" scope="global, !row"]
        """
        option_set = assemble(text, "row")
        assert option_set.groups[0].options == {"a": "a"}

    def test_group_emptied_by_exclusion_dropped(self):
        text = """
        [custom_class class="a" group="Effects" scope="global, !row"]
        [custom_class class="b"]
        """
        option_set = assemble(text, "row")
        assert group_keys(option_set) == ["optgroup-custom_class-global"]

    def test_group_not_filtered_by_positive_context(self):
        text = '[custom_class class="a" group="Effects" scope="photo"]'
        option_set = assemble(text, "row")
        # No global, contextual or excluded classes for "row": nothing offered.
        assert option_set.is_empty

        text += '[custom_class class="b"]'
        option_set = assemble(text, "row")
        assert option_set.groups[-1].options == {"a": "a"}

    def test_class_may_appear_in_several_groups(self):
        text = """
        [custom_class class="a" group="One"]
        [custom_class class="a" group="Two"]
        """
        option_set = assemble(text, "row")
        assert group_keys(option_set) == [
            "optgroup-custom_class-two",
            "optgroup-custom_class-one",
        ]
        assert all(g.options == {"a": "a"} for g in option_set.groups)

    def test_full_display_order(self):
        text = """
        [custom_class class="a" group="Alpha"]
        [custom_class class="b" group="Beta"]
        [custom_class class="c"]
        [custom_class class="d" scope="row"]
        """
        option_set = assemble(text, "row")
        assert group_keys(option_set) == [
            "optgroup-custom_class-row",
            "optgroup-custom_class-global",
            "optgroup-custom_class-beta",
            "optgroup-custom_class-alpha",
        ]

    def test_group_label_escaped(self):
        text = '[custom_class class="a" group="Fish & Chips"]'
        option_set = assemble(text, "row")
        assert option_set.groups[0].key == "optgroup-custom_class-fish-chips"
        assert option_set.groups[0].label == "Fish &amp; Chips"


# ---------------------------------------------------------------------------
# Texts
# ---------------------------------------------------------------------------


class TestTexts:
    def test_overridden_texts(self):
        texts = TextProvider(
            {
                "label-optgroup-global": "Site-wide:",
                "label-optgroup-module": "Only for {name}:",
                "label-option-empty": "(none)",
            }
        )
        text = '[custom_class class="a"][custom_class class="b" scope="row"]'
        option_set = assemble(text, "row", texts=texts)
        assert [g.label for g in option_set.groups] == ["Only for Row:", "Site-wide:"]
        assert option_set.placeholder == "(none)"

    def test_module_label_without_placeholder(self):
        texts = TextProvider({"label-optgroup-module": "Context classes"})
        option_set = assemble('[custom_class class="a" scope="row"]', "row", texts=texts)
        assert option_set.groups[0].label == "Context classes"

    def test_printf_style_placeholder(self):
        texts = TextProvider({"label-optgroup-module": "Custom %s classes:"})
        option_set = assemble('[custom_class class="a" scope="row"]', "row", texts=texts)
        assert option_set.groups[0].label == "Custom Row classes:"

    def test_printf_placeholder_filled_once(self):
        texts = TextProvider({"label-optgroup-module": "%s / %s"})
        option_set = assemble('[custom_class class="a" scope="photo"]', "photo", texts=texts)
        assert option_set.groups[0].label == "photo / %s"
