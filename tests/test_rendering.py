import unittest

from innertext import Node, is_being_rendered, is_block_level
from innertext.constants import BLOCK_LEVEL_ELEMENTS, NON_RENDERED_ELEMENTS
from innertext.rendering import toggles_pre


def element(tag, parent=None, **attrs):
    node = Node(tag, attrs)
    if parent is not None:
        parent.append_child(node)
    return node


class TestIsBeingRendered(unittest.TestCase):
    def test_plain_elements_are_rendered(self):
        for tag in ("div", "span", "p", "a", "body", "table"):
            assert is_being_rendered(element(tag)) is True

    def test_non_rendered_elements(self):
        for tag in sorted(NON_RENDERED_ELEMENTS):
            with self.subTest(tag=tag):
                assert is_being_rendered(element(tag)) is False

    def test_tag_comparison_is_case_insensitive(self):
        assert is_being_rendered(element("SCRIPT")) is False

    def test_hidden_attribute_hides(self):
        assert is_being_rendered(element("div", hidden="")) is False
        assert is_being_rendered(element("span", hidden="until-found")) is False

    def test_embed_ignores_hidden_attribute(self):
        assert is_being_rendered(element("embed", hidden="")) is True

    def test_hidden_input(self):
        assert is_being_rendered(element("input", type="hidden")) is False
        assert is_being_rendered(element("input", type="HiDdEn")) is False

    def test_other_inputs_are_rendered(self):
        assert is_being_rendered(element("input", type="text")) is True
        assert is_being_rendered(element("input")) is True

    def test_dialog_needs_open(self):
        assert is_being_rendered(element("dialog")) is False
        assert is_being_rendered(element("dialog", open="")) is True

    def test_form_inside_table_parts_is_hidden(self):
        for parent_tag in ("table", "thead", "tbody", "tfoot", "tr"):
            with self.subTest(parent=parent_tag):
                form = element("form", parent=element(parent_tag))
                assert is_being_rendered(form) is False

    def test_form_elsewhere_is_rendered(self):
        assert is_being_rendered(element("form", parent=element("td"))) is True
        assert is_being_rendered(element("form", parent=element("div"))) is True

    def test_detached_form_is_rendered(self):
        assert is_being_rendered(element("form")) is True


class TestIsBlockLevel(unittest.TestCase):
    def test_block_level_elements(self):
        for tag in sorted(BLOCK_LEVEL_ELEMENTS):
            with self.subTest(tag=tag):
                assert is_block_level(element(tag)) is True

    def test_inline_elements(self):
        for tag in ("span", "a", "em", "br", "img", "td", "caption", "textarea"):
            with self.subTest(tag=tag):
                assert is_block_level(element(tag)) is False

    def test_uppercase_tag_name(self):
        assert is_block_level(element("DIV")) is True


class TestTogglesPre(unittest.TestCase):
    def test_whitespace_preserving_elements(self):
        for tag in ("pre", "textarea", "xmp", "listing", "plaintext"):
            assert toggles_pre(element(tag)) is True
        assert toggles_pre(element("code")) is False
