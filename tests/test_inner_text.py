"""End-to-end innerText tests over trees built by html5lib."""

import unittest
from concurrent.futures import ThreadPoolExecutor
from contextlib import redirect_stdout
from io import StringIO

from innertext import InnerText, Node, inner_text, parse_fragment, parse_html
from innertext.utils import get_body


def text_of(markup):
    return inner_text(parse_fragment(markup))


class TestScenarios(unittest.TestCase):
    def test_spaces_collapse(self):
        assert text_of("<p>Hello   world</p>") == "Hello world"

    def test_paragraph_break_is_two_line_feeds(self):
        assert text_of("<p>One</p><p>Two</p>") == "One\n\nTwo"

    def test_br_inside_block(self):
        assert text_of("<div>A<br>B</div>") == "A\nB"

    def test_hidden_sibling_is_erased(self):
        assert text_of("<div hidden>secret</div>visible") == "visible"

    def test_image_root_is_not_padded(self):
        img = parse_fragment('<img alt=" a cat ">').children[0]
        assert inner_text(img) == "a cat"

    def test_leading_and_trailing_spaces(self):
        assert text_of("<div>  leading and trailing   spaces  </div>") == "leading and trailing spaces"


class TestInnerText(unittest.TestCase):
    def test_non_breaking_space_is_preserved(self):
        assert text_of("<p>Hello&nbsp; world</p>") == "Hello\xa0 world"

    def test_headings_and_paragraphs(self):
        markup = "<h1>Title</h1>\n<p>First paragraph\n   wraps.</p>\n<p>Second.</p>"
        assert text_of(markup) == "Title\n\nFirst paragraph wraps.\n\nSecond."

    def test_inline_elements_do_not_add_breaks(self):
        assert text_of("<div><b>bold</b> <i>italic</i> <a href='#'>link</a></div>") == "bold italic link"

    def test_image_in_text(self):
        assert text_of('<p>Look:<img alt="chart" src="c.png">done</p>') == "Look: chart done"

    def test_image_src_fallback(self):
        assert text_of('<div><img src=" photo.jpg "></div>') == "photo.jpg"

    def test_list_items(self):
        markup = "<ul>\n  <li>One</li>\n  <li>Two</li>\n</ul>\n<p>After</p>"
        assert text_of(markup) == "One\nTwo\n\nAfter"

    def test_nested_blocks(self):
        assert text_of("<div>foo <div>bar</div> baz</div>") == "foo\nbar\nbaz"

    def test_consecutive_br(self):
        assert text_of("<div>a<br><br>b</div>") == "a\n\nb"

    def test_br_and_block_break_combine(self):
        assert text_of("<div>a<br></div><div>b</div>") == "a\n\nb"

    def test_br_next_to_paragraph_break(self):
        assert text_of("<p>a<br></p><p>b</p>") == "a\n\n\nb"

    def test_scripts_styles_and_templates_are_skipped(self):
        markup = "Hello<script>var x = 1;</script><style>p { color: red }</style><template>t</template> world"
        assert text_of(markup) == "Hello world"

    def test_head_content_is_skipped_for_documents(self):
        document = parse_html("<title>Page</title><meta charset=utf-8><body><p>Body text</p>")
        assert inner_text(document) == "Body text"
        assert inner_text(get_body(document)) == "Body text"

    def test_hidden_input_and_closed_dialog(self):
        markup = '<form>Name <input type="hidden" value="x"><dialog>closed</dialog><dialog open>shown</dialog></form>'
        assert text_of(markup) == "Name\nshown"

    def test_form_inside_table_is_hidden(self):
        # Built by hand: the HTML parser never leaves a form directly inside a table
        table = parse_fragment("<table><tbody><tr><td>cell</td></tr></tbody></table>").children[0]
        form = parse_fragment("<form>hidden form</form>").children[0]
        table.append_child(form)
        assert inner_text(table) == "cell"

    def test_outer_element_is_collected_even_when_hidden(self):
        hidden = parse_fragment("<div hidden>shown anyway</div>").children[0]
        assert inner_text(hidden) == "shown anyway"

    def test_text_node_root_is_returned_verbatim(self):
        text = parse_fragment("  raw   text ").children[0]
        assert inner_text(text) == "  raw   text "

    def test_pre_keeps_whitespace(self):
        assert text_of("<pre>\n  a   b\n\tc</pre>") == "  a   b\n\tc"

    def test_pre_keeps_whitespace_of_nested_elements(self):
        assert text_of("<pre><b>  x  </b><div>  y  </div></pre>") == "  x  \n  y  "

    def test_textarea_keeps_whitespace(self):
        markup = "<p>Message:</p><textarea>  two   spaces\n  next</textarea>"
        assert text_of(markup) == "Message:\n\n  two   spaces\n  next"

    def test_xmp_keeps_whitespace(self):
        assert text_of("<div><xmp>a   <b>  c</xmp></div>") == "a   <b>  c"

    def test_words_around_textarea_stay_apart(self):
        assert text_of("<div>a <textarea>b</textarea> c</div>") == "a b c"

    def test_words_after_xmp_stay_apart(self):
        # xmp closes the paragraph, so it and " here" sit in the fragment root
        assert text_of("<p>Type <xmp>x</xmp> here</p>") == "Type\n\nx here"

    def test_deeply_nested_tree(self):
        root = Node("div")
        current = root
        for _ in range(5000):
            current = current.append_child(Node("span"))
        current.append_child(Node.text("deep"))
        assert inner_text(root) == "deep"

    def test_zero_width_space(self):
        assert text_of("<div>a&#8203;\nb</div>") == "a\u200bb"

    def test_br_root(self):
        br = parse_fragment("<br>").children[0]
        assert inner_text(br) == "\n"

    def test_empty_input(self):
        assert text_of("") == ""
        assert text_of("<div>   </div><p>\n</p>") == ""


class TestProperties(unittest.TestCase):
    SAMPLES = [
        "<p>One</p><p>Two</p>",
        "<div><p>a</p></div><div></div>",
        "<section><h2>T</h2><ul><li>x</li><li><p>y</p></li></ul></section>",
        "<p></p><p>only</p><p> </p>",
        "<div><div><div>deep</div></div></div>",
        "<blockquote><p>q</p></blockquote><footer>f</footer>",
        "<table><caption>c</caption><tr><td>v</td></tr></table>",
        "<p hidden>h</p>",
        "text<div>block</div>text",
    ]

    def test_no_leading_or_trailing_forced_breaks(self):
        for markup in self.SAMPLES:
            with self.subTest(markup=markup):
                result = text_of(markup)
                assert not result.startswith("\n")
                assert not result.endswith("\n")

    def test_break_runs_never_exceed_paragraph_count(self):
        for markup in self.SAMPLES:
            with self.subTest(markup=markup):
                assert "\n\n\n" not in text_of(markup)

    def test_hidden_subtree_contributes_nothing(self):
        contents = ["secret", "<p>secret</p>", "<b>se</b>cret<br>", "<img alt='secret'>", "<pre> secret </pre>"]
        for content in contents:
            with self.subTest(content=content):
                assert text_of(f"<p>before</p><div hidden>{content}</div><p>after</p>") == "before\n\nafter"
                assert text_of(f"a<span hidden>{content}</span>b") == "ab"

    def test_embed_ignores_hidden(self):
        assert text_of('<span hidden>gone</span><embed hidden src="x.swf">kept') == "kept"

    def test_only_line_feeds_are_used(self):
        assert "\r" not in text_of("<pre>a\r\nb</pre><p>c\r\nd</p>")


class TestInnerTextObject(unittest.TestCase):
    def test_callable_and_reusable(self):
        extractor = InnerText()
        assert extractor(parse_fragment("<p>a</p>")) == "a"
        assert extractor.inner_text(parse_fragment("<p>b</p>")) == "b"

    def test_debug_prints_trace(self):
        output = StringIO()
        with redirect_stdout(output):
            result = InnerText(debug=True).inner_text(parse_fragment("<div>x</div>"))
        assert result == "x"
        assert "TextCollector: <div>" in output.getvalue()

    def test_parallel_calls_share_nothing(self):
        fragment = parse_fragment("<p>One</p><p>Two</p><div>A<br>B</div>")
        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(inner_text, [fragment] * 16))
        assert results == ["One\n\nTwo\n\nA\nB"] * 16

    def test_tree_is_not_mutated(self):
        fragment = parse_fragment("<p>a <b>b</b></p><img alt=x>")
        before = [(node.tag_name, node.text_content, dict(node.attributes)) for node in fragment.iter_descendants()]
        inner_text(fragment)
        after = [(node.tag_name, node.text_content, dict(node.attributes)) for node in fragment.iter_descendants()]
        assert before == after
