from svgpaths.xml import EndTag, StartTag, iter_tags


def test_nested_elements_in_order():
    tags = list(iter_tags('<svg width="10"><g></g></svg>'))
    assert tags == [
        StartTag("svg", (("width", "10"),)),
        StartTag("g"),
        EndTag("g"),
        EndTag("svg"),
    ]


def test_self_closing_with_attributes_gives_start_and_end():
    tags = list(iter_tags('<rect x="1" y="2"/>'))
    assert tags == [StartTag("rect", (("x", "1"), ("y", "2"))), EndTag("rect")]


def test_single_quoted_values_and_spaces_around_equals():
    tags = list(iter_tags("<path d = 'M0 0' id='p'/>"))
    assert tags[0] == StartTag("path", (("d", "M0 0"), ("id", "p")))


def test_comments_and_declarations_are_skipped():
    text = '<?xml version="1.0"?><!-- note --><!DOCTYPE svg><svg></svg>'
    assert list(iter_tags(text)) == [StartTag("svg"), EndTag("svg")]


def test_text_content_is_dropped():
    assert list(iter_tags("hello <a>text</a> world")) == [StartTag("a"), EndTag("a")]


def test_unterminated_tag_is_ignored():
    assert list(iter_tags('<g><rect x="1"')) == [StartTag("g")]


def test_attribute_without_quote_is_dropped():
    tags = list(iter_tags("<g id=plain>"))
    assert tags == [StartTag("g")]


def test_duplicate_attributes_are_kept():
    tags = list(iter_tags('<g a="1" a="2">'))
    assert tags[0].attrs == (("a", "1"), ("a", "2"))


def test_attribute_count_is_limited():
    attrs = " ".join(f'a{i}="{i}"' for i in range(200))
    (tag,) = list(iter_tags(f"<g {attrs}>"))
    assert len(tag.attrs) == 127
    assert tag.attrs[0] == ("a0", "0")
    assert tag.attrs[-1] == ("a126", "126")


def test_empty_input_yields_nothing():
    assert list(iter_tags("")) == []