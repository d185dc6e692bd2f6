import utils.text_processing as text_processing
from utils.text_processing import TextProcessor, unique_in_order


def test_unique_in_order_keeps_first_occurrence():
    assert unique_in_order(["b", "a", "b", "c", "a"]) == ("b", "a", "c")
    assert unique_in_order([]) == ()


def test_sanitize_removes_every_occurrence():
    processor = TextProcessor()
    markup = (
        "<p>keep</p><script>one</script><p>also</p><script src='x.js'></script>"
        "<style media='print'>two</style><svg><path/></svg><!-- three --><!---->"
    )

    assert processor.sanitize_markup(markup) == "<p>keep</p><p>also</p>"


def test_sanitize_is_non_greedy():
    processor = TextProcessor()
    markup = "<script>a</script>between<script>b</script>"

    assert processor.sanitize_markup(markup) == "between"


def test_sanitize_leaves_unterminated_blocks():
    processor = TextProcessor()
    assert processor.sanitize_markup("<script>never closed") == "<script>never closed"


def test_sanitize_handles_empty_input():
    assert TextProcessor().sanitize_markup("") == ""


def test_visible_text_nodes_skip_attributes_and_doctype():
    processor = TextProcessor()
    nodes = processor.visible_text_nodes(
        '<!DOCTYPE html><a href="tel:+15550000000" title="+15551111111">Call &amp; ask</a><p>+1 555</p>'
    )

    assert nodes == ["Call & ask", "+1 555"]


def test_visible_text_nodes_fall_back_to_tag_stripping(monkeypatch):
    def broken_parser(*args, **kwargs):
        raise RuntimeError("parser exploded")

    monkeypatch.setattr(text_processing, "BeautifulSoup", broken_parser)

    nodes = TextProcessor().visible_text_nodes("<p>+1 555 000 1111</p><p>A &amp; B</p>")

    assert nodes == ["+1 555 000 1111", "A & B"]


def test_normalize_whitespace():
    processor = TextProcessor()
    assert processor.normalize_whitespace("  +1\t555 \n 000  ") == "+1 555 000"
    assert processor.normalize_whitespace("") == ""
