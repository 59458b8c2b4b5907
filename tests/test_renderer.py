import pytest

import soupwalk
from soupwalk import Config, Error, ErrorType, Renderer
from soupwalk.dom import Comment, Document, DocumentType, Element, Text


def test_html_of_element(doc):
    li = doc.find("ul").find("li")
    assert li.html() == '<li>To a <a href="hello.jsp">JSP page</a> right?</li>'


def test_html_of_document_root():
    root = soupwalk.parse('<div id="a" class="x y"><p>hi &amp; bye</p><!--c--></div>')
    assert root.html() == (
        '<html><head></head><body>'
        '<div id="a" class="x y"><p>hi &amp; bye</p><!--c--></div>'
        '</body></html>'
    )


def test_round_trip_preserves_structure(doc):
    again = soupwalk.parse(doc.html())

    def shape(root):
        return [(r.value, r.attributes(), r.full_text()) for r in root.find_all("")]

    assert shape(again) == shape(doc)


def test_void_elements(doc):
    root = soupwalk.parse('<p>a<br>b<img src="x.png"></p>')
    assert root.find("p").html() == '<p>a<br>b<img src="x.png"></p>'


def test_raw_text_elements_are_not_escaped():
    root = soupwalk.parse("<script>if (a < b) {}</script>")
    assert root.find("script").html() == "<script>if (a < b) {}</script>"


def test_text_node_html_is_escaped():
    root = soupwalk.parse("<p>1 &lt; 2</p>")
    assert root.find("p").children()[0].html() == "1 &lt; 2"


def test_repeated_attributes_render_first_value():
    element = Element("div", [("id", "one"), ("id", "two")])
    element.append_child(Text("x"))
    assert Renderer().render(element) == '<div id="one">x</div>'


def test_render_document_with_doctype():
    document = Document()
    document.append_child(DocumentType("html"))
    document.append_child(Comment(" c "))
    html = document.append_child(Element("html"))
    html.append_child(Element("body"))

    assert Renderer().render(document) == "<!DOCTYPE html><!-- c --><html><body></body></html>"


def test_renderer_options_from_config(tmp_path):
    config = Config(str(tmp_path / "unused.json"))
    config.set("renderer.use_trailing_solidus", True)
    root = soupwalk.parse("<p><br></p>", config)
    assert root.find("p").html() == "<p><br /></p>"


def test_html_swallows_render_failures(doc, tmp_path):
    config = Config(str(tmp_path / "unused.json"))
    config.set("renderer.quote_attr_values", "bogus")
    root = soupwalk.parse('<a href="x">link</a>', config)
    link = root.find("a")

    assert link.html() == ""
    with pytest.raises(ValueError):
        link.render()


def test_failure_wrapper_has_no_html(doc):
    missing = doc.find("bogus")
    assert missing.html() == ""
    with pytest.raises(Error) as excinfo:
        missing.render()
    assert excinfo.value.type == ErrorType.NODE_ELEMENT_EMPTY
