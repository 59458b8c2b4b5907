from soupwalk.dom import Comment, Element, Text
from soupwalk.text import full_text, shallow_text


def test_text_stops_at_first_text_child(doc):
    # <li>To a <a href="hello.jsp">JSP page</a> right?</li>
    li = doc.find("ul").find("li")
    assert li.text() == "To a "


def test_full_text_crosses_nested_elements(doc):
    li = doc.find("ul").find("li")
    assert li.full_text() == "To a JSP page right?"


def test_text_ignores_nested_text(doc):
    h1 = doc.find("div", "id", "5").find("h1")
    assert h1.text() == ""
    assert h1.full_text() == ""


def test_text_skips_whitespace_children(doc):
    # <div id="0"> only has whitespace text of its own
    assert doc.find("div", "id", "0").text() == ""


def test_text_is_not_trimmed(doc):
    p = doc.find("p")
    assert p.text() == "This is the home page for the HelloWorld Web application. "


def test_text_of_text_node_is_empty(doc):
    text_node = doc.find("div", "id", "0").next_sibling()
    assert text_node.text() == ""


def test_full_text_keeps_whitespace(doc):
    assert doc.find("div", "id", "3").full_text() == "\n      Last one\n    "


def test_shallow_text_after_whitespace_and_elements():
    p = Element("p")
    p.append_child(Text("  \n\t"))
    b = p.append_child(Element("b"))
    b.append_child(Text("bold"))
    p.append_child(Comment("note"))
    p.append_child(Text(" tail "))

    assert shallow_text(p) == " tail "


def test_shallow_text_without_text_children():
    p = Element("p")
    p.append_child(Comment("only a comment"))
    assert shallow_text(p) == ""


def test_full_text_skips_comments():
    div = Element("div")
    div.append_child(Text("a"))
    div.append_child(Comment("hidden"))
    span = div.append_child(Element("span"))
    span.append_child(Text("b"))
    span.append_child(Comment("hidden"))
    div.append_child(Text("c"))

    assert full_text(div) == "abc"


def test_full_text_deep_tree():
    root = Element("div")
    node = root
    for _ in range(5000):
        node = node.append_child(Element("span"))
    node.append_child(Text("bottom"))

    assert full_text(root) == "bottom"


def test_vertical_tab_is_not_whitespace():
    div = Element("div")
    div.append_child(Text("\v"))
    div.append_child(Text("after"))

    assert shallow_text(div) == "\v"


def test_text_skips_ascii_whitespace_runs():
    div = Element("div")
    div.append_child(Text(" \t\r\n\f"))
    div.append_child(Text("after"))

    assert shallow_text(div) == "after"
