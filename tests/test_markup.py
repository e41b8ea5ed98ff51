from markup import extract_text
from tokenizer import tokenize


def test_extract_text_drops_tags_scripts_and_styles():
    document = """
    <html><head><style>body { color: red; }</style>
    <script>var hidden = 1;</script></head>
    <body><h1>Hello</h1><p>big <b>world</b></p></body></html>
    """
    assert list(tokenize(extract_text(document))) == ["Hello", "big", "world"]


def test_extract_text_separates_adjacent_elements():
    assert list(tokenize(extract_text("<p>one</p><p>two</p>"))) == ["one", "two"]
