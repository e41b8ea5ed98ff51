from bs4 import BeautifulSoup


def extract_text(document):
    """Returns the visible text of an HTML document, without tags."""
    soup = BeautifulSoup(document, "html.parser")
    for tag in soup(["script", "style"]):
        tag.decompose()
    return soup.get_text(" ")
