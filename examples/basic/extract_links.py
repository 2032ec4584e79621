"""Pull every link target out of messy crawled HTML."""

from fuzzyml import NullListener, scan


class Links(NullListener):
    def __init__(self) -> None:
        self.hrefs: list[str] = []

    def on_tag(self, name, attributes):
        if name == "a" and "href" in attributes:
            self.hrefs.append(attributes["href"])


html = """<HTML><body>
<A HREF="/about">About</a>
<a href='/q?x=1&amp;y=2'>Query</A>
<a href=/plain>Unquoted
<!-- <a href="/commented-out"> -->
<a title="broken
href="/after-break">Broken quote</a>
"""

links = Links()
lexer = scan(html, links)
print(links.hrefs)
print("Ended in state:", lexer.state.name)
