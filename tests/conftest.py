import pytest

from domquery.core import get_compiler
from domquery.logic.cache import CompilationCache
from domquery.logic.compiler import XPathCompiler
from domquery.logic.document import Document
from domquery.logic.parser import SelectorParser

POSTS_HTML = """
<html>
  <body>
    <div id="main">
      <div class="post first">
        <h2>One</h2>
        <p>First post</p>
      </div>
      <div class="post">
        <h2>Two</h2>
        <p>Second post</p>
      </div>
      <div class="post last">
        <h2>Three</h2>
        <p>Third post</p>
      </div>
    </div>
  </body>
</html>
"""

LIST_HTML = """
<html>
  <body>
    <ul id="menu">
      <li class="item"><a href="/one" title="One">one</a></li>
      <li class="item active"><a href="/two">two</a></li>
      <li class="item"><a>three</a></li>
      <li class="item"><a href="/four">four</a></li>
      <li class="item"><a href="/five" data-id="5">five</a></li>
    </ul>
    <input type="text" name="q" disabled>
    <div style="Color: blue; border: 1px solid black; color: red">styled</div>
  </body>
</html>
"""

CATALOG_XML = """<?xml version="1.0" encoding="UTF-8"?>
<catalog>
  <book id="bk101" lang="en"><title>XML Guide</title><price>44.95</price></book>
  <book id="bk102" lang="de"><title>Midnight Rain</title><price>5.95</price></book>
</catalog>
"""


@pytest.fixture(autouse=True)
def reset_default_cache():
    """Keep the process-wide compilation cache from leaking between tests."""
    get_compiler().cache.clear()
    yield
    get_compiler().cache.clear()


@pytest.fixture(scope="function")
def compiler():
    """Fresh compiler with its own cache for each test function."""
    return XPathCompiler(cache=CompilationCache())


@pytest.fixture(scope="module")
def parser():
    return SelectorParser()


@pytest.fixture(scope="function")
def posts(compiler):
    return Document(POSTS_HTML, compiler=compiler)


@pytest.fixture(scope="function")
def menu(compiler):
    return Document(LIST_HTML, compiler=compiler)


@pytest.fixture(scope="function")
def catalog(compiler):
    return Document(CATALOG_XML, type="xml", compiler=compiler)


@pytest.fixture(scope="module")
def posts_html():
    return POSTS_HTML
