"""HTML/XML documents queried with CSS selectors or XPath."""

from __future__ import annotations

from typing import Any, Literal

from anystore.logging import get_logger
from lxml import etree, html

from domquery.core import get_compiler, settings
from domquery.exc import DocumentError, InvalidArgument, InvalidSelector
from domquery.helpers.xpath import node_text
from domquery.logic.compiler import XPathCompiler
from domquery.logic.element import Element
from domquery.model import ExpressionType

log = get_logger(__name__)

DocumentType = Literal["html", "xml"]
DOCUMENT_TYPES = ("html", "xml")


class Document:
    """A parsed HTML or XML document.

    Parsing and XPath evaluation are done by lxml; CSS selectors are turned
    into XPath by the document's compiler (the shared default one unless
    another is given).
    """

    compiler: XPathCompiler
    type: DocumentType | None

    def __init__(
        self,
        content: str | bytes | None = None,
        type: DocumentType | None = None,
        compiler: XPathCompiler | None = None,
    ):
        self.compiler = compiler if compiler is not None else get_compiler()
        self.type = None
        self._root: etree._Element | None = None
        if content is not None:
            self.load(content, type)

    def load(self, content: str | bytes, type: DocumentType | None = None) -> None:
        """Parse ``content`` and replace the current tree.

        Raises:
            InvalidArgument: If ``content`` is not text or the type is unknown.
            DocumentError: If lxml can't parse the content.
        """
        type = type or settings.document_type
        if type not in DOCUMENT_TYPES:
            raise InvalidArgument(f'Unknown document type "{type}"')
        if not isinstance(content, (str, bytes)):
            raise InvalidArgument(
                f"Document content must be str or bytes, "
                f"{content.__class__.__name__} given"
            )
        try:
            if type == "html":
                self._root = self._parse_html(content)
            else:
                self._root = self._parse_xml(content)
        except (etree.ParserError, etree.XMLSyntaxError, ValueError) as exc:
            raise DocumentError(f"Could not parse {type} document: {exc}") from exc
        self.type = type
        log.debug("Loaded document", type=type, root=self._root.tag)

    def load_html(self, content: str | bytes) -> None:
        self.load(content, "html")

    def load_xml(self, content: str | bytes) -> None:
        self.load(content, "xml")

    def _parse_html(self, content: str | bytes) -> etree._Element:
        parser = html.HTMLParser(
            remove_blank_text=settings.remove_blank_text,
            huge_tree=settings.huge_tree,
        )
        return html.document_fromstring(content, parser=parser)

    def _parse_xml(self, content: str | bytes) -> etree._Element:
        parser = etree.XMLParser(
            remove_blank_text=settings.remove_blank_text,
            huge_tree=settings.huge_tree,
        )
        # lxml refuses str input that carries an encoding declaration
        if isinstance(content, str) and content.lstrip().startswith("<?xml"):
            content = content.encode("utf-8")
        return etree.fromstring(content, parser=parser)

    @property
    def is_loaded(self) -> bool:
        return self._root is not None

    @property
    def root(self) -> Element:
        return Element(self._require_root(), self)

    def _require_root(self) -> etree._Element:
        if self._root is None:
            raise DocumentError("The document is empty, load content first")
        return self._root

    def evaluate(self, xpath: str, context: Element | None = None) -> Any:
        """Evaluate an XPath expression and return lxml's raw result."""
        root = self._require_root()
        try:
            if context is None:
                return root.getroottree().xpath(xpath)
            return context.node.xpath(xpath)
        except etree.XPathError as exc:
            log.warning("XPath evaluation failed", xpath=xpath, error=str(exc))
            raise InvalidSelector(f"Invalid XPath expression: {xpath}") from exc

    def _compile(
        self,
        expression: str,
        type: ExpressionType | str,
        context: Element | None,
    ) -> str:
        expression_type = ExpressionType.parse(type)
        relative = context is not None and expression_type == ExpressionType.CSS
        return self.compiler.compile(expression, expression_type, relative=relative)

    def find(
        self,
        expression: str,
        type: ExpressionType | str = ExpressionType.CSS,
        wrap: bool = True,
        context: Element | None = None,
    ) -> list[Any]:
        """All nodes matching a CSS selector or XPath expression.

        Args:
            expression: CSS selector list or XPath expression.
            type: The language of ``expression``.
            wrap: Wrap element nodes into ``Element`` (otherwise the raw lxml
                nodes are returned).
            context: Search below this element instead of the whole document.

        Returns:
            Matches in document order. Text and attribute matches are
            returned as plain strings.
        """
        xpath = self._compile(expression, type, context)
        return self._wrap_all(self.evaluate(xpath, context), wrap)

    def first(
        self,
        expression: str,
        type: ExpressionType | str = ExpressionType.CSS,
        wrap: bool = True,
        context: Element | None = None,
    ) -> Any | None:
        """The first match in document order, or None."""
        xpath = "(%s)[1]" % self._compile(expression, type, context)
        nodes = self._wrap_all(self.evaluate(xpath, context), wrap)
        if not nodes:
            return None
        return nodes[0]

    def first_text(
        self,
        expression: str,
        type: ExpressionType | str = ExpressionType.CSS,
        context: Element | None = None,
    ) -> str | None:
        """Stripped text of the first match, or None."""
        return node_text(self.first(expression, type, wrap=False, context=context))

    def xpath(
        self, expression: str, wrap: bool = True, context: Element | None = None
    ) -> list[Any]:
        return self.find(expression, ExpressionType.XPATH, wrap, context)

    def has(
        self,
        expression: str,
        type: ExpressionType | str = ExpressionType.CSS,
        context: Element | None = None,
    ) -> bool:
        xpath = "count(%s) > 0" % self._compile(expression, type, context)
        return bool(self.evaluate(xpath, context))

    def count(
        self,
        expression: str,
        type: ExpressionType | str = ExpressionType.CSS,
        context: Element | None = None,
    ) -> int:
        xpath = "count(%s)" % self._compile(expression, type, context)
        return int(self.evaluate(xpath, context))

    def text(self) -> str:
        return "".join(self._require_root().itertext())

    def _wrap_all(self, result: Any, wrap: bool) -> list[Any]:
        if not isinstance(result, list):
            result = [result]
        if not wrap:
            return result
        return [self._wrap(node) for node in result]

    def _wrap(self, node: Any) -> Any:
        if isinstance(node, etree._Element):
            return Element(node, self)
        if isinstance(node, str):
            return str(node)
        return node

    def __repr__(self) -> str:
        if self._root is None:
            return "<Document(empty)>"
        return "<Document(%s, %s)>" % (self.type, self._root.tag)
