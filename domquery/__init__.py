import logging

from domquery.exc import (
    DocumentError,
    DomQueryException,
    InvalidArgument,
    InvalidSelector,
    UnknownPseudoClass,
)
from domquery.logic.cache import CompilationCache
from domquery.logic.compiler import XPathCompiler
from domquery.logic.document import Document
from domquery.logic.element import Element
from domquery.logic.parser import SelectorParser
from domquery.model import ExpressionType, SelectorSegment
from domquery.settings import VERSION

__version__ = VERSION

# Silence noisy third-party loggers
for logger_name in ("fsspec",):
    logging.getLogger(logger_name).setLevel(logging.WARNING)

__all__ = [
    "CompilationCache",
    "Document",
    "DocumentError",
    "DomQueryException",
    "Element",
    "ExpressionType",
    "InvalidArgument",
    "InvalidSelector",
    "SelectorParser",
    "SelectorSegment",
    "UnknownPseudoClass",
    "XPathCompiler",
]
