import logging
from functools import cache

from anystore.functools import weakref_cache
from anystore.logging import configure_logging, get_logger
from werkzeug.local import LocalProxy

from domquery.logic.cache import CompilationCache
from domquery.logic.compiler import XPathCompiler
from domquery.settings import Settings

log = get_logger(__name__)


@weakref_cache
def get_settings() -> Settings:
    """Get cached settings instance."""
    return Settings()


@cache
def get_compiler() -> XPathCompiler:
    """Get the process-wide default compiler.

    Documents created without an explicit compiler share this instance and
    therefore its compilation cache, which lives as long as the process.
    """
    settings = get_settings()
    return XPathCompiler(cache=CompilationCache(), use_cache=settings.cache_selectors)


settings = LocalProxy(get_settings)


def init_domquery() -> None:
    """Initialize domquery logging."""
    settings = get_settings()
    if settings.debug:
        configure_logging(level=logging.DEBUG)
    else:
        configure_logging(level=logging.INFO)
    log.debug("domquery initialized", cache_selectors=settings.cache_selectors)
