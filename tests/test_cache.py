import pytest

from domquery import query
from domquery.exc import InvalidArgument
from domquery.logic.cache import CompilationCache


class TestCompilationCache:
    def test_get_set(self):
        cache = CompilationCache()
        assert cache.get("a") is None
        cache.set("a", "//a")
        assert cache.get("a") == "//a"
        assert "a" in cache
        assert len(cache) == 1
        assert list(cache) == ["a"]

    def test_initial_table(self):
        cache = CompilationCache({"a": "//a"})
        assert cache.to_dict() == {"a": "//a"}

    def test_replace(self):
        cache = CompilationCache({"a": "//a"})
        cache.replace({"b": "//b"})
        assert cache.to_dict() == {"b": "//b"}

    def test_to_dict_is_a_copy(self):
        cache = CompilationCache({"a": "//a"})
        cache.to_dict()["b"] = "//b"
        assert "b" not in cache

    @pytest.mark.parametrize("value", ["foo", ["a", "//a"], None, 42])
    def test_replace_invalid(self, value):
        cache = CompilationCache()
        with pytest.raises(InvalidArgument):
            cache.replace(value)

    def test_replace_invalid_entries(self):
        with pytest.raises(InvalidArgument):
            CompilationCache({"a": 1})


class TestModuleCache:
    def test_get_compiled_cache(self):
        selector = "#foo .bar baz"
        xpath = (
            "//*[@id='foo']"
            "//*[contains(concat(' ', normalize-space(@class), ' '), ' bar ')]"
            "//baz"
        )
        query.compile(selector)
        assert query.get_compiled_cache() == {selector: xpath}

    def test_set_compiled_cache(self):
        compiled = {"#foo .bar baz": "//section"}
        query.set_compiled_cache(compiled)
        assert query.get_compiled_cache() == compiled
        assert query.compile("#foo .bar baz") == "//section"

    def test_set_compiled_cache_invalid(self):
        with pytest.raises(InvalidArgument):
            query.set_compiled_cache("foo")

    def test_clearing_recompiles(self):
        first = query.compile("ul > li")
        query.set_compiled_cache({})
        assert query.compile("ul > li") == first
