# tests/test_naming.py
"""
Tests for the naming-convention predicates.
"""

import pytest

from namelint.naming import is_camel_case, is_pascal_case, is_shout_case


class TestCamelCase:

    @pytest.mark.parametrize("name", ["value", "fooBar", "x", "item2", "_private", "$el", "parseHTML"])
    def test_accepts(self, name):
        assert is_camel_case(name)

    @pytest.mark.parametrize("name", ["FooBar", "foo_bar", "MAX", "", "_", "2fast", "foo-bar"])
    def test_rejects(self, name):
        assert not is_camel_case(name)


class TestPascalCase:

    @pytest.mark.parametrize("name", ["Foo", "FooBar", "HTMLParser", "MAX", "A", "_Base"])
    def test_accepts(self, name):
        assert is_pascal_case(name)

    @pytest.mark.parametrize("name", ["foo", "fooBar", "Foo_Bar", "", "$"])
    def test_rejects(self, name):
        assert not is_pascal_case(name)


class TestShoutCase:

    @pytest.mark.parametrize("name", ["MAX", "MAX_SIZE", "HTTP2", "A", "RETRY_3_TIMES", "_PRIVATE"])
    def test_accepts(self, name):
        assert is_shout_case(name)

    @pytest.mark.parametrize("name", ["Max", "max_size", "MAX__SIZE", "MAX_", "_", "", "2MAX"])
    def test_rejects(self, name):
        assert not is_shout_case(name)
