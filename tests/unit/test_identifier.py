"""Test Identifier and Raw values"""

import dataclasses

import pytest
from sqlfrag.fragments import Identifier, Raw


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("", '""'),
        ("a", '"a"'),
        ("a.", '"a".""'),
        ("a.b", '"a"."b"'),
        ('"a', '"a"'),
        ('a".b', '"a"."b"'),
        ('a"."b"', '"a"."b"'),
        (" a . b ", '"a"."b"'),
        ("public.users.id", '"public"."users"."id"'),
    ],
)
def test_identifier_render(name, expected):
    """Test quoting of plain, dotted and pre-quoted names"""
    assert Identifier(name).render() == expected


def test_identifier_parts():
    """Test parts are the cleaned, unquoted segments"""
    assert Identifier('"public". users').parts == ("public", "users")


def test_identifier_from_parts():
    """Test Identifier.from_parts() joins segments with dots"""
    identifier = Identifier.from_parts("public", "users")
    assert identifier.name == "public.users"
    assert identifier.render() == '"public"."users"'


def test_identifier_str_is_rendering():
    """Test str() gives the quoted form"""
    assert str(Identifier("foo.bar")) == '"foo"."bar"'


def test_identifier_immutable():
    """Test Identifier is immutable (frozen dataclass)"""
    identifier = Identifier("foo")
    with pytest.raises(dataclasses.FrozenInstanceError):
        identifier.name = "bar"


def test_identifier_equality_and_hash():
    """Test identifiers compare by name and can be used in sets"""
    assert Identifier("foo") == Identifier("foo")
    assert len({Identifier("foo"), Identifier("foo"), Identifier("bar")}) == 2


class TestRaw:
    """Tests for Raw passthrough values"""

    def test_raw_string_passes_through(self):
        """Raw strings come out unchanged"""
        assert Raw("a").render() == "a"
        assert Raw("a-.0").render() == "a-.0"
        assert Raw("(1 + 1)").render() == "(1 + 1)"

    def test_raw_numbers_become_strings(self):
        """Raw numbers use their decimal string form"""
        assert Raw(1).render() == "1"
        assert Raw(1.5).render() == "1.5"
        assert Raw(10**20).render() == "100000000000000000000"

    def test_raw_is_not_escaped(self):
        """Raw does not quote or escape anything"""
        assert Raw("'; drop table users; --").render() == "'; drop table users; --"

    def test_raw_str(self):
        """str() gives the verbatim value"""
        assert str(Raw(2)) == "2"
