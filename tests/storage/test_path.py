"""Tests for the path codec (split_path / join_path)."""

import pytest as _pytest

import keytree.errors as errors
import keytree.storage as storage

K = storage.Segment.key
I = storage.Segment.index  # noqa: E741


class TestSplitPathAccepts:
    """Valid keys parse into the expected segments."""

    @_pytest.mark.parametrize(
        ("key", "expected"),
        [
            ("a", (K("a"),)),
            ("a.b", (K("a"), K("b"))),
            ("[0]", (I("0"),)),
            ("[0][1]", (I("0"), I("1"))),
            ("a[0]", (K("a"), I("0"))),
            ("a[0].b", (K("a"), I("0"), K("b"))),
            ("a[0][0]", (K("a"), I("0"), I("0"))),
            ("[0].x", (I("0"), K("x"))),
            ("a.b[10].c_d-e", (K("a"), K("b"), I("10"), K("c_d-e"))),
            ("a0.0a", (K("a0"), K("0a"))),
            ("a[007]", (K("a"), I("007"))),
        ],
    )
    def test_parses_segments(self, key: str, expected: tuple[storage.Segment, ...]) -> None:
        """Each valid key yields its ordered segments."""
        assert storage.split_path(key) == expected

    def test_index_element_is_text(self) -> None:
        """Index segments keep their digits as text."""
        (segment,) = storage.split_path("[12]")
        assert segment.kind is storage.SegmentKind.INDEX
        assert segment.element == "12"


class TestSplitPathRejects:
    """Grammar violations raise InvalidKeySyntaxError."""

    @_pytest.mark.parametrize(
        "key",
        [
            "",
            " ",
            ".",
            "..",
            "[",
            "[[",
            "]",
            "]]",
            "[]",
            "[0][",
            "[0]]",
            "[[0]]",
            "[.]",
            "[a]",
            "[a.b]",
            "[0.1]",
            "[-1]",
            "[ 1]",
            "a.",
            "a..b",
            "a[",
            "a]",
            "a.[0]",
            "a.[0].b",
            "a[0]..b",
            "a.[0].[0]",
            "a[0]b",
            "[0]x",
            ".a",
            "a b",
            "0",
            "a.0",
            "a.0.b",
            "a[0].b.0",
            "0[0]",
        ],
    )
    def test_rejects(self, key: str) -> None:
        """Invalid key raises with the offending key attached."""
        with _pytest.raises(errors.InvalidKeySyntaxError) as exc_info:
            storage.split_path(key)
        assert exc_info.value.key == key
        assert str(exc_info.value) == f"invalid key '{key}'"

    def test_error_is_value_error(self) -> None:
        """InvalidKeySyntaxError can be caught as ValueError."""
        with _pytest.raises(ValueError):
            storage.split_path("a..b")


class TestJoinPath:
    """Rendering segments back into keys."""

    @_pytest.mark.parametrize(
        "key",
        [
            "a",
            "a.b",
            "[0]",
            "[0][1]",
            "a[0]",
            "a[0].b",
            "a[0][0]",
            "a.b[0].c.d[1][2].e",
        ],
    )
    def test_round_trip(self, key: str) -> None:
        """join_path is the inverse of split_path."""
        assert storage.join_path(storage.split_path(key)) == key

    def test_key_after_index_gets_dot(self) -> None:
        """A key following an index is introduced by a dot."""
        assert storage.join_path([K("a"), I("0"), K("b")]) == "a[0].b"

    def test_empty_sequence(self) -> None:
        """No segments render as an empty string."""
        assert storage.join_path([]) == ""

    def test_index_from_int(self) -> None:
        """Segment.index accepts an int and stores it as text."""
        assert storage.join_path([K("s"), I(3)]) == "s[3]"
