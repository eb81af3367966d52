"""Tests for the in-memory TextBuffer host."""

import pytest

from smartequals import EditorHost, TextBuffer


class TestTextBuffer:
    def test_implements_protocol(self) -> None:
        assert isinstance(TextBuffer(), EditorHost)

    def test_default_cursor_at_end(self) -> None:
        assert TextBuffer("abc").cursor == 3

    def test_invalid_cursor(self) -> None:
        with pytest.raises(ValueError):
            TextBuffer("abc", cursor=4)

    def test_char_before(self) -> None:
        buf = TextBuffer("ab", cursor=2)
        assert buf.char_before() == "b"
        assert buf.char_before(2) == "a"
        assert buf.char_before(3) is None
        assert buf.char_before(0) is None

    def test_text_before(self) -> None:
        buf = TextBuffer("x <- ")
        assert buf.text_before(3) == "<- "
        assert buf.text_before(6) is None
        assert buf.text_before(0) == ""

    def test_insert_and_delete(self) -> None:
        buf = TextBuffer("ac", cursor=1)
        buf.insert("b")
        assert (buf.text, buf.cursor) == ("abc", 2)
        buf.delete_backward(2)
        assert (buf.text, buf.cursor) == ("c", 0)

    def test_negative_delete(self) -> None:
        with pytest.raises(ValueError):
            TextBuffer("a").delete_backward(-1)

    def test_move_to(self) -> None:
        buf = TextBuffer("abc")
        buf.move_to(1)
        assert buf.char_before() == "a"
        with pytest.raises(ValueError):
            buf.move_to(9)

    def test_language(self) -> None:
        assert TextBuffer(language="R").is_target_language() is True
        assert TextBuffer(language="python").is_target_language() is False
        assert TextBuffer(language="julia", target_languages={"julia"}).is_target_language()

    def test_string_or_comment(self) -> None:
        assert TextBuffer('x <- "a ').in_string_or_comment() is True
        assert TextBuffer("x <- ").in_string_or_comment() is False


class TestNarrow:
    def test_hides_text_before_region(self) -> None:
        buf = TextBuffer("> x ")
        with buf.narrow(2) as narrowed:
            assert narrowed is buf
            assert buf.region_start == 2
            assert buf.char_before(3) is None
            assert buf.text_before(2) == "x "
            assert buf.text_before(3) is None
        assert buf.region_start == 0
        assert buf.char_before(3) == " "

    def test_delete_stops_at_region(self) -> None:
        buf = TextBuffer("> ab")
        with buf.narrow(2):
            buf.delete_backward(5)
        assert buf.text == "> "

    def test_cursor_cannot_leave_region(self) -> None:
        buf = TextBuffer("> ab")
        with buf.narrow(2), pytest.raises(ValueError):
            buf.move_to(1)

    def test_string_scan_starts_at_region(self) -> None:
        # An unbalanced quote in console output does not leak into the input
        buf = TextBuffer('[1] "a\n> x ')
        assert buf.in_string_or_comment() is True
        with buf.narrow(buf.text.index(">")):
            assert buf.in_string_or_comment() is False

    def test_invalid_narrow(self) -> None:
        buf = TextBuffer("ab", cursor=1)
        with pytest.raises(ValueError), buf.narrow(2):
            pass

    def test_nested_narrow_cannot_widen(self) -> None:
        buf = TextBuffer("abc> x ")
        with buf.narrow(4):
            with pytest.raises(ValueError, match="region starts at 4"), buf.narrow(2):
                pass
            assert buf.region_start == 4
            buf.delete_backward(10)
        assert buf.text == "abc>"

    def test_nested_narrow_can_shrink(self) -> None:
        buf = TextBuffer("abc> x ")
        with buf.narrow(4):
            with buf.narrow(5):
                assert buf.text_before(2) == "x "
                assert buf.text_before(3) is None
            assert buf.region_start == 4
        assert buf.region_start == 0

    def test_restored_on_exception(self) -> None:
        buf = TextBuffer("> x")
        with pytest.raises(RuntimeError), buf.narrow(2):
            raise RuntimeError("boom")
        assert buf.region_start == 0
