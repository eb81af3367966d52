"""Property-based tests for the resolver using Hypothesis.

These tests verify invariants that hold for any cursor context:
1. Pass-through whenever the previous character is not blank or ``=``
2. Strings and comments are never rewritten
3. A blank before the cursor inserts the token unless the token is already there
4. Pressing the key right after the token yields ``==``
5. A chained ``=`` always ends as a space-padded ``==``
6. Look-back near the start of the region never raises
"""

from hypothesis import assume, given, settings
from hypothesis import strategies as st

from smartequals import CursorContext, DeleteBackward, EditAction, EqualsConfig, Insert, resolve

chars = st.characters(exclude_categories=("Cs",))
non_blank = chars.filter(lambda c: c not in " \t=")
unspaced = chars.filter(lambda c: c not in " \t")
blanks = st.sampled_from(" \t")
texts = st.text(alphabet=chars, max_size=20)
tokens = st.text(alphabet=chars, min_size=1, max_size=5)
configs = st.builds(EqualsConfig, assignment_token=tokens)


class TestResolverProperties:
    """Invariants of ``resolve`` across generated contexts."""

    @given(prev=non_blank, config=configs, preceding=texts)
    @settings(max_examples=200)
    def test_pass_through_for_other_previous_chars(
        self, prev: str, config: EqualsConfig, preceding: str
    ) -> None:
        text = preceding + prev
        ctx = CursorContext.from_text(text, len(text))
        assert resolve(ctx, config) == EditAction.insert("=")

    @given(text=texts, target=st.booleans(), raw=st.booleans(), config=configs)
    @settings(max_examples=200)
    def test_string_or_comment_is_immune(
        self, text: str, target: bool, raw: bool, config: EqualsConfig
    ) -> None:
        ctx = CursorContext.from_text(
            text,
            len(text),
            inside_string_or_comment=True,
            is_target_language=target,
            raw_override=raw,
        )
        assert resolve(ctx, config) == EditAction.insert("=")

    @given(left=texts, blank=blanks, config=configs)
    @settings(max_examples=200)
    def test_blank_inserts_token_unless_already_present(
        self, left: str, blank: str, config: EqualsConfig
    ) -> None:
        text = left + blank
        token = config.assignment_token
        assume(not text.endswith(token))
        action = resolve(CursorContext.from_text(text, len(text)), config)
        assert action == EditAction.insert(token)

    @given(left=texts, body=st.text(alphabet=chars, max_size=4), blank=blanks)
    @settings(max_examples=200)
    def test_second_press_replaces_token(self, left: str, body: str, blank: str) -> None:
        token = body + blank
        config = EqualsConfig(assignment_token=token)
        text = left + token
        action = resolve(CursorContext.from_text(text, len(text)), config)
        assert action.ops == (DeleteBackward(len(token)), Insert("== "))
        assert action.apply(text, len(text)) == (left + "== ", len(left) + 3)

    @given(
        left_operand=st.just("") | st.builds(lambda s, c: s + c, texts, unspaced),
        config=configs,
    )
    @settings(max_examples=200)
    def test_chained_equals_spaces_unspaced_left_operand(
        self, left_operand: str, config: EqualsConfig
    ) -> None:
        text = left_operand + "="
        action = resolve(CursorContext.from_text(text, len(text)), config)
        assert action.ops == (DeleteBackward(1), Insert(" ="), Insert("= "))
        assert action.apply(text, len(text))[0] == left_operand + " == "

    @given(left=texts, blank=blanks, config=configs)
    @settings(max_examples=200)
    def test_chained_equals_after_blank(
        self, left: str, blank: str, config: EqualsConfig
    ) -> None:
        text = left + blank + "="
        action = resolve(CursorContext.from_text(text, len(text)), config)
        assert action.ops == (Insert("= "),)
        assert action.apply(text, len(text))[0] == text + "= "

    @given(text=texts, config=configs, data=st.data())
    @settings(max_examples=200)
    def test_never_raises_near_region_start(
        self, text: str, config: EqualsConfig, data: st.DataObject
    ) -> None:
        cursor = data.draw(st.integers(min_value=0, max_value=len(text)))
        region_start = data.draw(st.integers(min_value=0, max_value=cursor))
        ctx = CursorContext.from_text(text, cursor, region_start=region_start)
        action = resolve(ctx, config)
        new_text, new_cursor = action.apply(text, cursor, region_start=region_start)
        assert new_text[:region_start] == text[:region_start]
        assert new_text[new_cursor:] == text[cursor:]
