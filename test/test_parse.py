"""Tests for parsing search box input into formulas."""

import sys
import unittest
from pathlib import Path

REPO_ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(REPO_ROOT / "src"))

from SearchBox import FormulaStateError, Literal, QuerySyntaxError, SearchBoxOptions, parse
from SearchBox.core.tokens import Token, TokenKind
from SearchBox.services.parse import FormulaParser

OPTS = {"keywords": ["status", "author"]}


class TestParse(unittest.TestCase):
    def test_key_value_pair(self) -> None:
        formula = parse("status:open", OPTS)
        self.assertEqual(formula.literals, (Literal("status", ("open",)),))

    def test_negated_pair(self) -> None:
        formula = parse("-status:open", OPTS)
        self.assertEqual(formula.literals, (Literal("status", ("open",), op="-"),))
        self.assertTrue(formula.literals[0].negated)

    def test_mixed_input_keeps_encounter_order(self) -> None:
        formula = parse("-status:open urgent", OPTS)
        self.assertEqual(
            formula.literals,
            (Literal("status", ("open",), op="-"), Literal("fulltext", ("urgent",))),
        )

    def test_same_group_values_are_merged(self) -> None:
        formula = parse("status:open author:knuth status:closed", OPTS)
        self.assertEqual(
            formula.literals,
            (Literal("status", ("open", "closed")), Literal("author", ("knuth",))),
        )

    def test_negated_and_plain_groups_are_distinct(self) -> None:
        formula = parse("status:open -status:closed status:new -status:stale", OPTS)
        self.assertEqual(
            formula.literals,
            (Literal("status", ("open", "new")), Literal("status", ("closed", "stale"), op="-")),
        )

    def test_adjacent_negated_pairs(self) -> None:
        formula = parse("-status:open-status:closed", OPTS)
        self.assertEqual(formula.literals, (Literal("status", ("open", "closed"), op="-"),))

    def test_fulltext_keeps_duplicates_in_order(self) -> None:
        formula = parse("foo bar foo", OPTS)
        self.assertEqual(formula.fulltext, ("foo", "bar", "foo"))
        self.assertEqual(len(formula), 1)

    def test_quoted_phrase(self) -> None:
        formula = parse("'hello world'")
        self.assertEqual(formula.literals, (Literal("fulltext", ("hello world",)),))

    def test_hyphen_before_plain_word(self) -> None:
        formula = parse("-foo", OPTS)
        self.assertEqual(formula.literals, (Literal("fulltext", ("foo",)),))

    def test_explicit_fulltext_key_joins_free_terms(self) -> None:
        formula = parse("fulltext:foo bar")
        self.assertEqual(formula.literals, (Literal("fulltext", ("foo", "bar")),))

    def test_negated_fulltext_key(self) -> None:
        formula = parse("-fulltext:foo bar")
        self.assertEqual(
            formula.literals,
            (Literal("fulltext", ("foo",), op="-"), Literal("fulltext", ("bar",))),
        )

    def test_dangling_key_is_dropped(self) -> None:
        self.assertEqual(parse("urgent status:", OPTS).literals, (Literal("fulltext", ("urgent",)),))
        self.assertFalse(parse("-status", OPTS))

    def test_value_starting_with_punctuation(self) -> None:
        formula = parse('status:-open urgent "exact phrase"', {"keywords": ["status"]})
        self.assertEqual(
            formula.literals,
            (Literal("status", ("-open",)), Literal("fulltext", ("urgent", "exact phrase"))),
        )
        self.assertEqual(parse("tag:.net", {"keywords": ["tag"]}).values("tag"), (".net",))

    def test_unterminated_quote_fails(self) -> None:
        with self.assertRaisesRegex(QuerySyntaxError, "Unterminated quote"):
            parse('urgent "exact phrase', OPTS)

    def test_space_after_separator_fails(self) -> None:
        with self.assertRaises(QuerySyntaxError) as ctx:
            parse("status: value", OPTS)
        self.assertEqual(ctx.exception.position, 7)

    def test_without_options_only_fulltext_is_a_key(self) -> None:
        formula = parse("status:open")
        self.assertEqual(formula.fulltext, ("status", "open"))

    def test_options_object_and_mapping_are_equivalent(self) -> None:
        text = "-author:knuth tex"
        self.assertEqual(parse(text, SearchBoxOptions(keywords=["author"])), parse(text, {"keywords": ["author"]}))

    def test_caller_keywords_are_not_modified(self) -> None:
        keywords = ["status"]
        parse("status:open fulltext:x", {"keywords": keywords})
        self.assertEqual(keywords, ["status"])

    def test_debug_rendering(self) -> None:
        formula = parse("-status:open urgent -status:closed 'a b'", OPTS)
        self.assertEqual(str(formula), "Formula:\n -status: [open,closed]\n fulltext: [urgent,a b]")

    def test_debug_rendering_empty(self) -> None:
        self.assertEqual(str(parse("")), "Formula:\n")


class TestOptions(unittest.TestCase):
    def test_string_keywords_rejected(self) -> None:
        with self.assertRaises(TypeError):
            SearchBoxOptions(keywords="status")

    def test_coerce(self) -> None:
        self.assertEqual(SearchBoxOptions.coerce(None), SearchBoxOptions())
        self.assertEqual(SearchBoxOptions.coerce({"keywords": ["a"]}).keywords, ("a",))
        self.assertEqual(SearchBoxOptions.coerce({}).keywords, ())
        with self.assertRaises(TypeError):
            SearchBoxOptions.coerce(["a"])


class TestFormulaParser(unittest.TestCase):
    def test_value_without_key_fails(self) -> None:
        parser = FormulaParser()
        with self.assertRaises(FormulaStateError):
            parser.consume(Token(TokenKind.VALUE, "open"))

    def test_pending_state_cleared_after_value(self) -> None:
        parser = FormulaParser()
        for token in (
            Token(TokenKind.OPERATOR, "-"),
            Token(TokenKind.KEY, "status"),
            Token(TokenKind.VALUE, "open"),
        ):
            parser.consume(token)
        with self.assertRaises(FormulaStateError):
            parser.consume(Token(TokenKind.VALUE, "closed"))

    def test_push_tokens(self) -> None:
        parser = FormulaParser()
        parser.consume(Token(TokenKind.FULLTEXT, "x"))
        parser.consume(Token(TokenKind.KEY, "tag"))
        parser.consume(Token(TokenKind.VALUE, "y"))
        self.assertEqual(
            parser.formula().literals,
            (Literal("fulltext", ("x",)), Literal("tag", ("y",))),
        )


if __name__ == "__main__":
    unittest.main()
