"""Tests for runbook parsing."""

from hypothesis import given, settings
from hypothesis import strategies as st

from runlint.config import ParserConfig
from runlint.core.document_parser import parse_document
from runlint.models import Document, ParseError


def parse_ok(text: str, config: ParserConfig | None = None) -> Document:
    """Parse text and assert it produced a Document."""
    result = parse_document(text, config)
    assert isinstance(result, Document), result
    return result


class TestParseSampleRunbook:
    """Tests against a full corpus-style runbook."""

    def test_title(self, sample_runbook: str) -> None:
        assert parse_ok(sample_runbook).title == "Migrate to React 18"

    def test_summary_items(self, sample_runbook: str) -> None:
        doc = parse_ok(sample_runbook)
        assert doc.summary == (
            "Upgrade **react** and **react-dom** to 18.x",
            "Replace `ReactDOM.render` with `createRoot`",
        )

    def test_steps_and_substeps(self, sample_runbook: str) -> None:
        doc = parse_ok(sample_runbook)
        assert [s.index for s in doc.steps] == [1, 2]
        assert doc.steps[0].name == "Upgrade dependencies"
        assert doc.steps[0].description == "Bump the React packages and reinstall."
        assert [s.index for s in doc.steps[0].substeps] == ["1.1", "1.2"]
        assert doc.steps[0].substeps[0].name == "Update package.json"
        assert doc.steps[0].substeps[1].bullets == ("Run `npm install`",)
        assert doc.steps[1].description == ""

    def test_indented_line_continues_bullet(self, sample_runbook: str) -> None:
        doc = parse_ok(sample_runbook)
        bullets = doc.steps[1].substeps[0].bullets
        assert bullets == (
            "Edit **src/index.js**",
            "Replace the render call: use `createRoot(container).render(<App />)`",
        )

    def test_manual_testing_plan(self, sample_runbook: str) -> None:
        doc = parse_ok(sample_runbook)
        assert len(doc.manual_testing_plan) == 2
        assert doc.manual_testing_plan[0] == "Start the dev server and load the home page"

    def test_heading_lines_recorded(self, sample_runbook: str) -> None:
        doc = parse_ok(sample_runbook)
        assert doc.steps[0].line == 7
        assert doc.steps[0].substeps[0].line == 10


class TestParseHeadingVariants:
    """Tests for the heading conventions the corpus mixes."""

    def test_step_and_substep_levels_are_flexible(self) -> None:
        text = "# T\n### Step 1: A\n#### 1.1: B\n- x\n## Step 2: C\n### 2.1: D\n- y\n"
        doc = parse_ok(text)
        assert [s.index for s in doc.steps] == [1, 2]
        assert doc.steps[1].substeps[0].name == "D"

    def test_bold_step_heading(self) -> None:
        doc = parse_ok("# T\n## **Step 1: Bold name**\n")
        assert doc.steps[0].index == 1
        assert doc.steps[0].name == "Bold name"

    def test_step_without_name(self) -> None:
        doc = parse_ok("# T\n## Step 1:\n## Step 2\n")
        assert [s.name for s in doc.steps] == ["", ""]

    def test_summary_alias_case_insensitive(self) -> None:
        doc = parse_ok("# T\n### SUMMARY OF CHANGES:\n- one\n")
        assert doc.summary == ("one",)

    def test_custom_testing_plan_alias(self) -> None:
        config = ParserConfig(testing_plan_headings=["verification"])
        doc = parse_ok("# T\n## Verification\n- curl it\n", config)
        assert doc.manual_testing_plan == ("curl it",)

    def test_numbered_and_starred_bullets(self) -> None:
        doc = parse_ok("# T\n## Manual testing plan\n1. first\n* second\n+ third\n2) fourth\n")
        assert doc.manual_testing_plan == ("first", "second", "third", "fourth")

    def test_plain_paragraph_counts_as_testing_item(self) -> None:
        doc = parse_ok("# T\n## Manual testing plan\nOpen the app and click around.\n")
        assert doc.manual_testing_plan == ("Open the app and click around.",)

    def test_bold_bullet_text_is_opaque(self) -> None:
        doc = parse_ok("# T\n## Step 1: A\n### 1.1: B\n- **file.js**: edit it\n")
        assert doc.steps[0].substeps[0].bullets == ("**file.js**: edit it",)

    def test_thematic_break_ignored(self) -> None:
        doc = parse_ok("# T\n## Summary of changes\n- one\n\n---\n")
        assert doc.summary == ("one",)


class TestParseSections:
    """Tests for section boundaries."""

    def test_unrecognized_sibling_heading_ends_step(self) -> None:
        text = "# T\n## Step 1: A\nbody\n## Notes\nnot part of the step\n"
        doc = parse_ok(text)
        assert doc.steps[0].description == "body"

    def test_deeper_heading_stays_in_step(self) -> None:
        text = "# T\n## Step 1: A\n### Goal\nkeep this\n"
        doc = parse_ok(text)
        assert "keep this" in doc.steps[0].description

    def test_sibling_heading_of_substep_returns_to_step(self) -> None:
        text = "# T\n## Step 1: A\n### 1.1: B\n- x\n### Rationale\nwhy\n"
        doc = parse_ok(text)
        assert doc.steps[0].substeps[0].bullets == ("x",)
        assert doc.steps[0].description == "why"

    def test_substep_paragraph_goes_to_description(self) -> None:
        doc = parse_ok("# T\n## Step 1: A\n### 1.1: B\nSome context.\n- x\n")
        substep = doc.steps[0].substeps[0]
        assert substep.description == "Some context."
        assert substep.bullets == ("x",)

    def test_fenced_heading_is_not_a_step(self) -> None:
        text = "# T\n## Step 1: A\n```\n## Step 2: fake\n```\n"
        doc = parse_ok(text)
        assert len(doc.steps) == 1
        assert "## Step 2: fake" in doc.steps[0].description

    def test_fenced_block_in_testing_plan_joins_item(self) -> None:
        text = "# T\n## Manual testing plan\n- Run:\n```bash\nmake test\n```\n"
        doc = parse_ok(text)
        assert doc.manual_testing_plan == ("Run:\nmake test",)

    def test_later_level_one_heading_is_not_title(self) -> None:
        doc = parse_ok("# First\n# Second\n")
        assert doc.title == "First"


class TestParseEdgeCases:
    """Tests for lenient handling and parse failures."""

    def test_non_sequential_steps_captured_verbatim(self) -> None:
        doc = parse_ok("# T\n## Step 1: A\n## Step 3: C\n")
        assert [s.index for s in doc.steps] == [1, 3]

    def test_missing_testing_plan_is_empty_not_error(self) -> None:
        doc = parse_ok("# T\n## Step 1: A\n")
        assert doc.manual_testing_plan == ()

    def test_empty_input_is_parse_error(self) -> None:
        result = parse_document("")
        assert isinstance(result, ParseError)
        assert "title" in result.message

    def test_no_title_is_parse_error(self) -> None:
        result = parse_document("## Step 1: A\n## Manual testing plan\n- x\n")
        assert isinstance(result, ParseError)
        assert "title" in result.message

    def test_empty_title_is_parse_error_with_line(self) -> None:
        result = parse_document("\n#\n## Step 1: A\n")
        assert isinstance(result, ParseError)
        assert result.line == 2

    def test_numbered_heading_before_steps_is_ordinary(self) -> None:
        text = (
            "# Add X\n\n## 2.0 Background\nsome notes\n\n"
            "### Step 1: Y\n#### 1.1: Z\n- do it\n## Manual testing plan\n- check\n"
        )
        doc = parse_ok(text)
        assert [s.index for s in doc.steps] == [1]
        assert [s.index for s in doc.steps[0].substeps] == ["1.1"]

    def test_numbered_heading_in_testing_plan_stays_in_plan(self) -> None:
        text = "# T\n## Step 1: A\n## Manual testing plan\n### 1.1 Verify login\n- log in\n"
        doc = parse_ok(text)
        assert doc.steps[0].substeps == ()
        assert doc.manual_testing_plan == ("log in",)

    def test_numbered_heading_at_step_level_ends_step(self) -> None:
        doc = parse_ok("# T\n### Step 1: A\n### 2.0 Notes\ntext\n")
        assert doc.steps[0].substeps == ()
        assert doc.steps[0].description == ""

    def test_huge_step_number_is_parse_error(self) -> None:
        result = parse_document("# T\n## Step " + "9" * 5000 + ": A\n")
        assert isinstance(result, ParseError)
        assert result.message == "step number too large"
        assert result.line == 2

    def test_leading_byte_order_mark_ignored(self) -> None:
        assert parse_ok("\ufeff# Add X\n## Step 1: Y\n").title == "Add X"

    def test_hashtag_is_not_heading(self) -> None:
        result = parse_document("#hashtag\n")
        assert isinstance(result, ParseError)


class TestParseProperties:
    """Property-based tests for the parser."""

    @given(text=st.text(max_size=300))
    @settings(max_examples=100)
    def test_parse_never_raises(self, text: str) -> None:
        """Arbitrary text yields a Document or a ParseError."""
        result = parse_document(text)
        assert isinstance(result, (Document, ParseError))

    @given(text=st.text(max_size=300))
    @settings(max_examples=100)
    def test_parse_is_idempotent(self, text: str) -> None:
        """Parsing the same text twice yields equal values."""
        assert parse_document(text) == parse_document(text)

    @given(indices=st.lists(st.integers(min_value=1, max_value=50), min_size=1, max_size=10))
    @settings(max_examples=50)
    def test_step_indices_captured_verbatim(self, indices: list[int]) -> None:
        body = "".join(f"## Step {n}: Step {n}\n" for n in indices)
        doc = parse_ok(f"# T\n{body}")
        assert [s.index for s in doc.steps] == indices
