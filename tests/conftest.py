"""Shared test fixtures for runlint tests."""

from pathlib import Path

import pytest
from typer.testing import CliRunner

SAMPLE_RUNBOOK = """# Migrate to React 18

## Summary of changes
- Upgrade **react** and **react-dom** to 18.x
- Replace `ReactDOM.render` with `createRoot`

## Step 1: Upgrade dependencies
Bump the React packages and reinstall.

### 1.1: Update package.json
- Set **package.json** react version to ^18.2.0
- Set react-dom version to ^18.2.0

### 1.2: Reinstall
- Run `npm install`

## Step 2: Switch to createRoot

### 2.1: Update entry point
- Edit **src/index.js**
- Replace the render call:
  use `createRoot(container).render(<App />)`

## Manual testing plan
- Start the dev server and load the home page
- Confirm no console warnings about `ReactDOM.render`
"""


@pytest.fixture
def runner() -> CliRunner:
    """Create CLI test runner."""
    return CliRunner()


@pytest.fixture
def sample_runbook() -> str:
    """Return a well-formed runbook in the corpus convention."""
    return SAMPLE_RUNBOOK


@pytest.fixture
def runbook_dir(tmp_path: Path) -> Path:
    """Create a directory with one valid and one invalid runbook.

    Layout:
        docs/good.md          valid
        docs/nested/bad.md    steps numbered 1, 3
        docs/notes.txt        ignored by the default pattern
    """
    docs = tmp_path / "docs"
    (docs / "nested").mkdir(parents=True)
    (docs / "good.md").write_text(SAMPLE_RUNBOOK)
    (docs / "nested" / "bad.md").write_text(
        "# Bad\n\n## Step 1: A\n\n## Step 3: C\n\n## Manual testing plan\n- check\n"
    )
    (docs / "notes.txt").write_text("not a runbook")
    return docs
