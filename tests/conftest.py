"""Pytest configuration and shared fixtures for the mdfold test suite.

This module provides shared fixtures, test configuration, and utilities
that are used across the entire test suite.
"""

import os

import pytest
from hypothesis import Phase, Verbosity, settings

from mdfold.ast.nodes import (
    Alignment,
    BlockQuote,
    CodeBlock,
    Heading,
    Link,
    Paragraph,
    Table,
    TableBody,
    TableCell,
    TableHeader,
    TableHeaderCell,
    TableRow,
    Text,
)

# Register custom Hypothesis profiles
settings.register_profile("ci", max_examples=100, verbosity=Verbosity.verbose)
settings.register_profile("dev", max_examples=20)
settings.register_profile(
    "debug", max_examples=10, verbosity=Verbosity.verbose, phases=[Phase.explicit, Phase.reuse, Phase.generate]
)

# Load profile from environment or use default
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "dev"))


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line("markers", "unit: Unit tests - fast, isolated component tests")
    config.addinivalue_line("markers", "integration: Integration tests - component interaction tests")
    config.addinivalue_line("markers", "cli: Tests related to command-line interface")
    config.addinivalue_line("markers", "property: Property-based tests driven by Hypothesis")


@pytest.fixture
def sample_text() -> str:
    """Provide sample markdown content for testing.

    Returns
    -------
    str
        Standard sample document used across multiple tests.

    """
    return """# Sample Document

This is a **sample document** with *italic text* and some `inline code`.

## Section 2

Here is a list:

- Item 1
- [x] Item 2
- [ ] Item 3

And a numbered list:

3. First item
4. Second item

> A quote with a [link](#section-2 "Section").

```python
def hello_world():
    print("Hello, World!")
```

---

| Header 1 | Header 2 |
| :------- | -------: |
| Row 1    | Data 1   |
| Row 2    | Data 2   |

![logo](images/logo.png "Logo")
"""


@pytest.fixture
def foo_bar_table() -> Table:
    """Provide a two-column table whose cells are all three characters wide."""
    return Table(
        [
            TableHeader([TableRow([TableHeaderCell([Text("foo")]), TableHeaderCell([Text("bar")])])]),
            TableBody([TableRow([TableCell([Text("baz")]), TableCell([Text("bim")])])]),
        ]
    )


@pytest.fixture
def aligned_table() -> Table:
    """Provide a table with left, center and right aligned columns."""
    return Table(
        [
            TableHeader(
                [
                    TableRow(
                        [
                            TableHeaderCell([Text("Name")], alignment=Alignment.LEFT),
                            TableHeaderCell([Text("Status")], alignment=Alignment.CENTER),
                            TableHeaderCell([Text("Count")], alignment=Alignment.RIGHT),
                        ]
                    )
                ]
            ),
            TableBody(
                [
                    TableRow(
                        [
                            TableCell([Text("alpha")], alignment=Alignment.LEFT),
                            TableCell([Text("ok")], alignment=Alignment.CENTER),
                            TableCell([Text("7")], alignment=Alignment.RIGHT),
                        ]
                    )
                ]
            ),
        ]
    )


@pytest.fixture
def linked_document() -> list:
    """Provide a document with two headings, internal links and an external link."""
    return [
        Heading(level=1, raw_text="Intro", children=[Text("Intro")]),
        Paragraph([Text("See "), Link("#usage", [Text("usage")]), Text(" or "), Link("https://example.com", [])]),
        Heading(level=2, raw_text="Usage", children=[Text("Usage")]),
        BlockQuote([Paragraph([Link("#intro", [Text("back to top")])])]),
        CodeBlock("print('#nowhere')\n", language="python"),
    ]
