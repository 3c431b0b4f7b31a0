"""Inline style checklist used to detect stripped CSS declarations.

Each ``StyleExpectation`` pairs a human-readable label with a literal
substring.  Matching is exact and case-sensitive: no whitespace or quote
normalization is applied, so ``color: #ffffff`` does not satisfy
``color:#ffffff``.
"""

from pydantic import BaseModel, ConfigDict


class StyleExpectation(BaseModel):
    """A CSS declaration expected to survive a round trip through Resend."""

    model_config = ConfigDict(frozen=True)

    label: str
    pattern: str


class StyleCheckResult(BaseModel):
    """Outcome of testing one expectation against an HTML document."""

    model_config = ConfigDict(frozen=True)

    expectation: StyleExpectation
    found: bool


class StyleReport(BaseModel):
    """Ordered results for a full checklist run."""

    model_config = ConfigDict(frozen=True)

    results: tuple[StyleCheckResult, ...]

    @property
    def all_present(self) -> bool:
        """``True`` when every expectation was found."""
        return all(result.found for result in self.results)

    @property
    def missing(self) -> list[StyleExpectation]:
        """Expectations whose pattern was not found, in checklist order."""
        return [result.expectation for result in self.results if not result.found]


# Styles on typography elements that the dashboard is known to drop.
EXPECTED_STYLES: tuple[StyleExpectation, ...] = (
    StyleExpectation(label="Pink accent color (#ec4899)", pattern="#ec4899"),
    StyleExpectation(label="White heading color (#ffffff on h1)", pattern="color:#ffffff"),
    StyleExpectation(label="Gray body text color (#d1d5db)", pattern="#d1d5db"),
    StyleExpectation(label="Georgia font-family", pattern="Georgia"),
    StyleExpectation(label="text-transform:uppercase", pattern="text-transform:uppercase"),
    StyleExpectation(label="letter-spacing:2px", pattern="letter-spacing:2px"),
    StyleExpectation(label="Custom hr border (#374151)", pattern="#374151"),
)


def check_styles(
    html: str,
    expectations: tuple[StyleExpectation, ...] = EXPECTED_STYLES,
) -> StyleReport:
    """Test each expectation's pattern against *html*.

    Args:
        html: The HTML document to scan.
        expectations: Checklist to apply, in reporting order.

    Returns:
        A ``StyleReport`` with one result per expectation, in order.
    """
    return StyleReport(
        results=tuple(
            StyleCheckResult(expectation=expectation, found=expectation.pattern in html)
            for expectation in expectations
        )
    )
