#!/usr/bin/env python3
"""
rules.py
--------
Validation rules for blog posts and project entries.

Each content type has an ordered tuple of independent rules. Every rule
runs regardless of earlier failures; the only early exit is a document
without frontmatter, which yields a single error.

Rule sets:
    BLOG_POST_RULES: title, date, excerpt, date format, image, length, tags
    PROJECT_RULES: title, description, technologies, image, links, length

Field presence follows the content authors' expectations: a field is
missing when absent or empty. Lists always count as present, even empty
ones, so "tags: []" is reported by the tags rule rather than ignored.

Usage:
    from sitelint.validators.rules import validate_blog_post

    fields, body = parse_frontmatter(text)
    result = validate_blog_post(fields, body, "blog/hello.md", site_root)
    for finding in result.errors:
        print(finding.message)
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional, Sequence

# --- Local imports ---
from sitelint.core.paths import resolve_site_path
from sitelint.core.validators import DataValidator
from sitelint.utils.md import FieldValue, Fields


ERROR = "error"
WARNING = "warning"

BLOG_MIN_BODY_LENGTH = 100
PROJECT_MIN_BODY_LENGTH = 200


@dataclass(frozen=True)
class Finding:
    """A single problem found in a document."""

    severity: str  # error, warning
    message: str
    rule: Optional[str] = field(default=None, compare=False)

    def __str__(self) -> str:
        return self.message


@dataclass
class ValidationResult:
    """Errors and warnings accumulated over one or more documents."""

    errors: List[Finding] = field(default_factory=list)
    warnings: List[Finding] = field(default_factory=list)

    def add(self, finding: Finding) -> None:
        """Add a finding to the bucket for its severity."""
        if finding.severity == ERROR:
            self.errors.append(finding)
        elif finding.severity == WARNING:
            self.warnings.append(finding)
        else:
            raise ValueError(f"Unknown severity: {finding.severity!r}")

    def add_error(self, message: str) -> None:
        self.add(Finding(ERROR, message))

    def add_warning(self, message: str) -> None:
        self.add(Finding(WARNING, message))

    def merge(self, other: "ValidationResult") -> None:
        """Append another result's findings, keeping their order."""
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)

    @property
    def total_errors(self) -> int:
        return len(self.errors)

    @property
    def total_warnings(self) -> int:
        return len(self.warnings)

    @property
    def has_errors(self) -> bool:
        """Check if any errors were found."""
        return bool(self.errors)

    @property
    def is_clean(self) -> bool:
        """Check if there is nothing to report at all."""
        return not self.errors and not self.warnings

    @property
    def exit_code(self) -> int:
        """Process exit status: warnings alone do not fail a run."""
        return 1 if self.has_errors else 0


@dataclass(frozen=True)
class ContentDocument:
    """
    A parsed document as seen by the rules.

    Attributes:
        filename: Display path used in messages (e.g. 'blog/hello.md')
        fields: Parsed frontmatter, or None when the document has none
        body: Text after the frontmatter
        site_root: Directory image paths are resolved against
    """

    filename: str
    fields: Optional[Fields]
    body: str
    site_root: Path

    def get(self, name: str) -> Optional[FieldValue]:
        return (self.fields or {}).get(name)

    def has(self, name: str) -> bool:
        """True unless the field is absent or an empty string."""
        value = self.get(name)
        return value is not None and value != ""

    def text(self, name: str) -> str:
        """Field value as text; lists are joined with commas."""
        value = self.get(name)
        if value is None:
            return ""
        if isinstance(value, list):
            return ",".join(value)
        return value

    @property
    def body_length(self) -> int:
        return len(self.body.strip())

    def image_exists(self) -> bool:
        """True if the image path names an existing file or directory."""
        try:
            return resolve_site_path(self.site_root, self.text("image")).exists()
        except OSError:
            # Paths the OS refuses to stat (ENAMETOOLONG, EACCES) count as missing
            return False


@dataclass(frozen=True)
class Rule:
    """
    One independent check over a document.

    Attributes:
        name: Short identifier for the rule
        severity: 'error' or 'warning'
        applies: Predicate that is True when the document violates the rule
        message: Builds the description of the violation
    """

    name: str
    severity: str
    applies: Callable[[ContentDocument], bool]
    message: Callable[[ContentDocument], str]

    def check(self, doc: ContentDocument) -> Optional[Finding]:
        """Return a finding for the document, or None if it passes."""
        if not self.applies(doc):
            return None
        return Finding(self.severity, f"{doc.filename}: {self.message(doc)}", rule=self.name)


# ----- Rule factories -----
def required_field(name: str) -> Rule:
    return Rule(
        name=f"required-{name}",
        severity=ERROR,
        applies=lambda doc: not doc.has(name),
        message=lambda doc: f"Missing required field '{name}'",
    )


def url_field(name: str) -> Rule:
    return Rule(
        name=f"valid-{name}",
        severity=ERROR,
        applies=lambda doc: doc.has(name) and not DataValidator.is_valid_url(doc.text(name)),
        message=lambda doc: f"Invalid {name}: {doc.text(name)}",
    )


def min_body_length(threshold: int, describe: str) -> Rule:
    return Rule(
        name="body-length",
        severity=WARNING,
        applies=lambda doc: doc.body_length < threshold,
        message=lambda doc: f"{describe} ({doc.body_length} characters)",
    )


IMAGE_NOT_FOUND = Rule(
    name="image-exists",
    severity=WARNING,
    applies=lambda doc: doc.has("image") and not doc.image_exists(),
    message=lambda doc: f"Image not found: {doc.text('image')}",
)


BLOG_POST_RULES: Sequence[Rule] = (
    required_field("title"),
    required_field("date"),
    Rule(
        name="recommended-excerpt",
        severity=WARNING,
        applies=lambda doc: not doc.has("excerpt"),
        message=lambda doc: "Missing 'excerpt' field (recommended)",
    ),
    Rule(
        name="date-format",
        severity=ERROR,
        applies=lambda doc: doc.has("date") and not DataValidator.is_valid_date(doc.text("date")),
        message=lambda doc: f"Invalid date format '{doc.text('date')}'",
    ),
    IMAGE_NOT_FOUND,
    min_body_length(BLOG_MIN_BODY_LENGTH, "Content is very short"),
    Rule(
        name="empty-tags",
        severity=WARNING,
        applies=lambda doc: isinstance(doc.get("tags"), list) and not doc.get("tags"),
        message=lambda doc: "Tags array is empty",
    ),
)


PROJECT_RULES: Sequence[Rule] = (
    required_field("title"),
    required_field("description"),
    Rule(
        name="technologies",
        severity=WARNING,
        applies=lambda doc: (
            not isinstance(doc.get("technologies"), list) or not doc.get("technologies")
        ),
        message=lambda doc: "No technologies listed",
    ),
    IMAGE_NOT_FOUND,
    Rule(
        name="featured-image",
        severity=WARNING,
        applies=lambda doc: not doc.has("image"),
        message=lambda doc: "No featured image specified",
    ),
    Rule(
        name="project-links",
        severity=WARNING,
        applies=lambda doc: not doc.has("demo_url") and not doc.has("github_url"),
        message=lambda doc: "No demo or GitHub URL provided",
    ),
    url_field("demo_url"),
    url_field("github_url"),
    min_body_length(PROJECT_MIN_BODY_LENGTH, "Project details are very short"),
)


def evaluate_rules(doc: ContentDocument, rules: Sequence[Rule]) -> ValidationResult:
    """
    Run a rule set over one document.

    Args:
        doc: Parsed document
        rules: Ordered rules for the document's content type

    Returns:
        Findings in rule order
    """
    result = ValidationResult()

    if doc.fields is None:
        result.add_error(f"{doc.filename}: Missing or invalid frontmatter")
        return result

    for rule in rules:
        finding = rule.check(doc)
        if finding is not None:
            result.add(finding)

    return result


def validate_blog_post(
    fields: Optional[Fields], body: str, filename: str, site_root: Path
) -> ValidationResult:
    """Validate a parsed blog post against BLOG_POST_RULES."""
    doc = ContentDocument(filename=filename, fields=fields, body=body, site_root=Path(site_root))
    return evaluate_rules(doc, BLOG_POST_RULES)


def validate_project(
    fields: Optional[Fields], body: str, filename: str, site_root: Path
) -> ValidationResult:
    """Validate a parsed project entry against PROJECT_RULES."""
    doc = ContentDocument(filename=filename, fields=fields, body=body, site_root=Path(site_root))
    return evaluate_rules(doc, PROJECT_RULES)
