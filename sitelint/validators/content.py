#!/usr/bin/env python3
"""
content.py
----------
Content directory validation for blog posts and projects.

Walks each content section, reads and parses every markdown document,
runs the section's rule set and collects the findings.

Validates:
- Section directories exist (missing directory: error)
- Sections are not empty (no documents: warning)
- Every document against its content type's rules

Unreadable documents become an error for that file; the rest of the
section is still validated.

Usage:
    from sitelint.core.config import load_config
    from sitelint.validators.content import ContentValidator, format_report

    validator = ContentValidator(load_config())
    result = validator.validate_all()
    print(format_report(result))
"""
# --- Annotations ---
from __future__ import annotations

# --- Standard library imports ---
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Sequence

# --- Local imports ---
from sitelint.core.config import SiteLintConfig
from sitelint.core.exceptions import ContentReadError
from sitelint.core.logging_manager import SiteLintLogger, safe_logger
from sitelint.utils.fs import find_markdown_files, read_markdown
from sitelint.utils.md import parse_frontmatter
from sitelint.validators.rules import (
    BLOG_POST_RULES,
    PROJECT_RULES,
    ContentDocument,
    Rule,
    ValidationResult,
    evaluate_rules,
)


@dataclass(frozen=True)
class ContentSection:
    """
    One content type and where its documents live.

    Attributes:
        title: Name used in the missing-directory error ('Blog')
        noun: Singular document name for progress output ('blog post')
        plural: Plural document name for the empty-section warning
        icon: Progress line icon
        directory: Directory holding the documents
        rules: Rule set for the content type
    """

    title: str
    noun: str
    plural: str
    icon: str
    directory: Path
    rules: Sequence[Rule]

    @property
    def progress_message(self) -> str:
        return f"{self.icon} Validating {self.plural}..."


@dataclass
class SectionReport:
    """Outcome of validating one section."""

    section: ContentSection
    files_checked: int = 0
    result: ValidationResult = field(default_factory=ValidationResult)

    @property
    def summary(self) -> Optional[str]:
        """Progress summary, or None when no documents were checked."""
        if not self.files_checked:
            return None
        return f"   Checked {self.files_checked} {self.section.noun}(s)"


class ContentValidator:
    """Validates the blog and project sections of a site."""

    def __init__(
        self,
        config: SiteLintConfig,
        logger: Optional[SiteLintLogger] = None,
    ):
        """
        Initialize content validator.

        Args:
            config: Resolved run configuration
            logger: Optional logger instance
        """
        self.config = config
        self.logger = logger

    @property
    def sections(self) -> List[ContentSection]:
        """Sections in the order they are validated."""
        return [
            ContentSection(
                title="Blog",
                noun="blog post",
                plural="blog posts",
                icon="📝",
                directory=self.config.blog_dir,
                rules=BLOG_POST_RULES,
            ),
            ContentSection(
                title="Projects",
                noun="project",
                plural="projects",
                icon="🚀",
                directory=self.config.projects_dir,
                rules=PROJECT_RULES,
            ),
        ]

    def display_path(self, file_path: Path) -> str:
        """
        Path shown in messages: relative to the content directory when
        possible ('blog/hello.md'), else to the site root.
        """
        for base in (self.config.content_dir, self.config.root):
            try:
                return file_path.relative_to(base).as_posix()
            except ValueError:
                continue
        return file_path.as_posix()

    def validate_file(self, file_path: Path, rules: Sequence[Rule]) -> ValidationResult:
        """
        Validate a single document.

        Args:
            file_path: Path to the markdown file
            rules: Rule set for the document's content type

        Returns:
            Findings for the document
        """
        filename = self.display_path(file_path)

        try:
            content = read_markdown(file_path)
        except ContentReadError as e:
            safe_logger(self.logger).log_error(e, {"file": filename})
            result = ValidationResult()
            result.add_error(f"{filename}: {e}")
            return result

        fields, body = parse_frontmatter(content)
        doc = ContentDocument(
            filename=filename,
            fields=fields,
            body=body,
            site_root=self.config.root,
        )
        result = evaluate_rules(doc, rules)

        safe_logger(self.logger).log_debug(
            "Validated document",
            {
                "file": filename,
                "errors": result.total_errors,
                "warnings": result.total_warnings,
                "rules": [f.rule for f in result.errors + result.warnings],
            },
        )
        return result

    def validate_section(self, section: ContentSection) -> SectionReport:
        """
        Validate every document in a section.

        Args:
            section: Section to validate

        Returns:
            Section report with the number of documents checked
        """
        report = SectionReport(section=section)
        log = safe_logger(self.logger)

        if not section.directory.is_dir():
            report.result.add_error(
                f"{section.title} directory not found: {section.directory}"
            )
            log.log_warning(f"{section.title} directory not found", {"dir": section.directory})
            return report

        files = find_markdown_files(section.directory)
        if not files:
            report.result.add_warning(f"No {section.plural} found")
            log.log_warning(f"No {section.plural} found", {"dir": section.directory})
            return report

        for file_path in files:
            report.result.merge(self.validate_file(file_path, section.rules))
            report.files_checked += 1

        log.log_operation(
            "validate_section",
            {
                "section": section.title,
                "files": report.files_checked,
                "errors": report.result.total_errors,
                "warnings": report.result.total_warnings,
            },
        )
        return report

    def validate_all(self) -> ValidationResult:
        """
        Validate all sections.

        Returns:
            Combined findings, blog posts first
        """
        result = ValidationResult()
        for section in self.sections:
            result.merge(self.validate_section(section).result)
        return result


def format_report(result: ValidationResult) -> str:
    """
    Format a validation result as console text.

    Args:
        result: Combined findings of a run

    Returns:
        Report with the results banner, bulleted errors and warnings, and a
        success line or count summary
    """
    lines = ["", "📊 Validation Results:", "━" * 50]

    if result.errors:
        lines.append("")
        lines.append("❌ Errors:")
        lines.extend(f"   • {finding.message}" for finding in result.errors)

    if result.warnings:
        lines.append("")
        lines.append("⚠️  Warnings:")
        lines.extend(f"   • {finding.message}" for finding in result.warnings)

    lines.append("")
    if result.is_clean:
        lines.append("✅ All content validated successfully!")
    else:
        lines.append(
            f"📈 Summary: {result.total_errors} error(s), {result.total_warnings} warning(s)"
        )

    return "\n".join(lines)
