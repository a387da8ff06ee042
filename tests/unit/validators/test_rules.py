"""
test_rules.py
-------------
Unit tests for sitelint.validators.rules.

Covers the blog post and project rule sets, rule ordering, and the
ValidationResult accumulator.
"""
import pytest

from sitelint.validators.rules import (
    BLOG_POST_RULES,
    PROJECT_RULES,
    ContentDocument,
    Finding,
    ValidationResult,
    evaluate_rules,
    validate_blog_post,
    validate_project,
)

LONG_BODY = "A paragraph of body text. " * 10


def messages(findings):
    return [f.message for f in findings]


class TestValidationResult:
    """Tests for ValidationResult accumulator."""

    def test_add_routes_by_severity(self):
        result = ValidationResult()
        result.add(Finding("error", "bad"))
        result.add(Finding("warning", "meh"))
        assert messages(result.errors) == ["bad"]
        assert messages(result.warnings) == ["meh"]

    def test_unknown_severity_rejected(self):
        with pytest.raises(ValueError):
            ValidationResult().add(Finding("info", "hm"))

    def test_exit_code(self):
        result = ValidationResult()
        assert result.exit_code == 0
        assert result.is_clean
        result.add_warning("only a warning")
        assert result.exit_code == 0
        assert not result.is_clean
        result.add_error("now an error")
        assert result.exit_code == 1
        assert result.has_errors

    def test_merge_keeps_order(self):
        first = ValidationResult()
        first.add_error("a")
        second = ValidationResult()
        second.add_error("b")
        second.add_warning("c")
        first.merge(second)
        assert messages(first.errors) == ["a", "b"]
        assert messages(first.warnings) == ["c"]
        assert first.total_errors == 2
        assert first.total_warnings == 1


class TestBlogPostRules:
    """Tests for blog post validation."""

    @pytest.fixture
    def valid_fields(self):
        return {
            "title": "Hello",
            "date": "2024-01-15",
            "excerpt": "A first post",
            "image": "/assets/images/cover.png",
            "tags": ["python"],
        }

    def test_valid_post(self, site_root, valid_fields):
        result = validate_blog_post(valid_fields, LONG_BODY, "blog/hello.md", site_root)
        assert result.is_clean

    def test_missing_frontmatter_stops(self, site_root):
        result = validate_blog_post(None, "short", "blog/x.md", site_root)
        assert messages(result.errors) == ["blog/x.md: Missing or invalid frontmatter"]
        assert result.warnings == []

    def test_empty_frontmatter_runs_all_rules(self, site_root):
        result = validate_blog_post({}, "short", "blog/x.md", site_root)
        assert messages(result.errors) == [
            "blog/x.md: Missing required field 'title'",
            "blog/x.md: Missing required field 'date'",
        ]
        assert messages(result.warnings) == [
            "blog/x.md: Missing 'excerpt' field (recommended)",
            "blog/x.md: Content is very short (5 characters)",
        ]

    def test_title_only_reports_date(self, site_root):
        result = validate_blog_post({"title": "Hello"}, LONG_BODY, "blog/x.md", site_root)
        assert len(result.errors) == 1
        assert "date" in result.errors[0].message
        assert result.exit_code == 1

    def test_empty_string_counts_as_missing(self, site_root, valid_fields):
        valid_fields["title"] = ""
        result = validate_blog_post(valid_fields, LONG_BODY, "blog/x.md", site_root)
        assert messages(result.errors) == ["blog/x.md: Missing required field 'title'"]

    def test_invalid_date_reports_literal(self, site_root, valid_fields):
        valid_fields["date"] = "someday soon"
        result = validate_blog_post(valid_fields, LONG_BODY, "blog/x.md", site_root)
        assert messages(result.errors) == ["blog/x.md: Invalid date format 'someday soon'"]

    def test_loose_date_accepted(self, site_root, valid_fields):
        valid_fields["date"] = "March 3, 2023"
        result = validate_blog_post(valid_fields, LONG_BODY, "blog/x.md", site_root)
        assert result.errors == []

    def test_missing_image_warns_with_path(self, site_root, valid_fields):
        valid_fields["image"] = "/missing.png"
        result = validate_blog_post(valid_fields, LONG_BODY, "blog/x.md", site_root)
        assert messages(result.warnings) == ["blog/x.md: Image not found: /missing.png"]

    def test_image_resolves_without_leading_slash(self, site_root, valid_fields):
        valid_fields["image"] = "assets/images/cover.png"
        result = validate_blog_post(valid_fields, LONG_BODY, "blog/x.md", site_root)
        assert result.is_clean

    def test_unstattable_image_warns(self, site_root, valid_fields):
        """A name too long for the filesystem is reported, not raised."""
        long_name = "a" * 300
        valid_fields["image"] = long_name
        valid_fields["date"] = "nope"
        result = validate_blog_post(valid_fields, LONG_BODY, "blog/x.md", site_root)
        assert messages(result.warnings) == [f"blog/x.md: Image not found: {long_name}"]
        assert messages(result.errors) == ["blog/x.md: Invalid date format 'nope'"]

    def test_absent_image_is_silent(self, site_root, valid_fields):
        del valid_fields["image"]
        result = validate_blog_post(valid_fields, LONG_BODY, "blog/x.md", site_root)
        assert result.is_clean

    def test_short_body_reports_trimmed_length(self, site_root, valid_fields):
        body = "\n\n" + "x" * 99 + "   \n"
        result = validate_blog_post(valid_fields, body, "blog/x.md", site_root)
        assert messages(result.warnings) == ["blog/x.md: Content is very short (99 characters)"]

    def test_body_at_threshold_passes(self, site_root, valid_fields):
        result = validate_blog_post(valid_fields, "x" * 100, "blog/x.md", site_root)
        assert result.is_clean

    def test_empty_tags_list_warns(self, site_root, valid_fields):
        valid_fields["tags"] = []
        result = validate_blog_post(valid_fields, LONG_BODY, "blog/x.md", site_root)
        assert messages(result.warnings) == ["blog/x.md: Tags array is empty"]

    def test_empty_brackets_tags_not_empty(self, site_root, valid_fields):
        """Parsed '[]' is a one-element list, so it is not reported."""
        valid_fields["tags"] = [""]
        result = validate_blog_post(valid_fields, LONG_BODY, "blog/x.md", site_root)
        assert result.is_clean

    def test_scalar_tags_ignored(self, site_root, valid_fields):
        valid_fields["tags"] = "python"
        result = validate_blog_post(valid_fields, LONG_BODY, "blog/x.md", site_root)
        assert result.is_clean

    def test_rule_order_within_file(self, site_root):
        fields = {"date": "nope", "image": "/gone.png", "tags": []}
        result = validate_blog_post(fields, "", "blog/x.md", site_root)
        assert messages(result.errors) == [
            "blog/x.md: Missing required field 'title'",
            "blog/x.md: Invalid date format 'nope'",
        ]
        assert messages(result.warnings) == [
            "blog/x.md: Missing 'excerpt' field (recommended)",
            "blog/x.md: Image not found: /gone.png",
            "blog/x.md: Content is very short (0 characters)",
            "blog/x.md: Tags array is empty",
        ]


class TestProjectRules:
    """Tests for project validation."""

    @pytest.fixture
    def valid_fields(self):
        return {
            "title": "Generator",
            "description": "A static site generator",
            "technologies": ["Python"],
            "image": "/assets/images/cover.png",
            "demo_url": "https://example.com",
            "github_url": "https://github.com/example/generator",
        }

    def test_valid_project(self, site_root, valid_fields):
        result = validate_project(valid_fields, LONG_BODY, "projects/p.md", site_root)
        assert result.is_clean

    def test_missing_frontmatter_stops(self, site_root):
        result = validate_project(None, "", "projects/p.md", site_root)
        assert messages(result.errors) == ["projects/p.md: Missing or invalid frontmatter"]
        assert result.warnings == []

    def test_required_fields(self, site_root, valid_fields):
        del valid_fields["title"]
        valid_fields["description"] = ""
        result = validate_project(valid_fields, LONG_BODY, "projects/p.md", site_root)
        assert messages(result.errors) == [
            "projects/p.md: Missing required field 'title'",
            "projects/p.md: Missing required field 'description'",
        ]

    @pytest.mark.parametrize("technologies", [None, "Python", []])
    def test_technologies_warning(self, site_root, valid_fields, technologies):
        if technologies is None:
            del valid_fields["technologies"]
        else:
            valid_fields["technologies"] = technologies
        result = validate_project(valid_fields, LONG_BODY, "projects/p.md", site_root)
        assert messages(result.warnings) == ["projects/p.md: No technologies listed"]

    def test_absent_image_warns(self, site_root, valid_fields):
        del valid_fields["image"]
        result = validate_project(valid_fields, LONG_BODY, "projects/p.md", site_root)
        assert messages(result.warnings) == ["projects/p.md: No featured image specified"]

    def test_missing_image_file_warns_with_path(self, site_root, valid_fields):
        valid_fields["image"] = "/missing.png"
        result = validate_project(valid_fields, LONG_BODY, "projects/p.md", site_root)
        assert messages(result.warnings) == ["projects/p.md: Image not found: /missing.png"]

    def test_unstattable_image_warns(self, site_root, valid_fields):
        long_name = "/assets/" + "b" * 300 + ".png"
        valid_fields["image"] = long_name
        result = validate_project(valid_fields, LONG_BODY, "projects/p.md", site_root)
        assert messages(result.warnings) == [f"projects/p.md: Image not found: {long_name}"]

    def test_no_links_warns(self, site_root, valid_fields):
        del valid_fields["demo_url"]
        del valid_fields["github_url"]
        result = validate_project(valid_fields, LONG_BODY, "projects/p.md", site_root)
        assert messages(result.warnings) == ["projects/p.md: No demo or GitHub URL provided"]

    def test_one_link_is_enough(self, site_root, valid_fields):
        del valid_fields["demo_url"]
        result = validate_project(valid_fields, LONG_BODY, "projects/p.md", site_root)
        assert result.is_clean

    def test_invalid_demo_url(self, site_root, valid_fields):
        valid_fields["demo_url"] = "not-a-url"
        result = validate_project(valid_fields, LONG_BODY, "projects/p.md", site_root)
        assert messages(result.errors) == ["projects/p.md: Invalid demo_url: not-a-url"]

    def test_invalid_github_url(self, site_root, valid_fields):
        valid_fields["github_url"] = "github.com/example"
        result = validate_project(valid_fields, LONG_BODY, "projects/p.md", site_root)
        assert messages(result.errors) == ["projects/p.md: Invalid github_url: github.com/example"]

    def test_short_body_threshold(self, site_root, valid_fields):
        result = validate_project(valid_fields, "x" * 150, "projects/p.md", site_root)
        assert messages(result.warnings) == [
            "projects/p.md: Project details are very short (150 characters)"
        ]
        assert validate_project(valid_fields, "x" * 200, "projects/p.md", site_root).is_clean

    def test_rule_order_within_file(self, site_root):
        fields = {"demo_url": "bad", "github_url": "also bad"}
        result = validate_project(fields, "tiny", "projects/p.md", site_root)
        assert messages(result.errors) == [
            "projects/p.md: Missing required field 'title'",
            "projects/p.md: Missing required field 'description'",
            "projects/p.md: Invalid demo_url: bad",
            "projects/p.md: Invalid github_url: also bad",
        ]
        assert messages(result.warnings) == [
            "projects/p.md: No technologies listed",
            "projects/p.md: No featured image specified",
            "projects/p.md: Project details are very short (4 characters)",
        ]


class TestRuleSets:
    """Tests for the rule set structure."""

    def test_every_rule_has_known_severity(self):
        for rule in (*BLOG_POST_RULES, *PROJECT_RULES):
            assert rule.severity in ("error", "warning")

    def test_list_values_rendered_as_text(self, site_root):
        doc = ContentDocument(
            filename="blog/x.md",
            fields={"title": "T", "date": ["2024-01-15"], "excerpt": "E"},
            body=LONG_BODY,
            site_root=site_root,
        )
        result = evaluate_rules(doc, BLOG_POST_RULES)
        assert result.is_clean

    def test_rule_check_prefixes_filename(self, site_root):
        doc = ContentDocument(filename="blog/x.md", fields={}, body="", site_root=site_root)
        finding = BLOG_POST_RULES[0].check(doc)
        assert finding == Finding("error", "blog/x.md: Missing required field 'title'")
        assert finding.rule == "required-title"

    def test_findings_name_their_rule(self, site_root):
        fields = {"title": "T", "description": "D", "demo_url": "bad"}
        result = validate_project(fields, LONG_BODY, "projects/p.md", site_root)
        assert [f.rule for f in result.errors] == ["valid-demo_url"]
        assert [f.rule for f in result.warnings] == ["technologies", "featured-image"]

    def test_rule_names_unique_per_set(self):
        for rules in (BLOG_POST_RULES, PROJECT_RULES):
            names = [rule.name for rule in rules]
            assert len(names) == len(set(names))
