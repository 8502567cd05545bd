#!/usr/bin/env python3
"""
Schema definitions for the article registry and article metadata blocks.

Both record shapes are described declaratively as JSON Schema (Draft 7)
documents generated for a given locale set, and checked with jsonschema so
that every violation is reported, not just the first one. A document that
passes is converted into typed, immutable records.

Record shapes:
- Registry document: {"articles": [RegistryEntry, ...]}
- Metadata block: the YAML header at the top of each article source file
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, Mapping, Optional, Sequence, Tuple, TypeVar

from jsonschema import Draft7Validator

from content_config import DEFAULT_LOCALES, DIFFICULTY_LEVELS

REGISTRY_SLUG_PATTERN = r"^[a-z0-9-]+$"
METADATA_SLUG_PATTERN = r"^[a-z0-9_-]+$"
ROUTE_PATTERN = r"^/"

T = TypeVar("T")


# ============================================================================
# Schema documents
# ============================================================================

def localized_text_schema(locales: Sequence[str]) -> Dict[str, Any]:
    """Mapping from every locale code to a string."""
    return {
        "type": "object",
        "properties": {locale: {"type": "string"} for locale in locales},
        "required": list(locales),
    }


def localized_keywords_schema(locales: Sequence[str]) -> Dict[str, Any]:
    """Mapping from every locale code to a list of strings."""
    return {
        "type": "object",
        "properties": {
            locale: {"type": "array", "items": {"type": "string"}}
            for locale in locales
        },
        "required": list(locales),
    }


def registry_entry_schema(locales: Sequence[str] = DEFAULT_LOCALES) -> Dict[str, Any]:
    return {
        "type": "object",
        "properties": {
            "slug": {"type": "string", "pattern": REGISTRY_SLUG_PATTERN},
            "route": {"type": "string", "pattern": ROUTE_PATTERN},
            "name": localized_text_schema(locales),
            "description": localized_text_schema(locales),
            "keywords": localized_keywords_schema(locales),
            "pinned": {"type": "boolean"},
            "order": {"type": "number"},
        },
        "required": ["slug", "route", "name", "keywords"],
    }


def registry_schema(locales: Sequence[str] = DEFAULT_LOCALES) -> Dict[str, Any]:
    return {
        "$schema": "http://json-schema.org/draft-07/schema#",
        "title": "Article registry",
        "type": "object",
        "properties": {
            "articles": {
                "type": "array",
                "items": registry_entry_schema(locales),
            },
        },
        "required": ["articles"],
    }


def metadata_schema(locales: Sequence[str] = DEFAULT_LOCALES) -> Dict[str, Any]:
    return {
        "$schema": "http://json-schema.org/draft-07/schema#",
        "title": "Article metadata block",
        "type": "object",
        "properties": {
            "title": localized_text_schema(locales),
            "slug": {"type": "string", "pattern": METADATA_SLUG_PATTERN},
            "keywords": localized_keywords_schema(locales),
            "created": {"type": "string"},
            "updated": {"type": "string"},
            "author": {"type": "string"},
            "difficulty": {"type": "string", "enum": list(DIFFICULTY_LEVELS)},
            "estimatedReadTime": {"type": "number", "minimum": 0},
        },
        "required": ["title", "slug", "keywords", "created"],
    }


# ============================================================================
# Typed records
# ============================================================================

def _localized(raw: Mapping[str, str], locales: Sequence[str]) -> Dict[str, str]:
    return {locale: raw[locale] for locale in locales}


def _localized_keywords(raw: Mapping[str, Any], locales: Sequence[str]) -> Dict[str, Tuple[str, ...]]:
    return {locale: tuple(raw[locale]) for locale in locales}


@dataclass(frozen=True)
class RegistryEntry:
    """
    One article as declared in the registry.

    Attributes:
        slug: Article identifier, also the base name of its source files
        route: Site path of the article, starting with '/'
        name: Display name per locale
        keywords: Keyword list per locale
        description: Optional description per locale
        pinned: Whether the article is pinned to the top of listings
        order: Sort key among pinned articles (lower comes first)
    """
    slug: str
    route: str
    name: Mapping[str, str]
    keywords: Mapping[str, Tuple[str, ...]]
    description: Optional[Mapping[str, str]] = None
    pinned: bool = False
    order: Optional[float] = None

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any], locales: Sequence[str] = DEFAULT_LOCALES) -> "RegistryEntry":
        """Build an entry from a mapping that already passed schema validation.

        Only the configured locales are read; other locale keys are ignored.
        """
        description = raw.get("description")
        return cls(
            slug=raw["slug"],
            route=raw["route"],
            name=_localized(raw["name"], locales),
            keywords=_localized_keywords(raw["keywords"], locales),
            description=_localized(description, locales) if description is not None else None,
            pinned=raw.get("pinned", False),
            order=raw.get("order"),
        )


@dataclass(frozen=True)
class ArticleMetadata:
    """Metadata block embedded at the top of one article source file."""
    title: Mapping[str, str]
    slug: str
    keywords: Mapping[str, Tuple[str, ...]]
    created: str
    updated: Optional[str] = None
    author: Optional[str] = None
    difficulty: Optional[str] = None
    estimated_read_time: Optional[float] = None

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any], locales: Sequence[str] = DEFAULT_LOCALES) -> "ArticleMetadata":
        return cls(
            title=_localized(raw["title"], locales),
            slug=raw["slug"],
            keywords=_localized_keywords(raw["keywords"], locales),
            created=raw["created"],
            updated=raw.get("updated"),
            author=raw.get("author"),
            difficulty=raw.get("difficulty"),
            estimated_read_time=raw.get("estimatedReadTime"),
        )


# ============================================================================
# Validation
# ============================================================================

@dataclass(frozen=True)
class SchemaViolation:
    """
    One schema problem.

    Attributes:
        path: Dotted path of the offending field ('<root>' for the document)
        message: Human-readable reason
    """
    path: str
    message: str

    def __str__(self) -> str:
        return f"{self.path}: {self.message}"


@dataclass
class SchemaResult(Generic[T]):
    """Either a typed value or the list of violations that prevented it."""
    value: Optional[T] = None
    violations: List[SchemaViolation] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.violations


def format_path(path: Sequence[Any]) -> str:
    """
    Render a jsonschema error path as a dotted field path.

    Example:
        >>> format_path(["articles", 0, "name", "cz"])
        'articles.0.name.cz'
    """
    return ".".join(str(part) for part in path) or "<root>"


def collect_violations(schema: Dict[str, Any], raw: Any) -> List[SchemaViolation]:
    """Run a schema against a document and return every violation, sorted by path."""
    validator = Draft7Validator(schema)
    errors = sorted(
        validator.iter_errors(raw),
        key=lambda e: ([str(part) for part in e.absolute_path], e.message),
    )
    return [SchemaViolation(format_path(e.absolute_path), e.message) for e in errors]


def validate_registry_document(raw: Any, locales: Sequence[str] = DEFAULT_LOCALES) -> SchemaResult[List[RegistryEntry]]:
    """
    Validate a parsed registry document.

    Args:
        raw: Parsed JSON content of the registry file
        locales: Locale codes every localized field must cover

    Returns:
        SchemaResult holding the entries in declared order, or the violations
    """
    violations = collect_violations(registry_schema(locales), raw)
    if violations:
        return SchemaResult(violations=violations)
    return SchemaResult(value=[RegistryEntry.from_mapping(item, locales) for item in raw["articles"]])


def validate_metadata_block(raw: Any, locales: Sequence[str] = DEFAULT_LOCALES) -> SchemaResult[ArticleMetadata]:
    """
    Validate a parsed article metadata block.

    Args:
        raw: Mapping parsed from the YAML header of an article file
        locales: Locale codes every localized field must cover

    Returns:
        SchemaResult holding the typed metadata, or the violations
    """
    violations = collect_violations(metadata_schema(locales), raw)
    if violations:
        return SchemaResult(violations=violations)
    return SchemaResult(value=ArticleMetadata.from_mapping(raw, locales))
