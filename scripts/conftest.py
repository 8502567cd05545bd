#!/usr/bin/env python3
"""Shared fixtures for building article repositories on disk."""

import json
from pathlib import Path
from typing import Any, Dict, List, Optional

import pytest
import yaml

from content_config import DEFAULT_LOCALES, RepositoryLayout


class RepoBuilder:
    """Writes a throwaway article repository under a temporary directory."""

    def __init__(self, root: Path):
        self.root = root
        self.layout = RepositoryLayout(root)

    @staticmethod
    def localized(value: str) -> Dict[str, str]:
        return {locale: f"{value} ({locale})" for locale in DEFAULT_LOCALES}

    @staticmethod
    def keywords(*words: str) -> Dict[str, List[str]]:
        return {locale: list(words) for locale in DEFAULT_LOCALES}

    @classmethod
    def entry(cls, slug: str, route: Optional[str] = None, **extra: Any) -> Dict[str, Any]:
        """A schema-valid registry entry."""
        entry = {
            "slug": slug,
            "route": route if route is not None else f"/{slug}",
            "name": cls.localized(slug),
            "keywords": cls.keywords(slug),
        }
        entry.update(extra)
        return entry

    @classmethod
    def metadata(cls, slug: str, **extra: Any) -> Dict[str, Any]:
        """A schema-valid metadata block."""
        metadata = {
            "title": cls.localized(slug),
            "slug": slug,
            "keywords": cls.keywords(slug),
            "created": "2024-01-15",
        }
        metadata.update(extra)
        return metadata

    @classmethod
    def article_text(cls, metadata: Dict[str, Any], body: str = "# Heading\n\nSome content.\n") -> str:
        block = yaml.safe_dump(metadata, sort_keys=False, allow_unicode=True)
        return f"---\n{block}---\n{body}"

    def write_registry(self, entries: List[Dict[str, Any]]) -> Path:
        return self.write_raw_registry(json.dumps({"articles": entries}, indent=2))

    def write_raw_registry(self, text: str) -> Path:
        path = self.layout.registry_path
        path.write_text(text, encoding="utf-8")
        return path

    def make_locale(self, locale: str) -> Path:
        path = self.layout.locale_dir(locale)
        path.mkdir(parents=True, exist_ok=True)
        return path

    def write_article(self, locale: str, slug: str, text: Optional[str] = None) -> Path:
        """Write articles/<locale>/<slug>.mdx, with valid metadata unless text is given."""
        if text is None:
            text = self.article_text(self.metadata(slug))
        path = self.make_locale(locale) / f"{slug}{self.layout.extension}"
        path.write_text(text, encoding="utf-8")
        return path


@pytest.fixture
def repo(tmp_path):
    return RepoBuilder(tmp_path)
