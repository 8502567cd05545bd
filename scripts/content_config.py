#!/usr/bin/env python3
"""
Repository layout configuration for the content validator.

Holds the fixed conventions of an article repository (registry file name,
articles directory, source extension, supported locales) and a small
dataclass that resolves them to concrete paths under a repository root.
"""

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Tuple


DEFAULT_LOCALES: Tuple[str, ...] = ("en", "ru", "cz")

ARTICLE_EXTENSION = ".mdx"
REGISTRY_FILENAME = "config.json"
ARTICLES_DIRNAME = "articles"

DIFFICULTY_LEVELS: Tuple[str, ...] = ("beginner", "intermediate", "advanced")

# Locale codes double as directory names
_LOCALE_PATTERN = re.compile(r"^[A-Za-z0-9_-]+$")


@dataclass(frozen=True)
class RepositoryLayout:
    """
    Resolved locations of the registry and article sources.

    Attributes:
        root: Repository root directory
        locales: Supported locale codes, in reporting order
        extension: Article source file extension, including the leading dot
        registry_filename: Name of the registry file at the root
        articles_dirname: Name of the articles directory at the root
    """
    root: Path
    locales: Tuple[str, ...] = DEFAULT_LOCALES
    extension: str = ARTICLE_EXTENSION
    registry_filename: str = REGISTRY_FILENAME
    articles_dirname: str = ARTICLES_DIRNAME

    def __post_init__(self):
        object.__setattr__(self, "root", Path(self.root))
        object.__setattr__(self, "locales", tuple(self.locales))

        if not self.locales:
            raise ValueError("At least one locale must be configured")
        if len(set(self.locales)) != len(self.locales):
            raise ValueError(f"Duplicate locale codes: {', '.join(self.locales)}")
        for locale in self.locales:
            if not _LOCALE_PATTERN.match(locale):
                raise ValueError(f"Invalid locale code: {locale!r}")
        if not self.extension.startswith(".") or len(self.extension) < 2:
            raise ValueError(f"Article extension must start with '.': {self.extension!r}")

    @property
    def registry_path(self) -> Path:
        return self.root / self.registry_filename

    @property
    def articles_root(self) -> Path:
        return self.root / self.articles_dirname

    def locale_dir(self, locale: str) -> Path:
        return self.articles_root / locale

    def article_path(self, locale: str, slug: str) -> Path:
        """
        Path of the source file for an article in one locale.

        Example:
            >>> RepositoryLayout(Path("/repo")).article_path("en", "faq")
            PosixPath('/repo/articles/en/faq.mdx')
        """
        return self.locale_dir(locale) / f"{slug}{self.extension}"
