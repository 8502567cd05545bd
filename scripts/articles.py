#!/usr/bin/env python3
"""
Discovery and metadata validation of article source files.

Walks every configured locale directory (non-recursively), validates the
metadata block of each article source file and builds the inventory of
discovered files used for cross-referencing against the registry.
"""

from dataclasses import dataclass
from pathlib import Path
from typing import List

from content_config import RepositoryLayout
from metadata_block import MetadataBlockError, parse_metadata_block
from report import Report
from schemas import validate_metadata_block


@dataclass(frozen=True)
class DiscoveredFile:
    """
    An article source file found on disk.

    Attributes:
        locale: Locale directory the file lives in
        slug: File base name (name without extension), the article identity
        path: Full path to the file
    """
    locale: str
    slug: str
    path: Path


def discover_locale_files(layout: RepositoryLayout, locale: str) -> List[Path]:
    """List article source files directly inside one locale directory, sorted by name."""
    locale_dir = layout.locale_dir(locale)
    if not locale_dir.is_dir():
        return []
    return sorted(p for p in locale_dir.glob(f"*{layout.extension}") if p.is_file())


def validate_article(layout: RepositoryLayout, locale: str, path: Path, report: Report) -> bool:
    """
    Validate the metadata block of a single article source file.

    Args:
        layout: Repository layout (supplies the locale set)
        locale: Locale directory the file was found in
        path: Article source file
        report: Accumulator receiving errors and success lines

    Returns:
        True if the file passed every check
    """
    display = f"{locale}/{path.name}"

    try:
        text = path.read_text(encoding="utf-8")
        raw = parse_metadata_block(text)
    except (OSError, UnicodeDecodeError) as e:
        report.error(f"{display}: failed to read file: {e}")
        return False
    except MetadataBlockError as e:
        report.error(f"{display}: {e}")
        return False

    result = validate_metadata_block(raw, layout.locales)
    if not result.ok:
        report.violations(display, result.violations)
        return False

    # Filename is authoritative for identity
    if result.value.slug != path.stem:
        report.error(f'{display}: slug "{result.value.slug}" does not match filename "{path.stem}"')
        return False

    report.success(display)
    return True


def validate_articles(layout: RepositoryLayout, report: Report) -> List[DiscoveredFile]:
    """
    Validate every article source file in every existing locale directory.

    Every file found is recorded in the inventory under its base name,
    including files whose metadata failed validation.

    Returns:
        Inventory of discovered files, by locale then file name
    """
    inventory: List[DiscoveredFile] = []
    passed = 0

    for locale in layout.locales:
        for path in discover_locale_files(layout, locale):
            if validate_article(layout, locale, path, report):
                passed += 1
            inventory.append(DiscoveredFile(locale=locale, slug=path.stem, path=path))

    report.info(f"Checked {len(inventory)} article files ({passed} valid)")
    return inventory
