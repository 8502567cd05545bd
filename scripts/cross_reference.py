#!/usr/bin/env python3
"""Reconcile registry entries against the article files found on disk."""

from typing import List, Sequence, Set

from articles import DiscoveredFile
from content_config import RepositoryLayout
from report import Report
from schemas import RegistryEntry


def locales_with_article(layout: RepositoryLayout, slug: str) -> List[str]:
    """Locales that contain a source file for the slug, checked directly on disk."""
    return [locale for locale in layout.locales if layout.article_path(locale, slug).is_file()]


def cross_reference(
    layout: RepositoryLayout,
    entries: Sequence[RegistryEntry],
    inventory: Sequence[DiscoveredFile],
    report: Report,
) -> None:
    """
    Check every registry entry has a file and every file is registered.

    Args:
        layout: Repository layout used for per-locale existence checks
        entries: Validated registry entries, in declared order
        inventory: Files discovered during metadata validation
        report: Accumulator receiving errors, warnings and success lines

    A registered slug with no file in any locale is an error. A file whose
    slug is not registered is an orphan and only produces a warning, since
    articles may be staged before they are registered.
    """
    on_disk: Set[str] = {found.slug for found in inventory}
    registered: Set[str] = {entry.slug for entry in entries}

    for entry in entries:
        if entry.slug in on_disk:
            locales = locales_with_article(layout, entry.slug)
            report.success(f'"{entry.slug}" exists in: {", ".join(locales)}')
        else:
            report.error(f'"{entry.slug}" is registered but has no article file in any locale')

    for slug in sorted(on_disk - registered):
        locales = sorted(
            {found.locale for found in inventory if found.slug == slug},
            key=layout.locales.index,
        )
        report.warn(
            f'Orphaned article "{slug}" is not registered in {layout.registry_filename} '
            f'(found in: {", ".join(locales)})'
        )
