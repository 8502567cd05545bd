#!/usr/bin/env python3
"""Check that the articles directory and its locale subdirectories exist."""

from typing import List

from content_config import RepositoryLayout
from report import Report


def check_structure(layout: RepositoryLayout, report: Report) -> List[str]:
    """
    Confirm the articles root exists with at least one locale directory.

    A subset of locales is normal; missing locale directories are listed as
    information only.

    Returns:
        Configured locales whose directory exists, in configured order
    """
    root = layout.articles_root

    if not root.is_dir():
        report.error(f"{layout.articles_dirname}/ directory not found at {root}")
        return []

    present = [locale for locale in layout.locales if layout.locale_dir(locale).is_dir()]

    if not present:
        expected = ", ".join(f"{layout.articles_dirname}/{locale}/" for locale in layout.locales)
        report.error(f"No locale directories found (expected at least one of: {expected})")
        return []

    report.success(f"Locale directories present: {', '.join(present)}")
    for locale in layout.locales:
        if locale not in present:
            report.info(f"{layout.articles_dirname}/{locale}/ does not exist")
    return present
