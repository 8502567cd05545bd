#!/usr/bin/env python3
"""
Extraction of the leading metadata block from article source files.

An article source file starts with a YAML block fenced by '---' lines,
followed by free-form body content:

    ---
    slug: faq
    created: 2024-01-15
    ---
    Body content...

Only the block is parsed. The body is handed back untouched and is never
interpreted by the validator.
"""

from typing import Any, Dict, Tuple

import yaml

DELIMITER = "---"

_TIMESTAMP_TAG = "tag:yaml.org,2002:timestamp"


class MetadataBlockError(Exception):
    """Raised when the metadata block of a file cannot be extracted."""
    pass


class _MetadataLoader(yaml.SafeLoader):
    """SafeLoader that keeps unquoted dates as plain strings."""
    pass


def _construct_timestamp_as_string(loader: yaml.SafeLoader, node: yaml.ScalarNode) -> str:
    return loader.construct_scalar(node)


_MetadataLoader.add_constructor(_TIMESTAMP_TAG, _construct_timestamp_as_string)


def split_metadata_block(text: str) -> Tuple[str, str]:
    """
    Split raw file contents into metadata block text and body text.

    Args:
        text: Full contents of an article source file

    Returns:
        Tuple of (block_text, body_text). block_text is empty when the file
        does not start with a metadata block.

    Raises:
        MetadataBlockError: If the opening '---' has no closing '---'
    """
    text = text.lstrip("\ufeff").replace("\r\n", "\n")
    lines = text.split("\n")

    if lines[0].rstrip() != DELIMITER:
        return "", text

    for index in range(1, len(lines)):
        if lines[index].rstrip() == DELIMITER:
            return "\n".join(lines[1:index]), "\n".join(lines[index + 1:])

    raise MetadataBlockError(f"metadata block is not terminated (missing closing '{DELIMITER}')")


def parse_metadata_block(text: str) -> Dict[str, Any]:
    """
    Extract and parse the metadata block of an article source file.

    A file without a metadata block yields an empty mapping, leaving it to
    schema validation to report the missing fields.

    Args:
        text: Full contents of an article source file

    Returns:
        Dictionary of metadata fields

    Raises:
        MetadataBlockError: If the block is unterminated, is not valid YAML,
            or does not contain a mapping
    """
    block, _body = split_metadata_block(text)
    if not block.strip():
        return {}

    try:
        data = yaml.load(block, Loader=_MetadataLoader)
    except yaml.YAMLError as e:
        detail = " ".join(str(e).split())
        raise MetadataBlockError(f"invalid YAML in metadata block: {detail}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise MetadataBlockError(f"metadata block must be a mapping, found {type(data).__name__}")
    return data
