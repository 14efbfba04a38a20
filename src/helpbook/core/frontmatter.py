"""Front matter detection and extraction (YAML, with TOML recognized but not parsed)"""

import logging
from datetime import date
from typing import Any

import yaml

from helpbook.core.errors import MalformedFrontMatter
from helpbook.core.models import DirectoryMetadata, FrontMatter


logger = logging.getLogger(__name__)

YAML_DELIMITER = '---'
TOML_DELIMITER = '+++'
KNOWN_KEYS = {'title', 'description', 'keywords', 'date', 'draft', 'weight', 'aliases', 'tags', 'categories'}


def _split_block(text: str, delimiter: str) -> tuple[str, str]:
    """Return (block, body) for text whose first line is delimiter; raise if never closed."""
    lines = text.split('\n')
    for i in range(1, len(lines)):
        if lines[i].strip() == delimiter:
            body = '\n'.join(lines[i + 1:]).lstrip('\n').rstrip()
            return '\n'.join(lines[1:i]), body
    raise MalformedFrontMatter(f"Front matter opened with '{delimiter}' but never closed")


def _string_list(value: Any) -> list[str] | None:
    """Normalize a YAML sequence of strings; other shapes are ignored."""
    if isinstance(value, list):
        return [str(v) for v in value if isinstance(v, (str, int, float))]
    return None


def _keywords(value: Any) -> list[str] | None:
    if isinstance(value, str):
        return [k.strip() for k in value.split(',') if k.strip()]
    return _string_list(value)


def _int(value: Any) -> int | None:
    # bool is an int subclass; `weight: true` is not a weight
    return value if isinstance(value, int) and not isinstance(value, bool) else None


def to_front_matter(data: dict[str, Any]) -> FrontMatter:
    """Map a raw YAML mapping onto FrontMatter, dropping values of the wrong shape."""
    custom = {
        str(k): v for k, v in data.items()
        if k not in KNOWN_KEYS and isinstance(v, str)
    }
    raw_date = data.get('date')
    return FrontMatter(
        title=data['title'] if isinstance(data.get('title'), str) else None,
        description=data['description'] if isinstance(data.get('description'), str) else None,
        keywords=_keywords(data.get('keywords')),
        date=raw_date if isinstance(raw_date, (date, str)) else None,
        draft=data['draft'] if isinstance(data.get('draft'), bool) else None,
        weight=_int(data.get('weight')),
        aliases=_string_list(data.get('aliases')),
        tags=_string_list(data.get('tags')),
        categories=_string_list(data.get('categories')),
        custom_properties=custom,
    )


def _parse_yaml(block: str) -> dict[str, Any]:
    try:
        data = yaml.safe_load(block) if block.strip() else {}
    except (yaml.YAMLError, ValueError) as e:
        # impossible timestamps such as 2024-02-30 surface as plain ValueError
        raise MalformedFrontMatter(f"Invalid YAML front matter: {e}") from e
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise MalformedFrontMatter(f"Invalid YAML front matter: expected a mapping, got {type(data).__name__}")
    return data


def extract(raw: str) -> tuple[FrontMatter, str]:
    """Split raw document text into (FrontMatter, body).

    Without a recognized opening delimiter the body is the input unchanged.
    A TOML block is skipped with a warning and yields empty metadata.
    """
    text = raw.lstrip()
    first_line = text.split('\n', 1)[0].strip()

    if first_line == YAML_DELIMITER:
        block, body = _split_block(text, YAML_DELIMITER)
        return to_front_matter(_parse_yaml(block)), body

    if first_line == TOML_DELIMITER:
        _, body = _split_block(text, TOML_DELIMITER)
        logger.warning("TOML front matter is not parsed; using empty metadata")
        return FrontMatter(), body

    return FrontMatter(), raw


def extract_directory_metadata(raw: str) -> DirectoryMetadata:
    """Parse section metadata (title, description, weight) from an _index.md; body is discarded."""
    fm, _ = extract(raw)
    return DirectoryMetadata(title=fm.title, description=fm.description, weight=fm.weight)
