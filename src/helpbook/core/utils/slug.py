"""Display names and heading anchor names"""

import re


def display_name(name: str) -> str:
    """Turn a directory or file stem into a label ('getting-started' -> 'getting started')."""
    return re.sub(r'[-_]', ' ', name)


def anchor_name(text: str) -> str:
    """Heading anchor: spaces become underscores, every other non-alphanumeric is removed.

    May return '' for headings made only of punctuation.
    """
    text = re.sub(r'\s+', '_', text.strip())
    return ''.join(c for c in text if c.isalnum() or c == '_')
