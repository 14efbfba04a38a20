"""Hugo content provider: _index.md sections, weight ordering, alert shortcodes"""

import html
import logging
import re
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import NamedTuple, Optional

from helpbook.core.errors import ConversionFailed, MalformedFrontMatter
from helpbook.core.frontmatter import extract, extract_directory_metadata
from helpbook.core.markdown import render_inline
from helpbook.core.models import DirectoryMetadata, Document
from helpbook.core.providers.base import ContentProvider
from helpbook.core.utils.fs import iter_files, relative_posix


logger = logging.getLogger(__name__)

ALERT_RE = re.compile(r'\{\{<\s*alert\s+([^>]*?)/>\s*\}\}')


class AlertStyle(NamedTuple):
    css_class:  str
    background: str
    border:     str
    icon:       str


ALERT_STYLES: dict[str, AlertStyle] = {
    'info':    AlertStyle('alert-info',    '#d1ecf1', '#bee5eb', 'ℹ️'),
    'primary': AlertStyle('alert-primary', '#cce5ff', '#b8daff', 'ℹ️'),
    'warning': AlertStyle('alert-warning', '#fff3cd', '#ffeaa7', '⚠️'),
    'danger':  AlertStyle('alert-danger',  '#f8d7da', '#f5c6cb', '❗️'),
    'error':   AlertStyle('alert-danger',  '#f8d7da', '#f5c6cb', '❗️'),
    'success': AlertStyle('alert-success', '#d4edda', '#c3e6cb', '✅'),
    'light':   AlertStyle('alert-light',   '#fefefe', '#e9ecef', '💡'),
    'dark':    AlertStyle('alert-dark',    '#d6d8d9', '#c6c8ca', '◾️'),
}


def _attribute(name: str, attributes: str) -> Optional[str]:
    """Value of name="..." or name='...' inside a shortcode's attribute string."""
    m = re.search(rf'\b{name}\s*=\s*(?:"([^"]*)"|\'([^\']*)\')', attributes)
    if not m:
        return None
    return m.group(1) if m.group(1) is not None else m.group(2)


def _inline(text: str) -> str:
    try:
        return render_inline(text)
    except ConversionFailed as e:
        logger.warning("Alert text left unrendered: %s", e)
        return html.escape(text)


def alert_html(icon: str, context: str, text: str) -> str:
    """Styled alert box; unknown contexts fall back to info."""
    style = ALERT_STYLES.get(context.lower(), ALERT_STYLES['info'])
    return (
        f'<div class="alert {style.css_class}" style="padding: 12px 16px; margin: 16px 0; '
        f'border-left: 4px solid {style.border}; background-color: {style.background}; border-radius: 4px;">\n'
        f'<span class="alert-icon">{html.escape(icon or style.icon)}</span>\n'
        f'<span class="alert-text">{_inline(text)}</span>\n'
        f'</div>'
    )


class HugoContentProvider(ContentProvider):
    identifier = 'hugo'
    display_name = 'Hugo'
    metadata_file_name = '_index.md'

    def _is_content(self, path: Path) -> bool:
        # underscore files (_index.md and friends) carry metadata only
        return path.suffix == self.content_suffix and not path.name.startswith('_')

    def _load(self, root: Path, path: Path) -> Optional[Document]:
        """Parse one file; any per-file failure is logged and yields None."""
        rel = relative_posix(path, root)
        try:
            raw = path.read_text(encoding='utf-8')
            front_matter, body = extract(raw)
            if front_matter.draft and not self.include_drafts:
                logger.info("Skipping draft %s", rel)
                return None
            body = self.process_shortcodes(body)
            if '{{<' in body:
                logger.warning("Unexpanded shortcode left verbatim in %s", rel)
            rendered = self.converter(body)
        except (OSError, UnicodeDecodeError, MalformedFrontMatter, ConversionFailed) as e:
            logger.warning("Skipping %s: %s", path, e)
            return None
        logger.debug("Parsed %s", rel)
        return Document(relative_path=rel, front_matter=front_matter, raw_body=body, rendered_html=rendered)

    def scan_documents(self, root: Path) -> list[Document]:
        files = [p for p in iter_files(root) if self._is_content(p)]
        documents: list[Document] = []
        with ThreadPoolExecutor(max_workers=self.max_workers) as pool:
            futures = [pool.submit(self._load, root, p) for p in files]
            for future in as_completed(futures):
                doc = future.result()
                if doc is not None:
                    documents.append(doc)
        logger.info("Loaded %d of %d document(s) from %s", len(documents), len(files), root)
        return sorted(documents, key=lambda d: d.relative_path)

    def scan_directory_metadata(self, root: Path) -> dict[str, DirectoryMetadata]:
        metadata: dict[str, DirectoryMetadata] = {}
        for path in iter_files(root):
            if path.name != self.metadata_file_name:
                continue
            try:
                meta = extract_directory_metadata(path.read_text(encoding='utf-8'))
            except (OSError, UnicodeDecodeError, MalformedFrontMatter) as e:
                logger.warning("Failed to parse %s: %s", path, e)
                continue
            metadata[relative_posix(path.parent, root)] = meta
        return metadata

    def process_shortcodes(self, body: str) -> str:
        return ALERT_RE.sub(self._expand_alert, body)

    def _expand_alert(self, match: re.Match) -> str:
        attributes = match.group(1)
        return alert_html(
            icon=_attribute('icon', attributes) or '',
            context=_attribute('context', attributes) or 'info',
            text=_attribute('text', attributes) or '',
        )
