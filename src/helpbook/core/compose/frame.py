"""Frame page: a fixed sidebar beside an iframe that shows one page at a time"""

import json
from collections.abc import Mapping

from helpbook.core.compose.layout import esc, head, page
from helpbook.core.compose.sidebar import sidebar
from helpbook.core.models import BookMetadata, DirectoryNode, Document
from helpbook.core.paths import HOME_PAGE, WELCOME_PAGE


FRAME_NAME = 'content-frame'

FRAME_STYLE = f"""<style>
#{FRAME_NAME} {{ display: block; width: 100%; height: 100vh; border: none; }}
</style>"""

# the frame page must never load inside its own iframe (e.g. via a breadcrumb 'Home' link)
FRAME_GUARD = f"""<script>
if (window.self !== window.top) {{
    window.location.replace({json.dumps(WELCOME_PAGE)});
}}
</script>"""

FRAME_SCRIPT = f"""<script>
(function () {{
    const frame = document.getElementById({json.dumps(FRAME_NAME)});
    function pageFromHash() {{
        const path = decodeURIComponent(window.location.hash.slice(1));
        if (!path || path.indexOf(':') !== -1 || path.charAt(0) === '/' || path.indexOf('..') !== -1) {{
            return {json.dumps(WELCOME_PAGE)};
        }}
        return path;
    }}
    function show() {{
        const target = pageFromHash();
        if (frame.getAttribute('src') !== target) frame.setAttribute('src', target);
    }}
    document.querySelectorAll('#help-sidebar a[target={json.dumps(FRAME_NAME)}]').forEach(function (link) {{
        link.addEventListener('click', function (event) {{
            event.preventDefault();
            window.location.hash = link.getAttribute('href');
        }});
    }});
    document.addEventListener('keydown', function (event) {{
        if (event.altKey && event.key === 'ArrowLeft') history.back();
        if (event.altKey && event.key === 'ArrowRight') history.forward();
    }});
    window.addEventListener('hashchange', show);
    show();
}})();
</script>"""


def frame_page(tree: DirectoryNode, documents: Mapping[str, Document], metadata: BookMetadata) -> str:
    """index.html for sidebar-less builds.

    Pages are shown in the iframe and addressed by the URL fragment
    (index.html#guides/basic-usage.html); an empty fragment shows welcome.html.
    """
    title = metadata.help_book_title
    main = '\n'.join([
        f'<iframe id="{FRAME_NAME}" name="{FRAME_NAME}" src="{WELCOME_PAGE}" title="{esc(title)}"></iframe>',
        FRAME_SCRIPT,
    ])
    nav = sidebar(tree, documents, title, HOME_PAGE, target=FRAME_NAME)
    return page(head(HOME_PAGE, title, extra='\n'.join([FRAME_STYLE, FRAME_GUARD])), main, nav)
