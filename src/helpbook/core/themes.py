"""Built-in stylesheets and custom stylesheet loading"""

from pathlib import Path
from typing import Optional

from helpbook.core.errors import BuildError
from helpbook.core.models import Theme


BASE_CSS = """\
* { box-sizing: border-box; }
body { margin: 0; line-height: 1.6; }
img { max-width: 100%; height: auto; }
.help-main-content { padding: 24px; max-width: 900px; margin: 0 auto; }
.help-main-content.with-sidebar { margin-left: 280px; }
.help-sidebar { position: fixed; top: 0; left: 0; bottom: 0; width: 260px; overflow-y: auto; padding: 16px; }
.toc-list { list-style: none; padding-left: 12px; margin: 0; }
.toc-section-header { cursor: pointer; display: flex; gap: 6px; align-items: center; }
.current-page { font-weight: 600; }
.breadcrumb ol { list-style: none; display: flex; flex-wrap: wrap; gap: 8px; padding: 0; margin: 0 0 16px 0; }
.breadcrumb li + li::before { content: "\\203A"; margin-right: 8px; opacity: 0.6; }
.subtitle, .section-description { opacity: 0.7; margin-top: 0; }
.alert { display: flex; align-items: flex-start; gap: 8px; }
table { border-collapse: collapse; }
th, td { border: 1px solid #d2d2d7; padding: 6px 10px; }
"""

THEME_CSS: dict[Theme, str] = {
    Theme.modern: """\
body { font-family: -apple-system, BlinkMacSystemFont, "Segoe UI", Roboto, "Helvetica Neue", Arial, sans-serif; color: #1d1d1f; background: #ffffff; }
a { color: #0071e3; text-decoration: none; }
a:hover { text-decoration: underline; }
h1 { border-bottom: 1px solid #d2d2d7; padding-bottom: 8px; }
.help-sidebar { background: #f5f5f7; border-right: 1px solid #d2d2d7; }
code, pre { background: #f5f5f7; border-radius: 6px; font-family: "SF Mono", Monaco, monospace; }
pre { padding: 16px; overflow-x: auto; }
@media (prefers-color-scheme: dark) {
    body { color: #f5f5f7; background: #1d1d1f; }
    a { color: #2997ff; }
    .help-sidebar, code, pre { background: #2d2d2d; border-color: #424245; }
}
""",
    Theme.mavericks: """\
body { font-family: "Lucida Grande", "Helvetica Neue", Helvetica, sans-serif; font-size: 13px; color: #333333; background: #ffffff; }
a { color: #0066cc; }
h1 { font-weight: normal; color: #222222; }
.help-sidebar { background: #e8ecf1; border-right: 1px solid #b5bcc7; }
code, pre { background: #f4f4f4; border: 1px solid #dddddd; font-family: Menlo, Monaco, monospace; }
pre { padding: 10px; }
""",
    Theme.tiger: """\
body { font-family: "Lucida Grande", Geneva, Verdana, sans-serif; font-size: 12px; color: #000000; background: #ffffff; }
a { color: #0000ee; }
h1 { font-size: 18px; background: linear-gradient(#f0f0f0, #d8d8d8); border: 1px solid #a5a5a5; padding: 4px 8px; }
.help-sidebar { background: #d6dde5; border-right: 1px solid #8e8e8e; }
code, pre { font-family: Monaco, "Courier New", monospace; }
pre { background: #eeeeee; padding: 8px; }
""",
}


def stylesheet(theme: Theme, custom_css: Optional[Path] = None) -> str:
    """Stylesheet text for a theme; the custom theme reads custom_css verbatim."""
    if theme == Theme.custom:
        if custom_css is None:
            raise BuildError("Custom theme requires a stylesheet path")
        try:
            return custom_css.read_text(encoding='utf-8')
        except OSError as e:
            raise BuildError(f"Custom stylesheet not readable: {custom_css}: {e}") from e
    return BASE_CSS + THEME_CSS[theme]
