"""Page assembly — wraps a rendered fragment in the fixed document shell."""

from __future__ import annotations

import html

DEFAULT_TITLE = "Converted Markdown"

PAGE_STYLESHEET = """\
        body {
            font-family: Arial, sans-serif;
            max-width: 800px;
            margin: 0 auto;
            padding: 20px;
            line-height: 1.6;
        }
        pre {
            background-color: #f4f4f4;
            padding: 10px;
            border-radius: 4px;
            overflow-x: auto;
        }
        code {
            background-color: #f4f4f4;
            padding: 2px 4px;
            border-radius: 2px;
        }
        h1, h2, h3, h4, h5, h6 {
            color: #333;
        }
        blockquote {
            border-left: 4px solid #ddd;
            padding-left: 10px;
            margin-left: 0;
            color: #666;
        }"""

_PAGE_HEAD = """\
<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{title}</title>
    <style>
{stylesheet}
    </style>
</head>
<body>
"""

_PAGE_TAIL = """\
</body>
</html>
"""


def assemble(html_fragment: str, *, title: str = DEFAULT_TITLE) -> str:
    """Return a complete HTML document with ``html_fragment`` as its body.

    The fragment is inserted verbatim; it is assumed to be well-formed HTML
    already.  Only ``title`` is escaped.  For a fixed title the shell is
    constant, so distinct fragments always yield distinct documents.
    """
    head = _PAGE_HEAD.format(title=html.escape(title), stylesheet=PAGE_STYLESHEET)
    return f"{head}{html_fragment}{_PAGE_TAIL}"
