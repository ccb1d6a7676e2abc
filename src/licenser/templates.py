# Copyright (C) 2025 Francesca Falcone and Mattia Tagliente
# All Rights Reserved

# licenser/templates.py
"""
Fixed text templates and their pure render functions.

The rendered strings are the externally visible output of the tool and must
match byte for byte, including the "©" glyph. Values are substituted with
str.format, so braces inside a project name are copied through literally.
"""
from __future__ import annotations

from collections.abc import Iterable

from licenser.schema import CommentStyle, Copyright

LICENSE_TEMPLATE = """\
Copyright © {year} the {project_name} Authors

Permission is hereby granted, free of charge, to any person obtaining
a copy of this software and associated documentation files (the
"Software"), to deal in the Software without restriction, including
without limitation the rights to use, copy, modify, merge, publish,
distribute, sublicense, and/or sell copies of the Software, and to
permit persons to whom the Software is furnished to do so, subject to
the following conditions:

The above copyright notice and this permission notice shall be
included in all copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND,
EXPRESS OR IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF
MERCHANTABILITY, FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT.
IN NO EVENT SHALL THE AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY
CLAIM, DAMAGES OR OTHER LIABILITY, WHETHER IN AN ACTION OF CONTRACT,
TORT OR OTHERWISE, ARISING FROM, OUT OF OR IN CONNECTION WITH THE
SOFTWARE OR THE USE OR OTHER DEALINGS IN THE SOFTWARE.
"""

COPYRIGHT_COMMENT_TEMPLATE = (
    "{prefix}© {year} the {project_name} Authors under the MIT license. "
    "See AUTHORS for the list of authors.{suffix}\n"
)


def render_license(copyright: Copyright) -> str:
    return LICENSE_TEMPLATE.format(year=copyright.year, project_name=copyright.project_name)


def render_authors(authors: Iterable[str]) -> str:
    """One author per line, each newline-terminated. No authors -> empty string."""
    return "".join(f"{author}\n" for author in authors)


def render_copyright_comment(prefix: str, suffix: str, year: int, project_name: str) -> str:
    return COPYRIGHT_COMMENT_TEMPLATE.format(
        prefix=prefix, suffix=suffix, year=year, project_name=project_name
    )


def render_comment_for(style: CommentStyle, copyright: Copyright) -> str:
    return render_copyright_comment(
        style.prefix, style.suffix, copyright.year, copyright.project_name
    )
