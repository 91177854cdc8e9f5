# civracontext/core/render.py
"""Rendering of fetched file contents into a prompt-ready context block"""

from typing import Iterable, Mapping
import jinja2

CONTEXT_TEMPLATE = """## Current Project Context

The following files are currently in your context. DO NOT read these files again.

{% for path, content in files %}
### {{ path }}
```
{{ content }}
```

{% endfor %}
"""


def create_jinja_env() -> jinja2.Environment:
    return jinja2.Environment(
        loader=jinja2.DictLoader({"context.md.j2": CONTEXT_TEMPLATE}),
        autoescape=False,
        trim_blocks=True,
        lstrip_blocks=True,
    )


_env = create_jinja_env()


def build_file_context(files: Mapping[str, str]) -> str:
    """
    Render path -> content pairs as markdown sections, in the mapping's
    iteration order. No filtering happens here.
    """
    template = _env.get_template("context.md.j2")
    return template.render(files=list(files.items()))


def is_file_in_context(file_path: str, context_files: Iterable[str]) -> bool:
    """Exact, case-sensitive membership test."""
    return file_path in set(context_files)
