"""Message template substitution.

Templates use ``#{name}`` placeholders. A template may also carry one
optional block in square brackets, kept only when its placeholder has a
value: ``'Field should be a confirmation[ of "#{label}"]'``.

Python 3.13+. Zero external dependencies.
"""

import re

__all__ = ["render_optional", "substitute"]

_PLACEHOLDER = re.compile(r"#\{(\w+)\}")
_OPTIONAL_BLOCK = re.compile(r"\[([^\[\]]*)\]")


def substitute(template: str, **values: object) -> str:
    """Replace ``#{name}`` placeholders with the given values.

    Placeholders without a value are left in place.

    Example:
        >>> substitute("length is #{length} of #{maxLength}", length=5, maxLength=3)
        'length is 5 of 3'
    """

    def replace(match: re.Match[str]) -> str:
        name = match.group(1)
        return str(values[name]) if name in values else match.group(0)

    return _PLACEHOLDER.sub(replace, template)


def render_optional(template: str, label: str | None) -> str:
    """Keep or drop the first ``[...]`` block of a template.

    With a label the brackets are removed and ``#{label}`` inside the block
    is replaced; without one the whole block is dropped.

    Examples:
        >>> template = 'Field should be a confirmation[ of "#{label}"]'
        >>> render_optional(template, "Password")
        'Field should be a confirmation of "Password"'
        >>> render_optional(template, None)
        'Field should be a confirmation'
    """
    match = _OPTIONAL_BLOCK.search(template)
    if match is None:
        return template
    block = substitute(match.group(1), label=label) if label else ""
    return template[: match.start()] + block + template[match.end() :]
