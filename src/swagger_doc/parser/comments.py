"""Comment block extraction and annotation tokenizing.

A documented source file looks like:

    /**
     * @Controller Pets Pet operations
     */

    /**
     * @Router GET /pets
     * @Summary List pets
     * @Response 200 string ok
     */
"""

import re

CONTROLLER = "Controller"
ROUTER = "Router"
SUMMARY = "Summary"
DESCRIPTION = "Description"
REQUEST = "Request"
RESPONSE = "Response"
DEPRECATED = "Deprecated"

BLOCK_RE = re.compile(r"/\*\*.*?\*/", re.DOTALL)


def extract_blocks(text: str) -> list[str]:
    """Return every `/** ... */` block in the text, in file order."""
    return BLOCK_RE.findall(text)


def has_tag(block: str, tag: str) -> bool:
    """True if `@<tag>` appears anywhere in the raw block text."""
    return f"@{tag}" in block


def get_annotations(block: str, tag: str) -> list[list[str]]:
    """Tokenize every `@<tag>` line in a block.

    Returns one token list per matching line (tag itself removed),
    in block order. Empty list if the tag does not occur.
    """
    marker = f"@{tag}"
    result = []
    for line in _body(block).splitlines():
        line = line.lstrip(" \t*")
        if not line.startswith(marker):
            continue
        rest = line[len(marker):]
        if rest and not rest[0].isspace():
            # a longer tag, e.g. @RequestBody
            continue
        result.append(rest.split())
    return result


def first_annotation(block: str, tag: str) -> list[str] | None:
    """Tokens of the first `@<tag>` line, or None. Later occurrences are ignored."""
    annotations = get_annotations(block, tag)
    return annotations[0] if annotations else None


def join_text(tokens: list[str]) -> str:
    """Rebuild free text from tokens, each followed by a single space."""
    return "".join(f"{token} " for token in tokens)


def _body(block: str) -> str:
    if block.startswith("/**"):
        block = block[3:]
    if block.endswith("*/"):
        block = block[:-2]
    return block
