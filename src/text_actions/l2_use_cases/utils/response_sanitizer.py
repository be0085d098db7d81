"""Pure functions for cleaning raw model output."""

from __future__ import annotations

import re

# Non-greedy: each <think> pairs with the first </think> after it, so nested
# or unbalanced markup leaves a stray closing tag behind.
_REASONING_BLOCK_RE = re.compile(r'<think>.*?</think>', re.DOTALL)


def sanitize_reasoning_block(raw: str) -> str:
    """Remove every <think>...</think> span and trim the result."""
    if not raw or not raw.strip():
        return ''
    return _REASONING_BLOCK_RE.sub('', raw).strip()
