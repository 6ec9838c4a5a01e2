"""Re-parse rendered markup and check its element structure."""

from __future__ import annotations

from typing import List, Optional, Sequence

from bs4 import BeautifulSoup


def parsed_tag_names(markup: str) -> List[str]:
    """Tag names of all elements in ``markup``, in document order."""

    soup = BeautifulSoup(markup, "html.parser")
    return [tag.name for tag in soup.find_all(True)]


def verify_markup(markup: str, expected: Optional[Sequence[str]] = None) -> List[str]:
    """Return a list of problems found in ``markup``; empty means it looks right.

    When ``expected`` tag names are given, the parsed element sequence must
    match them, ignoring case. Extra elements usually come from unescaped text.
    """

    errors: List[str] = []
    if not markup.strip():
        return ["Markup is empty"]

    names = parsed_tag_names(markup)
    if not names:
        errors.append("No elements found in markup")
        return errors

    if expected is None:
        return errors

    # html.parser lowercases tag names.
    wanted = [name.lower() for name in expected]
    if wanted != names:
        unexpected = [name for name in names if name not in wanted]
        errors.append(
            f"Element structure differs: expected {wanted}, parsed {names}"
        )
        if unexpected:
            errors.append(
                f"Unexpected elements {sorted(set(unexpected))}; check for unescaped text"
            )
    return errors


__all__ = ["parsed_tag_names", "verify_markup"]
