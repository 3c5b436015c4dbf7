"""Keyword classification of note titles into index categories.

Rules are evaluated in order and the first rule with a matching keyword wins,
so a title mentioning both "hook" and "type" lands in React. Titles that match
no rule go to the catch-all category.
"""

import json
from pathlib import Path
from typing import Optional, Sequence

from .exceptions import ConfigError
from .models import Category, CategoryRule

CATCH_ALL = Category.CROSS_DOMAIN

DEFAULT_RULES: tuple[CategoryRule, ...] = (
    CategoryRule(
        Category.REACT,
        "React",
        (
            "react", "hook", "next.js", "usestate", "useeffect",
            "usetransition", "usememo", "usecallback", "suspense", "concurrent",
        ),
    ),
    CategoryRule(
        Category.TYPESCRIPT,
        "TypeScript",
        ("typescript", "型別", "泛型", "type", "interface"),
    ),
    CategoryRule(
        Category.FRONTEND_ARCHITECTURE,
        "前端架構",
        ("設計模式", "效能", "測試", "架構", "pattern", "performance", "testing"),
    ),
    CategoryRule(Category.CROSS_DOMAIN, "跨領域"),
)


def classify(title: str, rules: Sequence[CategoryRule] = DEFAULT_RULES) -> Category:
    """Map a display title to exactly one category."""
    folded = title.casefold()
    for rule in rules:
        if any(keyword.casefold() in folded for keyword in rule.keywords):
            return rule.category
    return CATCH_ALL


def heading_for(category: Category, rules: Sequence[CategoryRule] = DEFAULT_RULES) -> str:
    """Index section heading text configured for a category."""
    for rule in rules:
        if rule.category is category:
            return rule.heading
    raise KeyError(f"No rule configured for category {category.value}")


def load_rules(path: Optional[Path]) -> tuple[CategoryRule, ...]:
    """Load category rules from a JSON file, or return the defaults.

    The file holds an ordered list of objects with ``category`` (one of the
    Category values), ``heading`` and ``keywords``. Every category must be
    present exactly once.
    """
    if path is None:
        return DEFAULT_RULES

    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        raise ConfigError(f"Cannot read category rules from {path}: {e}") from e

    if not isinstance(data, list):
        raise ConfigError(f"Category rules in {path} must be a JSON list")

    rules = []
    for item in data:
        try:
            rule = CategoryRule(
                category=Category(item["category"]),
                heading=str(item["heading"]),
                keywords=tuple(str(k) for k in item.get("keywords", [])),
            )
        except (KeyError, TypeError, ValueError, AttributeError) as e:
            raise ConfigError(f"Invalid category rule {item!r}: {e}") from e
        rules.append(rule)

    seen = [rule.category for rule in rules]
    missing = [c.value for c in Category if c not in seen]
    if missing:
        raise ConfigError(f"Category rules missing: {', '.join(missing)}")
    if len(seen) != len(set(seen)):
        raise ConfigError("Each category may only have one rule")
    return tuple(rules)
