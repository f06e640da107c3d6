"""Turn physical table and column names into Go identifiers.

Pattern:
  - column name -> field name:  identifier_case(column)
  - table name  -> type name:   identifier_case(singularize(table))

Examples:
  created_at      -> CreatedAt
  user_id         -> UserId
  users           -> User
  categories      -> Category
  user_profiles   -> UserProfile
  people          -> Person

Singularization follows the usual English inflection rules (uncountables,
irregulars, then suffix rules). Rules are matched against the end of the
whole name, so only the last word of a snake_case name is singularized.
"""

from __future__ import annotations

import re

# Words with no distinct singular form
_UNCOUNTABLES: tuple[str, ...] = (
    "equipment",
    "information",
    "rice",
    "money",
    "species",
    "series",
    "fish",
    "sheep",
    "jeans",
    "police",
)

# singular -> plural
_IRREGULARS: dict[str, str] = {
    "person": "people",
    "man": "men",
    "child": "children",
    "sex": "sexes",
    "move": "moves",
    "zombie": "zombies",
}

# (pattern, replacement) in definition order; later rules take precedence.
_SINGULAR_RULES: list[tuple[str, str]] = [
    (r"s$", ""),
    (r"(ss)$", r"\1"),
    (r"(n)ews$", r"\1ews"),
    (r"([ti])a$", r"\1um"),
    (r"((a)naly|(b)a|(d)iagno|(p)arenthe|(p)rogno|(s)ynop|(t)he)(sis|ses)$", r"\1sis"),
    (r"(^analy)(sis|ses)$", r"\1sis"),
    (r"([^f])ves$", r"\1fe"),
    (r"(hive)s$", r"\1"),
    (r"(tive)s$", r"\1"),
    (r"([lr])ves$", r"\1f"),
    (r"([^aeiouy]|qu)ies$", r"\1y"),
    (r"(s)eries$", r"\1eries"),
    (r"(m)ovies$", r"\1ovie"),
    (r"(c)ookies$", r"\1ookie"),
    (r"(x|ch|ss|sh)es$", r"\1"),
    (r"^(m|l)ice$", r"\1ouse"),
    (r"(bus)(es)?$", r"\1"),
    (r"(o)es$", r"\1"),
    (r"(shoe)s$", r"\1"),
    (r"(cris|test)(is|es)$", r"\1is"),
    (r"^(a)x[ie]s$", r"\1xis"),
    (r"(octop|vir)(us|i)$", r"\1us"),
    (r"(alias|status)(es)?$", r"\1"),
    (r"^(ox)en", r"\1"),
    (r"(vert|ind)ices$", r"\1ex"),
    (r"(matr)ices$", r"\1ix"),
    (r"(quiz)zes$", r"\1"),
    (r"(database)s$", r"\1"),
]

_UNCOUNTABLE_RE = re.compile(
    r"^(?:" + "|".join(_UNCOUNTABLES) + r")$", re.IGNORECASE
)
_IRREGULAR_RES: list[tuple[re.Pattern[str], str]] = [
    (re.compile(plural + "$", re.IGNORECASE), singular)
    for singular, plural in reversed(list(_IRREGULARS.items()))
]
# Each rule is tried upper-case first so an UPPER suffix gets an UPPER replacement.
_SINGULAR_RES: list[tuple[re.Pattern[str], str]] = [
    variant
    for pattern, replacement in reversed(_SINGULAR_RULES)
    for variant in (
        (re.compile(pattern.upper()), replacement.upper()),
        (re.compile(pattern, re.IGNORECASE), replacement),
    )
]


def _match_case(template: str, word: str) -> str:
    """Return *word* cased like *template* (lower, Title or UPPER)."""
    if template.isupper():
        return word.upper()
    if template[:1].isupper():
        return word[:1].upper() + word[1:]
    return word


def singularize(word: str) -> str:
    """Return the singular form of an English plural noun.

    Words that are already singular, or have no singular, come back unchanged.
    """
    if not word or _UNCOUNTABLE_RE.match(word):
        return word

    for pattern, singular in _IRREGULAR_RES:
        match = pattern.search(word)
        if match:
            return word[: match.start()] + _match_case(match.group(0), singular)

    for pattern, replacement in _SINGULAR_RES:
        if pattern.search(word):
            return pattern.sub(replacement, word, count=1)

    return word


def identifier_case(name: str) -> str:
    """Convert snake_case to an exported Go identifier.

    Each underscore-delimited segment gets its first letter upper-cased; the
    rest of the segment is left alone. Empty segments are dropped.
    """
    return "".join(seg[:1].upper() + seg[1:] for seg in name.split("_") if seg)


def build_type_name(table_name: str) -> str:
    """Build the model type name for a physical table name.

    Returns a name like 'User' for 'users' or 'UserProfile' for 'user_profiles'.
    """
    return identifier_case(singularize(table_name))
