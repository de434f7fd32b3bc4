"""Internationalization helpers.

Translation trees are loaded once per process from ``translations/<lang>.json``
and wrapped in an immutable :class:`Translations` value that every lookup goes
through. Keys are dotted paths into the nested tree (``"errors.notFound"``).
"""
from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Any, Callable, Dict, Iterable, List, Mapping, NamedTuple, Optional, Tuple, Union

from core.config import FALLBACK_LANGUAGE, SUPPORTED_LANGUAGES, config

logger = logging.getLogger(__name__)

Params = Mapping[str, Union[str, int, float]]

LANGUAGES: List[Dict[str, str]] = [
    {"code": "en", "name": "English", "native_name": "English"},
    {"code": "es", "name": "Spanish", "native_name": "Español"},
    {"code": "fr", "name": "French", "native_name": "Français"},
]


def is_valid_language(lang: Optional[str]) -> bool:
    return lang in SUPPORTED_LANGUAGES


def language_or_default(lang: Optional[str], default: str = FALLBACK_LANGUAGE) -> str:
    """Return ``lang`` when supported, otherwise ``default``."""
    return lang if is_valid_language(lang) else default


class Token(NamedTuple):
    placeholder: bool
    text: str


_NAME_RE = re.compile(r"[A-Za-z0-9_]+")


def _is_name(text: str) -> bool:
    return _NAME_RE.fullmatch(text) is not None


@lru_cache(maxsize=1024)
def tokenize(template: str) -> Tuple[Token, ...]:
    """Split ``template`` into literal and ``{{name}}`` placeholder tokens."""
    tokens: List[Token] = []
    literal = ""
    pos = 0
    while True:
        start = template.find("{{", pos)
        if start == -1:
            literal += template[pos:]
            break
        end = template.find("}}", start + 2)
        if end == -1:
            literal += template[pos:]
            break
        name = template[start + 2:end]
        if not _is_name(name):
            # ``{{ x}}`` or ``{{{x}}`` are plain text; resume one char later
            literal += template[pos:start + 1]
            pos = start + 1
            continue
        literal += template[pos:start]
        if literal:
            tokens.append(Token(False, literal))
            literal = ""
        tokens.append(Token(True, name))
        pos = end + 2
    if literal:
        tokens.append(Token(False, literal))
    return tuple(tokens)


def interpolate(template: str, params: Optional[Params] = None) -> str:
    """Substitute ``{{name}}`` placeholders; unknown names stay as-is."""
    if not params:
        return template
    parts = []
    for token in tokenize(template):
        if not token.placeholder:
            parts.append(token.text)
        elif token.text in params:
            parts.append(str(params[token.text]))
        else:
            parts.append("{{" + token.text + "}}")
    return "".join(parts)


def _freeze(tree: Mapping[str, Any]) -> Mapping[str, Any]:
    return MappingProxyType(
        {
            str(k): _freeze(v) if isinstance(v, Mapping) else v
            for k, v in tree.items()
        }
    )


def _lookup(tree: Mapping[str, Any], key: str) -> Optional[str]:
    node: Any = tree
    for part in key.split("."):
        if not isinstance(node, Mapping) or part not in node:
            return None
        node = node[part]
    if isinstance(node, str) and node:
        return node
    return None


@dataclass(frozen=True)
class Translations:
    """Read-only language -> translation tree mapping."""

    trees: Mapping[str, Mapping[str, Any]]
    default_language: str = FALLBACK_LANGUAGE
    fallback_language: str = FALLBACK_LANGUAGE

    def tree(self, lang: str) -> Mapping[str, Any]:
        return self.trees.get(lang, MappingProxyType({}))

    def resolve(
        self, key: str, language: Optional[str] = None, params: Optional[Params] = None
    ) -> str:
        """Translate ``key`` into ``language``.

        Unknown or missing languages use the default language. A key missing
        from the target tree is looked up in the fallback tree, and a key
        missing from both is returned unchanged.
        """
        lang = language_or_default(language, self.default_language)
        template = _lookup(self.tree(lang), key)
        if template is None and lang != self.fallback_language:
            template = _lookup(self.tree(self.fallback_language), key)
        if template is None:
            logger.debug("Translation not found: %s (%s)", key, lang)
            return key
        return interpolate(template, params)

    def for_language(self, language: Optional[str]) -> Callable[..., str]:
        """Return a ``t(key, **params)`` helper bound to ``language``."""

        def t(key: str, **params: Any) -> str:
            return self.resolve(key, language, params)

        return t


def _read_tree(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"expected a JSON object, got {type(data).__name__}")
    return data


def load_translations(
    directory: Optional[Path] = None,
    languages: Iterable[str] = SUPPORTED_LANGUAGES,
    default_language: Optional[str] = None,
) -> Translations:
    """Load every language file under ``directory``.

    A file that cannot be read or parsed leaves that language with an empty
    tree; the other languages are unaffected.
    """
    directory = Path(directory or config.translations_dir)
    trees: Dict[str, Mapping[str, Any]] = {}
    for lang in languages:
        path = directory / f"{lang}.json"
        try:
            trees[lang] = _freeze(_read_tree(path))
        except (OSError, ValueError) as exc:
            logger.warning("Failed to load translations for %s: %s", lang, exc)
            trees[lang] = MappingProxyType({})
    return Translations(
        trees=MappingProxyType(trees),
        default_language=language_or_default(default_language or config.default_language),
    )
