"""
Theme Resolver — résolution d'un Theme par nom (cache → override → registry).

Instance explicite (pas de singleton module) : chaque contexte de rendu ou
chaque test peut isoler son propre cache.

    >>> resolver = ThemeResolver()
    >>> resolver.resolve().name
    'Glamlink Standard'
    >>> resolver.resolve("promo", {"colors": {"primary": {"main": "#ff0000"}},
    ...                            "spacing": {}, "typography": {}}).colors.primary.main
    '#ff0000'

Le cache est un dict en lecture majoritaire : deux écritures concurrentes
sous le même nom produisent des arbres équivalents, aucun verrou n'est requis.
"""
import copy
import logging
from typing import Dict, List, Mapping, Optional, Union

from pydantic import ValidationError

from .merge import merge_tokens, normalize_keys
from .tokens import Theme, DEFAULT_THEME_TOKENS, THEME_PRESETS, REQUIRED_GROUPS

log = logging.getLogger(__name__)

_BUILTIN_NAMES = ("standard", "default")


class ThemeResolver:
    """Résout, fusionne et met en cache les thèmes."""

    def __init__(
        self,
        default_tokens: Optional[Mapping] = None,
        presets: Optional[Mapping[str, Mapping]] = None,
    ):
        """
        Args:
            default_tokens: arbre par défaut complet (DEFAULT_THEME_TOKENS si absent)
            presets:        overrides nommés (THEME_PRESETS si absent)
        """
        self._default = Theme.model_validate(default_tokens or DEFAULT_THEME_TOKENS)
        self._presets: Dict[str, Mapping] = dict(THEME_PRESETS if presets is None else presets)
        self._themes: Dict[str, Theme] = {}
        self._cache: Dict[str, Theme] = {}
        self._seed_cache()

    # ── API publique ─────────────────────────────────────────────────────────

    @property
    def default_theme(self) -> Theme:
        return self._default

    def resolve(self, name: Optional[str] = None, override: Optional[Mapping] = None) -> Theme:
        """
        Retourne le Theme complet pour `name`.

        Ordre : cache → override (validé, fusionné sur le défaut, mis en cache)
        → thème enregistré / preset → défaut. Ne lève jamais.
        """
        if not name:
            if override is not None:
                log.debug("Override sans nom ignoré — utiliser merge_theme()")
            return self._default

        cached = self._cache.get(name)
        if cached is not None:
            return cached

        if override is not None:
            if self.is_valid_override(override):
                theme = self._build(self._default, override, name)
                if theme is not None:
                    self._cache[name] = theme
                    return theme
            else:
                log.warning(
                    "Override invalide pour le thème %r (groupes requis : %s) — override ignoré",
                    name, ", ".join(REQUIRED_GROUPS),
                )

        known = self._lookup(name)
        if known is not None:
            self._cache[name] = known
            return known

        if override is None:
            log.warning("Thème %r introuvable — thème par défaut utilisé", name)
        return self._default

    def merge_theme(self, base: Theme, override: Optional[Mapping]) -> Theme:
        """Fusionne un override partiel sur un thème (nouveau Theme, base intacte)."""
        if not isinstance(override, Mapping):
            return base
        return self._build(base, override, None) or base

    def add_theme(self, name: str, theme: Union[Theme, Mapping]) -> bool:
        """Enregistre un thème complet sous `name`. False si l'arbre est incomplet."""
        if not isinstance(theme, Theme):
            if not isinstance(theme, Mapping):
                log.error("Structure de thème invalide pour %r", name)
                return False
            try:
                theme = Theme.model_validate(normalize_keys(theme))
            except ValidationError as e:
                log.error("Structure de thème invalide pour %r : %d erreur(s)", name, e.error_count())
                return False
        self._themes[name] = theme
        self._cache[name] = theme
        return True

    def list_themes(self) -> List[str]:
        names = list(_BUILTIN_NAMES)
        for name in list(self._presets) + list(self._themes):
            if name not in names:
                names.append(name)
        return names

    def clear_cache(self) -> None:
        """Vide le cache (les thèmes enregistrés restent résolvables)."""
        self._cache.clear()
        self._seed_cache()

    def cached_names(self) -> List[str]:
        return list(self._cache)

    @staticmethod
    def is_valid_override(override) -> bool:
        """Un override doit être un dict contenant chaque groupe requis (dict lui aussi)."""
        if not isinstance(override, Mapping):
            return False
        normalized = normalize_keys(override)
        return all(isinstance(normalized.get(group), Mapping) for group in REQUIRED_GROUPS)

    # ── Interne ──────────────────────────────────────────────────────────────

    def _seed_cache(self) -> None:
        for name in _BUILTIN_NAMES:
            self._cache[name] = self._default

    def _lookup(self, name: str) -> Optional[Theme]:
        if name in _BUILTIN_NAMES:
            return self._default
        if name in self._themes:
            return self._themes[name]
        if name in self._presets:
            return self._build(self._default, self._presets[name], name)
        return None

    def _build(self, base: Theme, override: Mapping, name: Optional[str]) -> Optional[Theme]:
        normalized = normalize_keys(override)
        merged = merge_tokens(base.tokens(), normalized)
        if name and "name" not in normalized:
            merged["name"] = name
        try:
            return Theme.model_validate(merged)
        except ValidationError as e:
            # seules les feuilles rejetées reprennent la valeur de base
            base_tokens = base.tokens()
            paths = [err["loc"] for err in e.errors() if err["loc"]]
            for loc in paths:
                _restore(merged, base_tokens, loc)
            log.warning(
                "Override %r : feuille(s) invalide(s) ignorée(s) %s",
                name, ", ".join(".".join(map(str, loc)) for loc in paths),
            )
        try:
            return Theme.model_validate(merged)
        except ValidationError as e:
            log.warning("Override rejeté (%d erreur(s)), thème de base conservé", e.error_count())
            return None


def _restore(target: dict, source: Mapping, loc: tuple) -> None:
    """Remet target[loc] à source[loc] (chemin de clés camelCase)."""
    *parents, leaf = loc
    for key in parents:
        if not isinstance(target.get(key), dict) or not isinstance(source.get(key), Mapping):
            return
        target, source = target[key], source[key]
    if leaf in source:
        target[leaf] = copy.deepcopy(source[leaf])
