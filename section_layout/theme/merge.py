"""
Merge générique d'arbres de tokens.

Le schéma est l'arbre de base lui-même : chaque groupe (dict) de la base est
parcouru récursivement, chaque feuille de l'override remplace la feuille de
base correspondante. Aucun groupe n'a besoin de code dédié.

  - feuille présente dans l'override  → remplace la base
  - feuille absente                   → valeur de base conservée
  - liste                             → remplacée en bloc, jamais concaténée
  - nombre sur une feuille texte      → converti ("800")
  - clé inconnue du schéma            → ignorée
  - scalaire à la place d'un groupe   → ignoré (groupe de base conservé)
  - groupe / liste / None sur une feuille → ignoré (feuille de base conservée)

Ne modifie jamais ses arguments (contrairement à un merge in-place).
"""
import logging
from typing import Any, Mapping

log = logging.getLogger(__name__)


def camelize(key: str) -> str:
    """alternate_section → alternateSection ; les clés camelCase passent telles quelles."""
    parts = [p for p in key.split("_") if p]
    if "_" not in key or not parts:
        return key
    head, *rest = parts
    return head + "".join(p[:1].upper() + p[1:] for p in rest)


def normalize_keys(tree: Any) -> Any:
    """Convertit récursivement les clés snake_case d'un override en camelCase."""
    if isinstance(tree, Mapping):
        return {camelize(str(k)): normalize_keys(v) for k, v in tree.items()}
    if isinstance(tree, list):
        return list(tree)
    return tree


def merge_tokens(base: Mapping, override: Mapping | None, _path: str = "") -> dict:
    """
    Retourne un nouvel arbre = base + override, au schéma de base.

    Args:
        base:     arbre complet (définit le schéma)
        override: arbre partiel (n'importe quel sous-ensemble de feuilles)
    """
    override = override or {}
    merged: dict = {}
    for key, base_value in base.items():
        path = f"{_path}.{key}" if _path else key
        if key not in override:
            merged[key] = _copy(base_value)
            continue

        value = override[key]
        if isinstance(base_value, Mapping):
            if isinstance(value, Mapping):
                merged[key] = merge_tokens(base_value, value, path)
            else:
                log.debug("Override ignoré pour le groupe %s (valeur non-dict)", path)
                merged[key] = _copy(base_value)
        elif isinstance(base_value, list):
            merged[key] = list(value) if isinstance(value, list) else _copy(base_value)
        elif isinstance(value, (Mapping, list)) or value is None:
            log.debug("Override ignoré pour la feuille %s (%s)", path, type(value).__name__)
            merged[key] = _copy(base_value)
        elif isinstance(base_value, str) and _is_number(value):
            # 800 → "800", 1.4 → "1.4"
            merged[key] = str(value)
        else:
            merged[key] = value

    unknown = set(override) - set(base)
    if unknown:
        log.debug("Clés inconnues ignorées sous %s : %s", _path or "<root>", sorted(map(str, unknown)))
    return merged


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _copy(value: Any) -> Any:
    if isinstance(value, Mapping):
        return {k: _copy(v) for k, v in value.items()}
    if isinstance(value, list):
        return list(value)
    return value


def leaf_paths(tree: Mapping, _prefix: str = ""):
    """Itère les couples (chemin pointé, feuille) d'un arbre."""
    for key, value in tree.items():
        path = f"{_prefix}.{key}" if _prefix else key
        if isinstance(value, Mapping):
            yield from leaf_paths(value, path)
        else:
            yield path, value
