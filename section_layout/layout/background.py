"""
Résolution du fond : classe une chaîne de fond libre.

  ""  / "transparent"                  → none
  "#…"                                 → hex       (style inline background-color)
  "linear-gradient…" / "radial-gradient…" → gradient (style inline background)
  tout le reste                        → class     (référence de classe utilitaire)

Les tests hex/gradient passent AVANT le fallback class : une couleur littérale
n'est jamais routée vers une classe. Un nom de couleur ("red") ou une référence
de token finit dans la branche class — limite connue de l'heuristique.
"""
from typing import Optional, Union

from ..core.schemas import BackgroundSpec, BackgroundDirective

_GRADIENT_PREFIXES = ("linear-gradient", "radial-gradient")


def classify(spec: Optional[str]) -> BackgroundSpec:
    """Fonction totale : toute chaîne → exactement un kind."""
    if not spec or spec == "transparent":
        return BackgroundSpec(kind="none", value="")
    if spec.startswith("#"):
        return BackgroundSpec(kind="hex", value=spec)
    if spec.startswith(_GRADIENT_PREFIXES):
        return BackgroundSpec(kind="gradient", value=spec)
    return BackgroundSpec(kind="class", value=spec)


def to_directive(spec: BackgroundSpec) -> BackgroundDirective:
    if spec.kind == "hex":
        return BackgroundDirective(kind="hex", style={"background-color": spec.value})
    if spec.kind == "gradient":
        return BackgroundDirective(kind="gradient", style={"background": spec.value})
    if spec.kind == "class" and spec.value:
        return BackgroundDirective(kind="class", class_name=spec.value)
    return BackgroundDirective()


def resolve_background(value: Union[BackgroundSpec, str, None]) -> BackgroundDirective:
    """Directive de rendu — accepte une chaîne libre ou une valeur déjà taguée."""
    spec = value if isinstance(value, BackgroundSpec) else classify(value)
    return to_directive(spec)
