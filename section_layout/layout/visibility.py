"""
Visibility Resolver — (displayMode, breakpoint) → ResponsiveRule de visibilité.

La règle décrit OÙ le bloc est visible :

  always                      → toujours visible
  above + always  / below + never  → toujours visible
  below + always  / above + never  → toujours caché
  above + token               → from(token)  : caché strictement sous token
  below + token               → below(token) : caché à partir de token
"""
from typing import Optional

from ..core.breakpoints import ResponsiveRule, invert, normalize_setting, rule_class, rule_from_setting
from ..core.schemas import Visibility


def visibility_for(display_mode: Optional[str], breakpoint: Optional[str]) -> ResponsiveRule:
    """
    Exactement une règle par couple valide ; entrées inconnues → always / md.

    above-breakpoint = règle « à partir du réglage » ; below-breakpoint = son complément.
    """
    if display_mode not in ("above-breakpoint", "below-breakpoint"):
        return ResponsiveRule.always()

    rule = rule_from_setting(normalize_setting(breakpoint))
    return rule if display_mode == "above-breakpoint" else invert(rule)


def visibility_class(rule: ResponsiveRule) -> str:
    """Classe utilitaire correspondant à une règle de visibilité."""
    return rule_class(rule, "hide", never="hidden")


def resolve_visibility(display_mode: Optional[str], breakpoint: Optional[str]) -> Visibility:
    rule = visibility_for(display_mode, breakpoint)
    return Visibility(rule=rule, class_name=visibility_class(rule))
