"""
Breakpoints & règles responsives.

Une seule abstraction (ResponsiveRule) partagée par la visibilité des blocs
et par le dé-flottement du layout float-columns :

  always        → actif à toutes les tailles d'écran
  never         → jamais actif
  from(token)   → actif à partir de token (inclus), inactif en dessous
  below(token)  → actif strictement sous token, inactif à partir de token
"""
from typing import Literal, Optional
from pydantic import BaseModel, ConfigDict

BreakpointToken = Literal["xs", "sm", "md", "lg", "xl"]
BreakpointSetting = Literal["always", "xs", "sm", "md", "lg", "xl", "never"]
RuleKind = Literal["always", "never", "from", "below"]

# Largeurs min (px), alignées sur les media queries de scss/_breakpoints.scss
BREAKPOINTS: dict[str, int] = {
    "xs": 480,
    "sm": 640,
    "md": 768,
    "lg": 1024,
    "xl": 1280,
}

BREAKPOINT_SETTINGS = ("always", "xs", "sm", "md", "lg", "xl", "never")
DEFAULT_BREAKPOINT = "md"


class ResponsiveRule(BaseModel):
    """Règle responsive taguée (kind + breakpoint éventuel)."""
    model_config = ConfigDict(frozen=True)

    kind: RuleKind = "always"
    breakpoint: Optional[BreakpointToken] = None

    @classmethod
    def always(cls) -> "ResponsiveRule":
        return cls(kind="always")

    @classmethod
    def never(cls) -> "ResponsiveRule":
        return cls(kind="never")

    @classmethod
    def from_breakpoint(cls, token: str) -> "ResponsiveRule":
        return cls(kind="from", breakpoint=normalize_token(token))

    @classmethod
    def below(cls, token: str) -> "ResponsiveRule":
        return cls(kind="below", breakpoint=normalize_token(token))

    def applies(self, width: int) -> bool:
        """True si la règle est active pour une largeur de viewport (px)."""
        if self.kind == "always":
            return True
        if self.kind == "never":
            return False
        threshold = BREAKPOINTS[self.breakpoint]
        if self.kind == "from":
            return width >= threshold
        return width < threshold


def normalize_token(token: Optional[str]) -> str:
    """Token concret xs..xl, fallback sur md."""
    return token if token in BREAKPOINTS else DEFAULT_BREAKPOINT


def normalize_setting(setting: Optional[str]) -> str:
    """Réglage breakpoint (always | xs..xl | never), fallback sur md."""
    return setting if setting in BREAKPOINT_SETTINGS else DEFAULT_BREAKPOINT


def rule_from_setting(setting: Optional[str]) -> ResponsiveRule:
    """
    Règle « actif à partir du breakpoint » pour un réglage de layout.

    always → toujours actif, never → jamais, token → actif à partir du token.
    """
    setting = normalize_setting(setting)
    if setting == "always":
        return ResponsiveRule.always()
    if setting == "never":
        return ResponsiveRule.never()
    return ResponsiveRule.from_breakpoint(setting)


def invert(rule: ResponsiveRule) -> ResponsiveRule:
    """Complément d'une règle (actif ↔ inactif)."""
    if rule.kind == "always":
        return ResponsiveRule.never()
    if rule.kind == "never":
        return ResponsiveRule.always()
    if rule.kind == "from":
        return ResponsiveRule.below(rule.breakpoint)
    return ResponsiveRule.from_breakpoint(rule.breakpoint)


def rule_class(rule: ResponsiveRule, prefix: str, never: str) -> str:
    """
    Classe utilitaire qui neutralise un effet là où la règle est inactive.

    from(md)  → "<prefix>-below-md"   ;  below(md) → "<prefix>-above-md"
    always    → ""                     ;  never     → `never`
    """
    if rule.kind == "always":
        return ""
    if rule.kind == "never":
        return never
    if rule.kind == "from":
        return f"{prefix}-below-{rule.breakpoint}"
    return f"{prefix}-above-{rule.breakpoint}"
