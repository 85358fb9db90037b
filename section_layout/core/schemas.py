"""
Schémas Pydantic du moteur de layout.
Entrées  : ContentBlock (bloc auteur) + LayoutConfig (layout de la section)
Sorties  : RenderPlan → RenderPlanEntry (placement + visibilité + fond + cadre)

Le JSON auteur est en camelCase (gridSpan, floatDirection…) ; les attributs
Python sont en snake_case. Les deux graphies sont acceptées.
Aucune valeur d'enum inconnue ne lève : elle retombe sur la valeur par défaut.
"""
import logging
from typing import Any, Dict, List, Literal, Optional, Union
from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic.alias_generators import to_camel

from .breakpoints import BreakpointSetting, ResponsiveRule, BREAKPOINT_SETTINGS, DEFAULT_BREAKPOINT

log = logging.getLogger(__name__)

DisplayMode = Literal["always", "above-breakpoint", "below-breakpoint"]
GridSpan = Literal["1", "2", "3", "full"]
GridRowSpan = Literal["1", "2", "3", "auto"]
ColumnNumber = Literal["1", "2", "3"]
FloatDirection = Literal["none", "left", "right"]
BackgroundWidth = Literal["content", "full"]
BackgroundKind = Literal["hex", "gradient", "class", "none"]

LAYOUTS = ("single-column", "two-column", "grid", "masonry", "flex-columns", "float-columns")


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _as_choice(value: Any) -> Any:
    """1 → "1" ; les réglages numériques sont stockés en chaînes."""
    if isinstance(value, int) and not isinstance(value, bool):
        return str(value)
    return value


def _as_number(value: Any) -> float:
    """Valeur px numérique, 0 si absente ou invalide."""
    if isinstance(value, bool) or value is None:
        return 0
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0


# ── Fond ─────────────────────────────────────────────────────────────────────

class BackgroundSpec(_CamelModel):
    """Valeur de fond taguée — ce que l'auteur aurait dû saisir."""
    kind: BackgroundKind = "none"
    value: str = ""


# ── ContentBlock ─────────────────────────────────────────────────────────────

_BLOCK_CHOICES: Dict[str, tuple] = {
    "display_mode":      (("always", "above-breakpoint", "below-breakpoint"), "always"),
    "grid_span":         (("1", "2", "3", "full"), "1"),
    "grid_row_span":     (("1", "2", "3", "auto"), "1"),
    "grid_column":       (("1", "2", "3"), None),
    "float_direction":   (("none", "left", "right"), "none"),
    "column_assignment": (("1", "2", "3"), "1"),
    "background_width":  (("content", "full"), "content"),
}


class ContentBlock(_CamelModel):
    """Bloc de contenu configuré par l'auteur. `props` est opaque pour le moteur."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    id: str = ""
    category: str = ""
    type: str = ""
    order: int = 0
    enabled: bool = True
    props: Dict[str, Any] = Field(default_factory=dict)

    # Visibilité
    display_mode: DisplayMode = "always"

    # two-column / grid
    grid_span: GridSpan = "1"
    grid_row_span: GridRowSpan = "1"
    grid_column: Optional[ColumnNumber] = None
    force_new_row: bool = False
    align_self: Optional[str] = None

    # float-columns
    float_direction: FloatDirection = "none"
    float_width: Optional[str] = None
    clear_float: bool = False

    # flex-columns
    column_assignment: ColumnNumber = "1"

    # Cadre & fond
    background_color: Union[BackgroundSpec, str, None] = None
    border_width: float = 0
    border_color: Optional[str] = None
    border_radius: float = 0
    padding: float = 0
    background_width: BackgroundWidth = "content"

    @field_validator(*_BLOCK_CHOICES, mode="before")
    @classmethod
    def _degrade_choice(cls, value, info):
        choices, default = _BLOCK_CHOICES[info.field_name]
        value = _as_choice(value)
        return value if value in choices else default

    @field_validator("id", "category", "type", mode="before")
    @classmethod
    def _as_text(cls, value):
        # id numérique (5) → "5"
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value if isinstance(value, str) else ""

    @field_validator("border_color", "align_self", mode="before")
    @classmethod
    def _optional_text(cls, value):
        return value if isinstance(value, str) and value else None

    @field_validator("props", mode="before")
    @classmethod
    def _degrade_props(cls, value):
        return value if isinstance(value, dict) else {}

    @field_validator("border_width", "border_radius", "padding", mode="before")
    @classmethod
    def _degrade_number(cls, value):
        return _as_number(value)

    @field_validator("order", mode="before")
    @classmethod
    def _degrade_order(cls, value):
        try:
            return int(value)
        except (TypeError, ValueError):
            return 0

    @field_validator("enabled", "force_new_row", "clear_float", mode="before")
    @classmethod
    def _degrade_flag(cls, value, info):
        if value is None:
            return info.field_name == "enabled"
        return value

    @field_validator("background_color", mode="before")
    @classmethod
    def _degrade_background(cls, value):
        if value is None or isinstance(value, (str, dict, BackgroundSpec)):
            return value
        return None

    @field_validator("float_width", mode="before")
    @classmethod
    def _float_width_px(cls, value):
        # 300 → "300px" ; "40%" conservé tel quel
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return f"{value:g}px" if value else None
        return value or None


def load_block(raw: Any, index: int = 0) -> Optional[ContentBlock]:
    """
    ContentBlock depuis un dict auteur, sans jamais lever.

    Un champ encore rejeté après dégradation est retiré puis on retente ;
    un bloc qui n'est pas un objet est ignoré (None).
    """
    if isinstance(raw, ContentBlock):
        return raw
    if not isinstance(raw, dict):
        log.warning("Bloc #%d ignoré : objet attendu, reçu %s", index, type(raw).__name__)
        return None
    try:
        return ContentBlock.model_validate(raw)
    except ValidationError as e:
        bad = {str(err["loc"][0]) for err in e.errors() if err["loc"]}
        bad |= {to_camel(name) for name in bad}
        log.warning("Bloc %s : champ(s) invalide(s) %s, valeurs par défaut", raw.get("id", f"#{index}"), sorted(bad))
        cleaned = {k: v for k, v in raw.items() if k not in bad and to_camel(str(k)) not in bad}
        try:
            return ContentBlock.model_validate(cleaned)
        except ValidationError:
            log.warning("Bloc %s ignoré : irrécupérable", raw.get("id", f"#{index}"))
            return None


# ── LayoutConfig ─────────────────────────────────────────────────────────────

class LayoutConfig(_CamelModel):
    """Configuration du layout d'une section de blocs."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")

    layout: str = "single-column"
    grid_flow: Literal["row", "dense"] = "row"
    masonry_columns: Literal["2", "3"] = "2"
    float_breakpoint: BreakpointSetting = DEFAULT_BREAKPOINT
    column1_width: float = 0
    column2_width: float = 0
    column3_width: float = 0

    @field_validator("layout", mode="before")
    @classmethod
    def _layout_str(cls, value):
        return value if isinstance(value, str) and value else "single-column"

    @field_validator("grid_flow", mode="before")
    @classmethod
    def _degrade_flow(cls, value):
        return "dense" if value == "dense" else "row"

    @field_validator("masonry_columns", mode="before")
    @classmethod
    def _degrade_masonry(cls, value):
        return "3" if _as_choice(value) == "3" else "2"

    @field_validator("float_breakpoint", mode="before")
    @classmethod
    def _degrade_breakpoint(cls, value):
        return value if value in BREAKPOINT_SETTINGS else DEFAULT_BREAKPOINT

    @field_validator("column1_width", "column2_width", "column3_width", mode="before")
    @classmethod
    def _degrade_width(cls, value):
        return _as_number(value)

    def column_width(self, number: int) -> float:
        return {1: self.column1_width, 2: self.column2_width, 3: self.column3_width}.get(number, 0)

    @property
    def has_column_widths(self) -> bool:
        return bool(self.column1_width or self.column2_width or self.column3_width)


# ── Plan de rendu ────────────────────────────────────────────────────────────

class Placement(_CamelModel):
    """Placement structurel d'un bloc : classes + style inline + champs typés."""
    classes: List[str] = Field(default_factory=list)
    style: Dict[str, str] = Field(default_factory=dict)
    span: Optional[Union[int, Literal["full"]]] = None
    span_breakpoint: Optional[str] = None
    row_span: Optional[int] = None
    column_start: Optional[int] = None
    column: Optional[int] = None
    floating: bool = False
    float_direction: Optional[Literal["left", "right"]] = None
    float_rule: Optional[ResponsiveRule] = None
    keep_intact: bool = False


class Visibility(_CamelModel):
    rule: ResponsiveRule = Field(default_factory=ResponsiveRule)
    class_name: str = ""


class BackgroundDirective(_CamelModel):
    """Directive de rendu du fond : soit une classe, soit un style inline."""
    kind: BackgroundKind = "none"
    class_name: str = ""
    style: Dict[str, str] = Field(default_factory=dict)


class RenderPlanEntry(_CamelModel):
    block_id: str
    block: ContentBlock
    status: Literal["ok", "unsupported"] = "ok"
    diagnostic: Optional[str] = None
    placement: Placement = Field(default_factory=Placement)
    visibility: Visibility = Field(default_factory=Visibility)
    background: BackgroundDirective = Field(default_factory=BackgroundDirective)
    frame_style: Dict[str, str] = Field(default_factory=dict)
    inner_style: Dict[str, str] = Field(default_factory=dict)
    full_bleed: bool = False


class ContainerSpec(_CamelModel):
    classes: List[str] = Field(default_factory=list)
    style: Dict[str, str] = Field(default_factory=dict)


class FlexColumn(_CamelModel):
    """Colonne desktop du layout flex-columns."""
    number: int
    style: Dict[str, str] = Field(default_factory=dict)
    block_ids: List[str] = Field(default_factory=list)


class RenderPlan(_CamelModel):
    layout: str
    strategy: str
    container: ContainerSpec = Field(default_factory=ContainerSpec)
    entries: List[RenderPlanEntry] = Field(default_factory=list)
    # two-column / grid : regroupement en lignes (desktop)
    rows: List[List[str]] = Field(default_factory=list)
    # flex-columns : colonnes desktop + pile mobile
    columns: List[FlexColumn] = Field(default_factory=list)
    mobile_stack: List[str] = Field(default_factory=list)

    def entry(self, block_id: str) -> Optional[RenderPlanEntry]:
        return next((e for e in self.entries if e.block_id == block_id), None)
