"""
Router FastAPI — endpoints section_layout.

POST /section-layout/plan                  → SectionManifest → RenderPlan JSON
POST /section-layout/render                → SectionManifest → HTMLResponse
GET  /section-layout/themes                → noms de thèmes disponibles
POST /section-layout/themes/{name}/resolve → override optionnel → arbre de tokens
GET  /section-layout/catalog               → catégories / types du registry
"""
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body
from fastapi.responses import HTMLResponse, JSONResponse

from .builder import SectionBuilder
from .manifest.schema import SectionManifest

router = APIRouter(prefix="/section-layout", tags=["section_layout"])

# Instance par défaut ; une app hôte peut la remplacer via set_builder()
_builder = SectionBuilder()


def set_builder(builder: SectionBuilder) -> None:
    """Remplace le builder utilisé par le router (registry / resolver de l'app)."""
    global _builder
    _builder = builder


def get_builder() -> SectionBuilder:
    return _builder


@router.post("/plan", summary="Assemble le plan de rendu d'une section")
def plan(manifest: SectionManifest) -> JSONResponse:
    theme, render_plan = _builder.build(manifest)
    return JSONResponse({
        "theme": theme.name,
        "plan":  render_plan.model_dump(mode="json", by_alias=True),
    })


@router.post("/render", response_class=HTMLResponse, summary="Rend une section en HTML")
def render(manifest: SectionManifest) -> HTMLResponse:
    return HTMLResponse(content=_builder.render(manifest))


@router.get("/themes", summary="Liste les thèmes disponibles")
def themes() -> dict:
    return {"themes": _builder.resolver.list_themes()}


@router.post("/themes/{name}/resolve", summary="Résout un thème (override optionnel)")
def resolve_theme(name: str, override: Optional[Dict[str, Any]] = Body(default=None)) -> JSONResponse:
    """Thème complet ; un override invalide retombe sur le thème par défaut."""
    theme = _builder.resolver.resolve(name, override)
    return JSONResponse(theme.tokens())


@router.get("/catalog", summary="Liste les blocs rendus par le registry")
def catalog() -> dict:
    registry = _builder.registry
    return {"blocks": registry.catalog() if hasattr(registry, "catalog") else {}}
