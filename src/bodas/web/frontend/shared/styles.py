# bodas/web/frontend/shared/styles.py
"""
Constantes centralizadas para clases CSS reutilizables.

Uso:
    from bodas.web.frontend.shared.styles import BUTTON_PRIMARY

    html.button({"class_name": BUTTON_PRIMARY}, "Guardar")
"""

# ============================================================================
# BOTONES
# ============================================================================

BUTTON_PRIMARY = "btn btn-primary"
BUTTON_SECONDARY = "btn btn-secondary"
BUTTON_OUTLINE = "btn outline"
BUTTON_OUTLINE_DANGER = "btn outline danger"

# ============================================================================
# LAYOUT Y CONTENEDORES
# ============================================================================

CONTAINER = "container"
GRID = "grid"
CARDS_CONTAINER = "cards-container"
TABLE_CONTAINER = "table-container"

# ============================================================================
# COMPONENTES ESPECÍFICOS
# ============================================================================

GALLERY_GRID = "cards-container gallery-grid"
GALLERY_CARD = "gallery-card"
REVIEW_CARD = "review-card"
PROMOTION_CARD = "promotion-card"
HERO_SECTION = "hero-section"

# Controles de las páginas de administración
DASHBOARD_CONTROLS = "dashboard-controls"
SEARCH_INPUT = "search-input"

# ============================================================================
# UTILIDADES
# ============================================================================

TAG = "tag"
TAG_SECONDARY = "tag secondary"
SECONDARY = "secondary"
