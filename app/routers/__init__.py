# =============================================================================
# app/routers/ - Route Definitions
# =============================================================================
# - home.py: GET / product page
#
# Static files under /static are mounted directly in main.py.
# =============================================================================

from . import home

__all__ = [
    "home",
]
