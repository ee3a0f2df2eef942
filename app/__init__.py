# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the web layer:
# - main.py: app factory, exception handlers, static files
# - server.py: process entry point with fail-fast config validation
# - config.py: environment variable loading and settings
# - routers/: route definitions
#
# The app layer is thin - it handles HTTP concerns and delegates
# data access to the core/ package.
# =============================================================================
