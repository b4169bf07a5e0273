# =============================================================================
# app/ - FastAPI Application Package
# =============================================================================
# This package contains the FastAPI web application:
# - main.py: App entry point, middleware setup, error handlers
# - config.py: Environment variable loading and settings
# - dependencies.py: Injectable delegates (assistant, OKX-backed services)
# - routers/: API endpoint definitions organized by feature
#
# The app layer is thin - it validates input, makes one delegated call and
# shapes the JSON reply. Business logic lives in core/, agents/ and lib/.
# =============================================================================
