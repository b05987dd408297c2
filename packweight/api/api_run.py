from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

import logging

from packweight.logic.reporting.categories import UnresolvedCategoryError
from packweight.logic.weight.classifier import UnresolvedGearItemError
from packweight.utilities.config import DEBUG

# Routers
from packweight.api.routes import analytics, goals, pack_lists

# Logging
logger = logging.getLogger("packweight_app")

# Initialize FastAPI app
app = FastAPI(title="Pack Weight API", debug=DEBUG)

# Include routers
app.include_router(pack_lists.router)
app.include_router(analytics.router)
app.include_router(goals.router)


# -------------------- Error handling --------------------
@app.exception_handler(UnresolvedGearItemError)
@app.exception_handler(UnresolvedCategoryError)
async def _unresolved_reference_handler(request: Request, exc: LookupError):
    """Dangling references in stored data: a data-access bug, not a client error."""
    logger.error("Unresolved reference while computing %s: %s", request.url.path, exc)
    return JSONResponse(status_code=500, content={'detail': 'Pack data is inconsistent', 'error': str(exc)})


# -------------------- API: Health --------------------
@app.get('/api/health')
def health():
    return {'status': 'ok'}
