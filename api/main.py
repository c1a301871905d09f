"""
FastAPI backend for CSV Insight
Handles CSV uploads and serves statistics, distributions and correlation
"""

import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from api import config
from api.routers import analysis, correlation, distributions, statistics, table
from storage.tables import peek

logging.basicConfig(
    level=config.LOG_LEVEL,
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)

app = FastAPI(title="CSV Insight API", version="1.0.0")
app.include_router(table.router)
app.include_router(statistics.router)
app.include_router(distributions.router)
app.include_router(correlation.router)
app.include_router(analysis.router)

# CORS - let a browser front end call the API
app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# ────────────────────────────────────────────────────────────────────────────────
# Health Check
# ────────────────────────────────────────────────────────────────────────────────
@app.get("/")
def root():
    """Health check endpoint"""
    return {"status": "ok", "message": "CSV Insight API is running"}


@app.get("/health")
def health():
    """Detailed health check"""
    stored = peek()
    if stored is None:
        return {"status": "healthy", "table_loaded": False}
    return {
        "status": "healthy",
        "table_loaded": True,
        "filename": stored.filename,
        "n_rows": stored.table.n_rows,
        "n_cols": stored.table.n_cols,
    }


# ────────────────────────────────────────────────────────────────────────────────
# Run the server
# ────────────────────────────────────────────────────────────────────────────────

if __name__ == "__main__":
    import uvicorn

    uvicorn.run("api.main:app", host=config.HOST, port=config.PORT, reload=True)
