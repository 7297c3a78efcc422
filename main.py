from __future__ import annotations
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

import os
import logging

from database import init_db_with_retry
# Importe aussi models : la table Tutorial est enregistrée avant create_all
from routes.tutorials import router as tutorials_router

# ----------------------------------------------------------------------
# LOGGING
# ----------------------------------------------------------------------
logger = logging.getLogger("uvicorn")
logger.setLevel(logging.INFO)

# ----------------------------------------------------------------------
# FASTAPI INITIALISATION
# ----------------------------------------------------------------------
app = FastAPI(
    title="DD Task API",
    docs_url="/docs",
    redoc_url="/redoc",
    openapi_url="/openapi.json",
)

# ----------------------------------------------------------------------
# CORS CONFIGURATION
# ----------------------------------------------------------------------
DEFAULT_ORIGINS = ["http://localhost:4200", "http://localhost:8081"]


def cors_origins() -> list:
    extra_origins = os.getenv("CORS_ORIGINS", "")
    extra = [o.strip() for o in extra_origins.split(",") if o.strip()]
    return [*DEFAULT_ORIGINS, *extra]


app.add_middleware(
    CORSMiddleware,
    allow_origins=cors_origins(),
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# ----------------------------------------------------------------------
# DATABASE STARTUP
# ----------------------------------------------------------------------
@app.on_event("startup")
def on_startup():
    init_db_with_retry(
        max_attempts=int(os.getenv("DB_INIT_ATTEMPTS", "12")),
        delay_sec=int(os.getenv("DB_INIT_DELAY", "5")),
    )

# ----------------------------------------------------------------------
# MAIN ROUTES
# ----------------------------------------------------------------------
@app.get("/")
def root():
    return {"message": "Welcome to DD Task application."}


@app.get("/health")
def health():
    return {"status": "ok"}


@app.get("/healthz")
def healthz():
    return {"status": "ok"}

# ----------------------------------------------------------------------
# TUTORIAL ROUTES
# ----------------------------------------------------------------------
app.include_router(tutorials_router)


if __name__ == "__main__":
    import uvicorn

    port = int(os.getenv("PORT", "8080"))
    logger.info(f"Server is running on port {port}.")
    uvicorn.run(app, host="0.0.0.0", port=port)
