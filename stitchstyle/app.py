import logging
import os

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from stitchstyle.infrastructure import configure_stylist_client
from stitchstyle.infrastructure.stylist_http import HTTPStylistClient
from stitchstyle.routes import customers, orders, recommendations, styles, tailors, workflow


def create_app() -> FastAPI:
    logging.basicConfig(
        level=os.getenv("LOG_LEVEL", "INFO").upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    app = FastAPI(title="StitchStyle Order API", version="0.1.0")

    api_url = os.getenv("STYLIST_API_URL")
    api_key = os.getenv("STYLIST_API_KEY")
    if api_url and api_key:
        model = os.getenv("STYLIST_MODEL") or "gpt-4o-mini"
        stylist = HTTPStylistClient(api_url, api_key, model=model)
        configure_stylist_client(stylist)
        app.add_event_handler("shutdown", stylist.close)

    origins_env = os.getenv("API_CORS_ORIGINS", "")
    origins = [origin.strip() for origin in origins_env.split(",") if origin.strip()]
    if not origins:
        origins = ["http://localhost:3000", "http://127.0.0.1:3000"]

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(workflow.router, prefix="/api")
    app.include_router(customers.router, prefix="/api")
    app.include_router(styles.router, prefix="/api")
    app.include_router(tailors.router, prefix="/api")
    app.include_router(orders.router, prefix="/api")
    app.include_router(recommendations.router, prefix="/api")

    @app.get("/", include_in_schema=False)
    async def root() -> JSONResponse:
        """Provide a lightweight landing page for container checks."""
        return JSONResponse(
            {
                "message": "StitchStyle Order API",
                "docs": "/docs",
                "health": "/api/styles",
            }
        )

    return app


app = create_app()
