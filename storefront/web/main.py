from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from storefront.catalog.repository import CatalogRepository
from storefront.catalog.seed import HERO_SLIDES, seed_catalog
from storefront.config import settings
from storefront.errors import AlreadySubscribed, ValidationError
from storefront.services.newsletter import subscribe as subscribe_email

log = logging.getLogger(__name__)


class SubscribeIn(BaseModel):
    email: str


def create_app(repo: Optional[CatalogRepository] = None, seed: Optional[bool] = None) -> FastAPI:
    if repo is None:
        repo = CatalogRepository()
        if settings.seed_catalog if seed is None else seed:
            seed_catalog(repo)

    app = FastAPI(title="Storefront API")
    app.state.repo = repo

    @app.exception_handler(RequestValidationError)
    async def _invalid_request(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=400,
            content={"message": "Invalid data", "errors": jsonable_encoder(exc.errors())},
        )

    @app.exception_handler(ValidationError)
    async def _invalid_data(request: Request, exc: ValidationError):
        return JSONResponse(status_code=400, content={"message": "Invalid data", "errors": exc.errors})

    @app.exception_handler(Exception)
    async def _unexpected(request: Request, exc: Exception):
        log.exception("unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(status_code=500, content={"message": "Internal server error"})

    # ---------------- catalog ----------------

    @app.get("/api/products")
    def list_products(category: Optional[str] = None):
        if category:
            rows = repo.list_products_by_category(category)
        else:
            rows = repo.list_products()
        return [p.to_dict() for p in rows]

    @app.get("/api/products/{product_id}")
    def get_product(product_id: str):
        product = repo.get_product(int(product_id)) if product_id.isdecimal() else None
        if product is None:
            return JSONResponse(status_code=404, content={"message": "Product not found"})
        return product.to_dict()

    @app.get("/api/special-offers")
    def list_special_offers():
        return [o.to_dict() for o in repo.list_special_offers()]

    @app.get("/api/hero-slides")
    def hero_slides():
        return HERO_SLIDES

    # ---------------- newsletter ----------------

    @app.post("/api/subscribe", status_code=201)
    def subscribe(payload: SubscribeIn):
        try:
            sub = subscribe_email(repo, payload.email)
        except AlreadySubscribed:
            return JSONResponse(status_code=409, content={"message": "Email already subscribed"})
        return sub.to_dict()

    return app


app = create_app()
