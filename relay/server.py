from __future__ import annotations
import sys
from typing import Optional
import uvicorn
from dotenv import load_dotenv
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from .config import Config
from .errors import ConfigurationError
from .handler import handle_signup
from .logger import configure_logging, get_logger
from .shopify_client import ShopifyClient

log = get_logger()

def create_app(config: Config, client: Optional[ShopifyClient] = None) -> FastAPI:
    app = FastAPI(title="signup-relay")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    shopify = client or ShopifyClient(config)

    @app.post("/addToShopify")
    async def add_to_shopify(request: Request) -> JSONResponse:
        # an empty or non-JSON body is an empty record, so it fails on "email"
        data = await request.body()
        if not data.strip() or "json" not in request.headers.get("content-type", ""):
            raw = {}
        else:
            try:
                raw = await request.json()
            except ValueError:
                return JSONResponse(status_code=400, content={"error": "Invalid JSON body"})
        status_code, body = await handle_signup(raw, shopify)
        return JSONResponse(status_code=status_code, content=body)

    return app

def main() -> None:
    load_dotenv()
    try:
        config = Config.from_env()
    except ConfigurationError as e:
        configure_logging()
        log.error("config_error", reason=str(e), missing=e.missing)
        sys.exit(1)

    configure_logging(config.LOG_LEVEL)
    log.info("server_start", host=config.HOST, port=config.PORT, store=config.SHOPIFY_STORE_URL)
    uvicorn.run(create_app(config), host=config.HOST, port=config.PORT)

if __name__ == "__main__":
    main()
