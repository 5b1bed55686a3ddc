# glozzio/main.py
import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from pymongo.errors import PyMongoError

from glozzio import config
from glozzio.errors import register_error_handlers, unhandled_error_handler
from glozzio.routers import auth, products, users
from glozzio.utils.database import Database

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("glozzio")


def create_app(database: Optional[Database] = None, token_secret: str = config.TOKEN_SECRET) -> FastAPI:
    """Build the API around one shared database handle, opened and closed by the lifespan."""
    database = database or Database(config.MONGO_URI, config.MONGO_DB_NAME)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Application Startup: connecting to MongoDB...")
        try:
            await database.connect()
        except PyMongoError as e:
            logger.error(f"Error connecting to MongoDB: {e}")
            raise
        yield
        await database.close()
        logger.info("Application Shutdown: Goodbye!")

    app = FastAPI(title="Glozzio API", lifespan=lifespan)
    app.state.database = database
    app.state.token_secret = token_secret

    app.add_middleware(
        CORSMiddleware, allow_origins=config.CORS_ORIGINS, allow_credentials=True,
        allow_methods=["*"], allow_headers=["*"],
    )

    register_error_handlers(app)
    app.add_exception_handler(PyMongoError, unhandled_error_handler)

    app.include_router(auth.router)      # /login, /profile
    app.include_router(users.router)     # /users
    app.include_router(products.router)  # /products, /products/{id}/reviews

    @app.get("/")
    def read_root():
        logger.info("Root route accessed")
        return {"message": "Welcome to Glozzio API"}

    return app


app = create_app()


def run():
    logger.info(f"Glozzio server starting on {config.HOST}:{config.PORT}")
    uvicorn.run("glozzio.main:app", host=config.HOST, port=config.PORT)


if __name__ == "__main__":
    run()
