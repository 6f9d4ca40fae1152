from fastapi import FastAPI

# To run this with uvicorn:
# uvicorn migaddr.main:app --reload
# or use the CLI: migaddr serve
from migaddr.routers import convert as convert_router


def create_app() -> FastAPI:
    app = FastAPI(
        title="Migration Address Converter",
        description="Converts Chrysalis Ed25519 addresses to and from legacy migration addresses",
        version="0.1.0",
    )

    app.include_router(convert_router.router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host="127.0.0.1", port=8000)
