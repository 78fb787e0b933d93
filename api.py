"""HTTP entry point

    python api.py            # development server with reload
    uvicorn api:app          # production
"""

import asyncio

import uvicorn
from config import ApplicationConfig
from creative_boost.api.app import create_app
from creative_boost.depends import create_tables

app = create_app(ApplicationConfig)


def main():
    if ApplicationConfig.AUTO_CREATE_TABLES:
        asyncio.run(create_tables())

    uvicorn.run(
        "api:app",
        host=ApplicationConfig.API_HOST,
        port=ApplicationConfig.API_PORT,
        reload=True,
        log_level=ApplicationConfig.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
