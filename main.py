from dotenv import load_dotenv
load_dotenv()  # Load .env file before anything else

import os

from php_blueprint.core.logger import setup_logging
from php_blueprint.api.app import create_app

setup_logging()

app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "main:app",
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8000")),
        reload=False,
    )
