"""
Run the API with uvicorn: ``python -m store_api``.

HOST and PORT environment variables override the bind address.
"""

import os

import uvicorn


def main() -> None:
    uvicorn.run(
        "store_api.main:app",
        host=os.environ.get("HOST", "0.0.0.0"),
        port=int(os.environ.get("PORT", "8000")),
    )


if __name__ == "__main__":
    main()
