import os

import uvicorn

from neutral.logger import build_log_config


def main() -> None:
    """Run the lookup gateway with uvicorn."""
    uvicorn.run(
        "neutral.main:app",
        host=os.getenv("HOST", "127.0.0.1"),
        port=int(os.getenv("PORT", "8000")),
        log_config=build_log_config(),
        reload=True,
    )


if __name__ == "__main__":
    main()
