from __future__ import annotations

import os

import uvicorn


def main() -> None:
    host = os.getenv("SCHOOL_SERVICE_HOST", "0.0.0.0")
    port = int(os.getenv("SCHOOL_SERVICE_PORT", "3001"))
    uvicorn.run("school_service.app:create_app", factory=True, host=host, port=port, reload=False)


if __name__ == "__main__":
    main()
