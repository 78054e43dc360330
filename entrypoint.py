"""Backend entrypoint. Starts uvicorn with the port from env."""
import os
import uvicorn

from staff_admin.main import app


def main() -> None:
    host = os.environ.get("BACKEND_HOST", "127.0.0.1")
    port = int(os.environ.get("BACKEND_PORT", "8080"))
    uvicorn.run(app, host=host, port=port)


if __name__ == "__main__":
    main()
