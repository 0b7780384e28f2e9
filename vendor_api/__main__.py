"""``python -m vendor_api`` — serve the app with uvicorn."""

import uvicorn

from vendor_api.core.config import settings

if __name__ == "__main__":
    uvicorn.run("vendor_api.main:app", host="0.0.0.0", port=settings.app_port)
