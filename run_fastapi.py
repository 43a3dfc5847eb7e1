"""
Main entry point for the GrowthKit API.

Usage:
    python run_fastapi.py

Or with uvicorn directly:
    uvicorn growthkit.fastapi_app:app --host 0.0.0.0 --port 5001 --reload
"""

import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()

import uvicorn

if __name__ == "__main__":
    env = os.getenv("APP_ENV", "development")
    debug = env == "development"
    port = int(os.getenv("PORT", 5001))
    host = os.getenv("HOST", "0.0.0.0")

    print(f"Starting GrowthKit API in {env} mode...")
    print(f"Server running on http://{host}:{port}")
    print(f"API docs available at http://{host}:{port}/docs")

    uvicorn.run(
        "growthkit.fastapi_app:app",
        host=host,
        port=port,
        reload=debug,
        log_level="info" if debug else "warning",
    )
