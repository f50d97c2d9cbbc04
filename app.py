"""Entry point for the Todo List API."""

import sys
from pathlib import Path

# Add src directory to Python path
src_path = Path(__file__).parent / "src"
sys.path.insert(0, str(src_path))

# Import and expose the FastAPI app
from todolist.api.main import app  # noqa: E402

if __name__ == "__main__":
    import uvicorn

    from todolist.config import get_settings

    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)
