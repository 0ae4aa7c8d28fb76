import os
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI

from backend.routes import router
from volunteer_log import EntryStore

load_dotenv(Path(__file__).parent.parent / ".env")

DEFAULT_DATA_DIR = Path(__file__).parent.parent / "data"


def resolve_data_dir(data_dir: Path | None = None) -> Path:
    """Explicit path wins, then DATA_DIR from the environment, then ./data."""
    return data_dir or Path(os.getenv("DATA_DIR", str(DEFAULT_DATA_DIR)))


def create_app(data_dir: Path | None = None) -> FastAPI:
    app = FastAPI(title="Volunteer Log")
    app.state.store = EntryStore(resolve_data_dir(data_dir))
    app.include_router(router, prefix="/api")
    return app
