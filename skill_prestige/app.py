import os
import threading
from pathlib import Path

from dotenv import load_dotenv
from fastapi import FastAPI

from skill_prestige.catalog import SkillCatalog, default_catalog
from skill_prestige.routes import router
from skill_prestige.storage import Storage

load_dotenv(Path(__file__).parent.parent / ".env")

DEFAULT_DATA_DIR = Path(__file__).parent.parent / "data"


def create_app(data_dir: Path | None = None, catalog: SkillCatalog | None = None) -> FastAPI:
    resolved = data_dir or Path(os.getenv("DATA_DIR", str(DEFAULT_DATA_DIR)))

    app = FastAPI(title="Skill Prestige")
    app.state.storage = Storage(resolved)
    app.state.catalog = catalog or default_catalog()
    app.state.lock = threading.Lock()
    app.include_router(router, prefix="/api")
    return app
