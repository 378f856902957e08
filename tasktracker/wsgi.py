from tasktracker.config import load_settings
from tasktracker.infra.logging import setup_logging
from tasktracker.web.app import create_app

settings = load_settings()
setup_logging(settings)
app = create_app(settings)
