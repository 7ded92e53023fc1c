import os, logging

from config import Config

logger = logging.getLogger(__name__)


class AppContext:
    """Shared state for one running relay: configuration plus the upload directory."""

    def __init__(self, config=None):
        self.config = config or Config()

    @property
    def upload_dir(self):
        return self.config.upload_dir

    def ensure_upload_dir(self):
        os.makedirs(self.upload_dir, exist_ok=True)
        logger.info("Upload directory ready: %s", self.upload_dir)

    def upload_path(self, filename):
        return os.path.join(self.upload_dir, filename)
