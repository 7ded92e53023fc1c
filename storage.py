import os, time, logging
from dataclasses import dataclass

from werkzeug.utils import secure_filename

from errors import PersistError

logger = logging.getLogger(__name__)

DOWNLOADED_SUFFIX = "-downloaded_video.mp4"


@dataclass(frozen=True)
class StoredVideo:
    filename: str
    path: str


@dataclass(frozen=True)
class UploadedFile:
    path: str
    original_name: str


def now_millis():
    return int(time.time() * 1000)


def save_video(data, upload_dir):
    # suffix is always .mp4, whatever the upstream actually returned
    filename = f"{now_millis()}{DOWNLOADED_SUFFIX}"
    path = os.path.join(upload_dir, filename)
    try:
        with open(path, "wb") as f:
            f.write(data)
    except OSError as e:
        logger.error("Error saving video locally: %s", e)
        raise PersistError() from e
    logger.info("Video saved locally: %s", filename)
    return StoredVideo(filename=filename, path=path)


def save_upload(file_storage, upload_dir):
    """Store a multipart upload as ``{millis}-{original name}`` and describe it."""
    original = file_storage.filename or ""
    filename = f"{now_millis()}-{secure_filename(original) or 'upload'}"
    path = os.path.join(upload_dir, filename)
    try:
        file_storage.save(path)
    except OSError as e:
        logger.error("Error storing upload %r: %s", original, e)
        raise PersistError() from e
    logger.info("Upload stored: %s", filename)
    return UploadedFile(path=path, original_name=original)
