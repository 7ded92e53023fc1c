import os, logging
from dataclasses import dataclass

from downloader import download_from_link
from errors import InputError
from storage import StoredVideo, UploadedFile, save_video

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RemoteLink:
    url: str


def select_source(uploaded=None, url=None):
    """Pick the upload when there is one, otherwise a non-blank link."""
    if uploaded is not None:
        return uploaded
    if isinstance(url, str) and url.strip():
        return RemoteLink(url.strip())
    raise InputError("No file or URL provided")


def ingest(ctx, source):
    if isinstance(source, UploadedFile):
        # already written by the upload storage
        return StoredVideo(filename=os.path.basename(source.path), path=source.path)
    if isinstance(source, RemoteLink):
        data = download_from_link(source.url, ctx.config)
        return save_video(data, ctx.upload_dir)
    raise InputError("No file or URL provided")
