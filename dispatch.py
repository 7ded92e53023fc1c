import asyncio, logging
from enum import Enum

from config import DEFAULT_LINK_MARKERS
from pipeline import RemoteLink, ingest

logger = logging.getLogger(__name__)

WELCOME_TEXT = "Welcome! Send me a TeraBox video link to get the video."
INVALID_LINK_TEXT = "Please send a valid TeraBox video link."
FAILURE_TEXT = "Error fetching or sending the video. Please try again later."


class DispatchState(Enum):
    AWAITING_INPUT = "awaiting_input"
    DISPATCHED = "dispatched"


def is_valid_link(text, markers=DEFAULT_LINK_MARKERS):
    if not text:
        return False
    return any(marker in text for marker in markers)


class LinkDispatcher:
    """Turns a chat message carrying a hosted-video link into a video reply.

    ``chat`` arguments are transport adapters exposing async ``reply_text(text)``
    and ``reply_video(path)``.
    """

    def __init__(self, ctx):
        self.ctx = ctx

    async def handle_start(self, chat):
        await chat.reply_text(WELCOME_TEXT)

    async def handle_text(self, text, chat):
        if not is_valid_link(text, self.ctx.config.link_markers):
            await chat.reply_text(INVALID_LINK_TEXT)
            return DispatchState.AWAITING_INPUT

        try:
            loop = asyncio.get_running_loop()
            stored = await loop.run_in_executor(None, ingest, self.ctx, RemoteLink(text.strip()))
            await chat.reply_video(self.ctx.upload_path(stored.filename))
        except Exception:
            logger.exception("Error fetching or sending video for %r", text)
            await chat.reply_text(FAILURE_TEXT)
        return DispatchState.DISPATCHED
