import logging
from pyrogram import Client, filters, idle
from pyrogram.handlers import MessageHandler

from dispatch import LinkDispatcher

logger = logging.getLogger(__name__)


class PyrogramChat:
    def __init__(self, message):
        self.message = message

    async def reply_text(self, text):
        return await self.message.reply_text(text)

    async def reply_video(self, path):
        return await self.message.reply_video(path)


def register_handlers(client, dispatcher):
    async def on_start(_, m):
        await dispatcher.handle_start(PyrogramChat(m))

    async def on_text(_, m):
        await dispatcher.handle_text(m.text, PyrogramChat(m))

    client.add_handler(MessageHandler(on_start, filters.command("start")))
    client.add_handler(MessageHandler(on_text, filters.text & ~filters.command("start")))
    return on_start, on_text


def build_client(ctx):
    cfg = ctx.config
    client = Client(
        "relay_bot",
        api_id=cfg.api_id,
        api_hash=cfg.api_hash,
        bot_token=cfg.bot_token,
        in_memory=True
    )
    register_handlers(client, LinkDispatcher(ctx))
    return client


async def run_bot(ctx):
    client = build_client(ctx)
    try:
        await client.start()
    except Exception:
        logger.exception("Error starting pyrogram client")
        raise
    me = await client.get_me()
    logger.info("Bot started as @%s", me.username)
    try:
        await idle()
    finally:
        await client.stop()
