import logging, requests

logger = logging.getLogger(__name__)

API_BASE = "https://api.telegram.org"


class BotApiChat:
    """Replies to one chat through the Telegram Bot HTTP API (webhook mode)."""

    def __init__(self, token, chat_id, timeout=120):
        self.token = token
        self.chat_id = chat_id
        self.timeout = timeout

    def _call(self, method, data, files=None):
        r = requests.post(
            f"{API_BASE}/bot{self.token}/{method}",
            data=data,
            files=files,
            timeout=self.timeout
        )
        r.raise_for_status()
        return r.json()

    async def reply_text(self, text):
        return self._call("sendMessage", {"chat_id": self.chat_id, "text": text})

    async def reply_video(self, path):
        with open(path, "rb") as f:
            return self._call("sendVideo", {"chat_id": self.chat_id}, files={"video": f})


def is_start_command(text):
    head = text.split(maxsplit=1)[0] if text.strip() else ""
    return head == "/start" or head.startswith("/start@")


async def handle_update(dispatcher, token, update, timeout=120):
    message = update.get("message") or {}
    text = message.get("text")
    chat_id = (message.get("chat") or {}).get("id")
    if not text or chat_id is None:
        logger.debug("Ignoring update %s", update.get("update_id"))
        return None

    chat = BotApiChat(token, chat_id, timeout)
    if is_start_command(text):
        await dispatcher.handle_start(chat)
        return None
    return await dispatcher.handle_text(text, chat)
