import asyncio, logging, threading
import requests
from flask import Flask, jsonify, request
from werkzeug.exceptions import InternalServerError

from config import configure_logging, load_config
from context import AppContext
from dispatch import LinkDispatcher
from errors import RelayError
from pipeline import ingest, select_source
from storage import save_upload
from telegram_api import handle_update

logger = logging.getLogger(__name__)


def _source_from_request(ctx):
    upload = request.files.get("file")
    if upload is not None and upload.filename:
        return select_source(uploaded=save_upload(upload, ctx.upload_dir))

    payload = request.get_json(silent=True)
    url = payload.get("url") if isinstance(payload, dict) else None
    return select_source(url=url or request.form.get("url"))


def create_app(ctx, dispatcher=None):
    app = Flask(__name__)
    app.extensions["relay"] = ctx
    dispatcher = dispatcher or LinkDispatcher(ctx)

    @app.get("/")
    def health():
        return "Server started"

    @app.post("/upload")
    def upload():
        try:
            stored = ingest(ctx, _source_from_request(ctx))
        except RelayError as e:
            logger.error("Error uploading file or processing link (%s): %s", e.kind.value, e.message)
            return jsonify({"error": e.message}), e.status_code
        return jsonify({"filename": stored.filename}), 200

    @app.post("/telegram-bot")
    def telegram_bot():
        update = request.get_json(silent=True)
        if not isinstance(update, dict):
            return jsonify({"error": "Invalid update"}), 400
        try:
            asyncio.run(handle_update(dispatcher, ctx.config.bot_token, update, ctx.config.fetch_timeout))
        except requests.RequestException:
            # a non-200 makes Telegram redeliver the update and fetch again
            logger.exception("Error replying through the Bot API")
        return jsonify({"ok": True}), 200

    @app.errorhandler(InternalServerError)
    def server_error(e):
        logger.error("Unhandled error: %r", getattr(e, "original_exception", e))
        return "Something went wrong!", 500

    return app


def run():
    configure_logging()
    ctx = AppContext(load_config())
    try:
        ctx.ensure_upload_dir()
    except OSError:
        logger.exception("Error creating upload directory")
        raise SystemExit(1)

    app = create_app(ctx)
    port = ctx.config.port
    if ctx.config.bot_mode == "webhook":
        logger.info("Server listening on port %s", port)
        app.run(host="0.0.0.0", port=port)
        return

    from bot import run_bot

    t = threading.Thread(target=app.run, kwargs={"host": "0.0.0.0", "port": port}, daemon=True)
    t.start()
    logger.info("Server listening on port %s", port)
    try:
        asyncio.run(run_bot(ctx))
    except (KeyboardInterrupt, SystemExit):
        logger.info("Shutting down...")


if __name__ == "__main__":
    run()
