import logging, requests

from errors import FetchError

logger = logging.getLogger(__name__)


def download_from_link(url, config):
    """Resolve a hosted-video link into raw bytes through the RapidAPI downloader."""
    headers = {
        "x-rapidapi-key": config.rapidapi_key,
        "x-rapidapi-host": config.rapidapi_host,
        "Content-Type": "application/json",
    }
    try:
        r = requests.post(
            config.fetch_url,
            json={"url": url},
            headers=headers,
            timeout=config.fetch_timeout
        )
        r.raise_for_status()
    except requests.RequestException as e:
        logger.error("Error downloading video from %s: %s", url, e)
        raise FetchError() from e
    return r.content
