from dotenv import load_dotenv
import os

from .constants import CONNECT_TIMEOUT, READ_TIMEOUT, REST_ENDPOINT

load_dotenv()


def _flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in ('1', 'true', 'yes')


class Config:
    FLICKR_API_KEY = os.getenv('FLICKR_API_KEY')
    FLICKR_API_SECRET = os.getenv('FLICKR_API_SECRET')
    FLICKR_TOKEN_FILE = os.getenv('FLICKR_TOKEN_FILE')
    FLICKR_ENDPOINT = os.getenv('FLICKR_ENDPOINT', REST_ENDPOINT)

    RAISE_ON_ERROR = _flag('FLICKR_RAISE_ON_ERROR', 'true')
    VERBOSE_LOGGING = _flag('FLICKR_VERBOSE_LOGGING', 'false')

    CONNECT_TIMEOUT = float(os.getenv('FLICKR_CONNECT_TIMEOUT', str(CONNECT_TIMEOUT)))
    READ_TIMEOUT = float(os.getenv('FLICKR_READ_TIMEOUT', str(READ_TIMEOUT)))

    LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')
