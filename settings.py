# settings.py
# Loads the Hi-Rez credentials and server options once at process start.

import json
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_API_URL = 'http://api.smitegame.com/smiteapi.svc'
DEFAULT_HOST = '0.0.0.0'
DEFAULT_PORT = 3000


@dataclass(frozen=True)
class Settings:
    dev_id: Optional[str] = None
    auth_key: Optional[str] = None
    api_url: str = DEFAULT_API_URL
    host: str = DEFAULT_HOST
    port: int = DEFAULT_PORT
    log_level: str = 'INFO'


def _read_json(path):
    path = Path(path)
    if not path.is_file():
        return {}
    with path.open(encoding='utf-8') as fh:
        return json.load(fh)


def load_settings():
    """
    Builds the settings from the environment (and a .env file if present).
    Credentials missing from the environment fall back to auth.json, and the
    port to config.json (the legacy deployment files).
    """
    load_dotenv()

    auth = _read_json(os.getenv('SMITE_AUTH_FILE', 'auth.json'))
    smite_keys = auth.get('apiKeys', {}).get('smite', {})
    server = _read_json(os.getenv('SMITE_CONFIG_FILE', 'config.json'))

    return Settings(
        dev_id=os.getenv('SMITE_DEV_ID') or smite_keys.get('devId'),
        auth_key=os.getenv('SMITE_AUTH_KEY') or smite_keys.get('authKey'),
        api_url=os.getenv('SMITE_API_URL', DEFAULT_API_URL).rstrip('/'),
        host=os.getenv('HOST', DEFAULT_HOST),
        port=int(os.getenv('PORT') or server.get('PORT', DEFAULT_PORT)),
        log_level=os.getenv('LOG_LEVEL', 'INFO').upper(),
    )
