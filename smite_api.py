# smite_api.py
# Signed client for the Hi-Rez Smite API: session handling, request signing
# and the player/match lookups re-exposed by app.py.

import hashlib
import logging
from datetime import datetime, timezone

import requests

from settings import DEFAULT_API_URL

logger = logging.getLogger(__name__)

TIMESTAMP_FORMAT = '%Y%m%d%H%M%S'


def utc_timestamp():
    return datetime.now(timezone.utc).strftime(TIMESTAMP_FORMAT)


def private_profile_result():
    return {'isPrivate': True}


class SmiteApi:
    def __init__(self, dev_id, auth_key, api_url=DEFAULT_API_URL):
        self.dev_id = dev_id
        self.auth_key = auth_key
        self.api_url = api_url
        self.session = None

    def create_signature(self, method_name, timestamp=None):
        """
        A Hi-Rez signature is needed for each API call: the MD5 hex digest of
        devId + lower-cased method name + authKey + UTC timestamp.
        Returns (signature, timestamp).
        """
        if not timestamp:
            timestamp = utc_timestamp()
        raw = f'{self.dev_id}{method_name.lower()}{self.auth_key}{timestamp}'
        return hashlib.md5(raw.encode('utf-8')).hexdigest(), timestamp

    def build_url(self, method_name, signature, timestamp, *identifier):
        session = f'{self.session}/' if self.session else ''
        url = f'{self.api_url}/{method_name}Json/{self.dev_id}/{signature}/{session}{timestamp}'
        # Identifiers are forwarded as given, None included.
        for value in identifier:
            url += f'/{value}'
        return url

    def _fetch(self, method_name, *identifier):
        signature, timestamp = self.create_signature(method_name)
        url = self.build_url(method_name, signature, timestamp, *identifier)
        logger.debug('Calling %s', method_name)
        resp = requests.get(url)
        return resp.json()

    def fetch_method(self, method_name):
        return self._fetch(method_name)

    def fetch_method_with_player_id(self, method_name, player_id):
        return self._fetch(method_name, player_id)

    def fetch_method_with_match_id(self, method_name, match_id):
        return self._fetch(method_name, match_id)

    # Session lifecycle

    def get_session(self):
        return self.fetch_method('createsession')

    def create_session(self):
        """
        Creates the session and stores it. The session can expire and will
        need to be re-created; failures are only logged.
        """
        session = self.get_session()
        ret_msg = session.get('ret_msg') or ''
        if ret_msg.lower() == 'approved':
            logger.info('Session SUCCESS %s', session.get('session_id'))
            self.session = session.get('session_id')
        else:
            logger.warning('Session FAILED: %s', ret_msg)

    def set_session_to_null(self):
        # The session must be cleared before createsession can succeed again.
        self.session = None

    def validate_session(self):
        return self.fetch_method('testsession')

    # Lookups

    def get_player_id_by_name(self, player_name):
        return self._fetch('getplayeridbyname', player_name)

    def is_profile_private(self, player_name):
        player = self.get_player_id_by_name(player_name)[0]
        return {
            'isPrivate': player.get('privacy_flag') == 'y',
            'playerId': player.get('player_id'),
        }

    def _fetch_unless_private(self, method_name, player_name):
        player_info = self.is_profile_private(player_name)
        if player_info['isPrivate']:
            return private_profile_result()
        return self.fetch_method_with_player_id(method_name, player_info['playerId'])

    def get_player_info(self, player_name):
        return self._fetch_unless_private('getplayer', player_name)

    def get_match_history(self, player_name):
        return self._fetch_unless_private('getmatchhistory', player_name)

    def get_god_ranks(self, player_name):
        return self._fetch_unless_private('getgodranks', player_name)

    def get_player_status(self, player_name):
        return self._fetch_unless_private('getplayerstatus', player_name)

    def get_motd(self):
        return self.fetch_method('getmotd')

    def get_server_status(self):
        return self.fetch_method('gethirezserverstatus')

    def get_match_by_match_id(self, match_id):
        return self.fetch_method_with_match_id('getmatchdetails', match_id)

    def get_match_player_details_by_match_id(self, match_id):
        return self.fetch_method_with_match_id('getmatchplayerdetails', match_id)
