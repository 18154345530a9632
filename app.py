# Smite Microservice
# Flask front-end: each route maps to one SmiteApi call and relays its JSON.

import logging

from flask import Flask, jsonify, request

from settings import load_settings
from smite_api import SmiteApi

logger = logging.getLogger(__name__)

settings = load_settings()
smite_client = SmiteApi(settings.dev_id, settings.auth_key, settings.api_url)

app = Flask(__name__)
# Relay upstream objects with their key order intact.
app.json.sort_keys = False


@app.route('/', methods=['GET'])
def index():
    return 'Smite Microservice is up. Try another endpoint like /motd.'


@app.route('/motd', methods=['GET'])
def motd():
    return jsonify(smite_client.get_motd())


@app.route('/status', methods=['GET'])
def status():
    return jsonify(smite_client.get_server_status())


@app.route('/playerId', methods=['GET'])
def player_id():
    username = request.args.get('username')
    return jsonify(smite_client.get_player_id_by_name(username))


@app.route('/playerStatus', methods=['GET'])
def player_status():
    username = request.args.get('username')
    return jsonify(smite_client.get_player_status(username))


@app.route('/godRanks', methods=['GET'])
def god_ranks():
    username = request.args.get('username')
    return jsonify(smite_client.get_god_ranks(username))


@app.route('/matchHistory', methods=['GET'])
def match_history():
    username = request.args.get('username')
    return jsonify(smite_client.get_match_history(username))


@app.route('/match', methods=['GET'])
def match():
    match_id = request.args.get('matchId')
    return jsonify(smite_client.get_match_by_match_id(match_id))


@app.route('/matchDetails', methods=['GET'])
def match_details():
    match_id = request.args.get('matchId')
    return jsonify(smite_client.get_match_player_details_by_match_id(match_id))


@app.route('/playerInfo', methods=['GET'])
def player_info():
    username = request.args.get('username')
    return jsonify(smite_client.get_player_info(username))


def main():
    logging.basicConfig(
        level=settings.log_level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
    )
    smite_client.create_session()
    logger.info('listening on %s:%s', settings.host, settings.port)
    app.run(host=settings.host, port=settings.port)


if __name__ == '__main__':
    main()
