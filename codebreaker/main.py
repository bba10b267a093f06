from flask import Blueprint, jsonify
from codebreaker import get_registry

main = Blueprint('main', __name__)

@main.route('/')
def index():
    return jsonify({'message': 'Welcome to the Codebreaker game server!'})

@main.route('/health')
def health():
    return jsonify({'status': 'ok', 'games': len(get_registry())})
