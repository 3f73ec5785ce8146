from flask import Blueprint, jsonify

main = Blueprint('main', __name__)

ENDPOINTS = [
    {'method': 'GET', 'path': '/api/state', 'description': 'Get game state'},
    {'method': 'POST', 'path': '/api/move', 'description': 'Make a move'},
    {'method': 'POST', 'path': '/api/reset', 'description': 'Reset game'},
]

@main.route('/')
def index():
    return jsonify({'message': 'Welcome to the tic-tac-toe server!', 'endpoints': ENDPOINTS})
