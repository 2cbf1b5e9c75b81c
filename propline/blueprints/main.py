from flask import Blueprint, jsonify, request, abort, current_app
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from ..extensions import db
from ..models import Player, ModelParameters
from ..services.projection_service import get_model_parameters, project

main_bp = Blueprint('main', __name__)

@main_bp.route('/health')
def health():
    try:
        db.session.execute(text('SELECT 1'))
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error(f"Health check failed: {e}")
        return jsonify({'status': 'degraded', 'database': 'unavailable'}), 503
    return jsonify({'status': 'ok', 'database': 'ok'})

@main_bp.route('/api/players')
def list_players():
    query = Player.query
    position = request.args.get('position')
    team = request.args.get('team')
    if position:
        query = query.filter(Player.position == position.upper())
    if team:
        query = query.filter(Player.team == team.upper())

    players = query.order_by(Player.name).all()
    return jsonify({'players': [p.to_dict() for p in players], 'total': len(players)})

@main_bp.route('/api/players/<int:player_id>')
def get_player(player_id):
    player = db.session.get(Player, player_id)
    if player is None:
        abort(404, description=f"Player {player_id} not found.")
    return jsonify(player.to_dict())

@main_bp.route('/api/players/<int:player_id>/projection')
def player_projection(player_id):
    player = db.session.get(Player, player_id)
    if player is None:
        abort(404, description=f"Player {player_id} not found.")

    model_name = request.args.get('model')
    params = get_model_parameters(model_name)
    if params is None:
        # Nothing stored yet: the database has not been seeded
        abort(404, description=f"No model parameters named '{model_name or current_app.config['DEFAULT_MODEL_NAME']}'. Run 'flask seed-db'.")

    return jsonify({
        'player': player.to_dict(),
        'model': {'name': params.name, 'version': params.version, 'target': params.target},
        'projection': project(player, params),
    })

@main_bp.route('/api/models')
def list_models():
    models = ModelParameters.query.order_by(ModelParameters.name, ModelParameters.version).all()
    return jsonify({'models': [m.to_dict() for m in models]})
