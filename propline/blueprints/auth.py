from flask import Blueprint, request, jsonify, session, abort, current_app
from flask_login import login_user, logout_user, login_required, current_user
from ..extensions import db, login_manager
from ..models import User

auth_bp = Blueprint('auth', __name__, url_prefix='/api')

@login_manager.user_loader
def load_user(user_id):
    return db.session.get(User, int(user_id))

@login_manager.unauthorized_handler
def unauthorized():
    abort(401, description='Login required.')

@auth_bp.route('/login', methods=['POST'])
def login():
    data = request.get_json(silent=True) or {}
    username = data.get('username')
    password = data.get('password')
    if not username or not password:
        abort(400, description="Both 'username' and 'password' are required.")

    user = User.query.filter_by(username=username).first()
    if user is None or not user.check_password(password):
        current_app.logger.warning(f"Failed login for '{username}'.")
        abort(401, description='Invalid username or password.')

    login_user(user)
    payload = {'user': user.to_dict()}
    if user.is_default_password:
        payload['warning'] = 'Default password in use, please change it.'
    return jsonify(payload)

@auth_bp.route('/logout', methods=['POST'])
@login_required
def logout():
    logout_user()
    session.clear()
    return jsonify({'status': 'logged out'})

@auth_bp.route('/me')
@login_required
def me():
    return jsonify({'user': current_user.to_dict()})
