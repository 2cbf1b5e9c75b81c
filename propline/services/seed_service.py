from flask import current_app
from sqlalchemy.exc import IntegrityError, OperationalError, ProgrammingError
from ..extensions import db
from ..models import User, Player, ModelParameters

DEFAULT_PLAYERS = [
    {'external_id': 'KC-TK-87', 'name': 'Travis Kelce', 'team': 'KC', 'position': 'TE',
     'mean': 62.4, 'stddev': 24.1, 'weighted_mean': 58.9, 'trend': -1.8},
    {'external_id': 'MIA-TH-10', 'name': 'Tyreek Hill', 'team': 'MIA', 'position': 'WR',
     'mean': 88.7, 'stddev': 41.3, 'weighted_mean': 91.2, 'trend': 2.4},
    {'external_id': 'MIN-JJ-18', 'name': 'Justin Jefferson', 'team': 'MIN', 'position': 'WR',
     'mean': 94.1, 'stddev': 35.6, 'weighted_mean': 97.8, 'trend': 1.1},
    {'external_id': 'SF-CM-23', 'name': 'Christian McCaffrey', 'team': 'SF', 'position': 'RB',
     'mean': 41.5, 'stddev': 19.7, 'weighted_mean': 44.0, 'trend': 0.6},
    {'external_id': 'DET-SL-14', 'name': 'Amon-Ra St. Brown', 'team': 'DET', 'position': 'WR',
     'mean': 83.2, 'stddev': 28.4, 'weighted_mean': 86.5, 'trend': 1.9},
]

DEFAULT_MODEL_PARAMETERS = [
    {'name': 'receiving_yards_linear', 'version': 1, 'target': 'receiving_yards',
     'intercept': 4.2,
     'coefficients': {'mean': 0.35, 'weighted_mean': 0.55, 'trend': 1.5, 'stddev': -0.05}},
]


class SeedResult(dict):
    """Table name -> number of rows inserted by the seed run."""

    @property
    def total(self):
        return sum(self.values())


def _admin_users():
    config = current_app.config
    admin = User(
        username=config['ADMIN_USERNAME'],
        name='Administrator',
        role='admin',
        email=config['ADMIN_EMAIL'],
        is_default_password=True,
    )
    admin.set_password(config['ADMIN_PASSWORD'])
    return [admin]


def _default_players():
    return [Player(**row) for row in DEFAULT_PLAYERS]


def _default_model_parameters():
    return [ModelParameters(**row) for row in DEFAULT_MODEL_PARAMETERS]


SEED_TABLES = [
    (User, _admin_users),
    (Player, _default_players),
    (ModelParameters, _default_model_parameters),
]


def seed_table(model, make_rows):
    """Add the rows built by ``make_rows`` only if ``model``'s table is empty.

    Returns the number of rows added. The caller commits.
    """
    table = model.__tablename__
    if db.session.query(model.id).first() is not None:
        current_app.logger.info(f"Table '{table}' already populated, skipping seed.")
        return 0

    rows = make_rows()
    db.session.add_all(rows)
    current_app.logger.info(f"Seeding {len(rows)} row(s) into '{table}'.")
    return len(rows)


def ensure_schema():
    """Create missing tables, tolerating a concurrent seeder creating them first."""
    try:
        db.create_all()
    except (OperationalError, ProgrammingError) as e:
        # Another process created a table first; the second pass creates what is still missing.
        db.session.rollback()
        current_app.logger.warning(f"Schema creation raced with another process, retrying: {e}")
        db.create_all()


def seed_database():
    ensure_schema()

    result = SeedResult()
    try:
        # Autoflush may surface a conflict on the next table's emptiness check.
        for model, make_rows in SEED_TABLES:
            result[model.__tablename__] = seed_table(model, make_rows)
        db.session.commit()
    except IntegrityError:
        # A concurrent seeder committed first; its rows stand.
        db.session.rollback()
        current_app.logger.warning("Seed rows already inserted by another process, rolled back.")
        return SeedResult((model.__tablename__, 0) for model, _ in SEED_TABLES)

    return result
