from flask import current_app
from ..models import ModelParameters


class ProjectionError(Exception):
    """Raised when stored model parameters cannot be applied to a player."""


def get_model_parameters(name=None):
    """Latest version of the named parameter set, or None."""
    name = name or current_app.config['DEFAULT_MODEL_NAME']
    return (ModelParameters.query
            .filter_by(name=name)
            .order_by(ModelParameters.version.desc())
            .first())


def project(player, params):
    features = player.features()
    total = params.intercept
    for feature, weight in (params.coefficients or {}).items():
        if feature not in features:
            raise ProjectionError(
                f"Model '{params.name}' v{params.version} uses unknown feature '{feature}'."
            )
        total += weight * features[feature]

    # Clamped at zero
    return round(max(total, 0.0), 1)
