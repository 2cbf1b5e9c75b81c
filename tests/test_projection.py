"""
Unit tests for the linear projection service.
"""

import pytest

from propline.extensions import db
from propline.models import Player, ModelParameters
from propline.services.projection_service import project, get_model_parameters, ProjectionError


def make_player(**overrides):
    values = dict(external_id='KC-TK-87', name='Travis Kelce', team='KC', position='TE',
                  mean=62.4, stddev=24.1, weighted_mean=58.9, trend=-1.8)
    values.update(overrides)
    return Player(**values)


def make_params(**overrides):
    values = dict(name='receiving_yards_linear', version=1, target='receiving_yards', intercept=4.2,
                  coefficients={'mean': 0.35, 'weighted_mean': 0.55, 'trend': 1.5, 'stddev': -0.05})
    values.update(overrides)
    return ModelParameters(**values)


class TestProject:

    def test_linear_combination(self):
        # 4.2 + 0.35*62.4 + 0.55*58.9 + 1.5*-1.8 - 0.05*24.1 = 54.53
        assert project(make_player(), make_params()) == pytest.approx(54.5)

    def test_only_listed_features_used(self):
        params = make_params(intercept=0.0, coefficients={'mean': 1.0})
        assert project(make_player(), params) == pytest.approx(62.4)

    def test_clamped_at_zero(self):
        assert project(make_player(), make_params(intercept=-500.0)) == 0.0

    def test_unknown_feature(self):
        params = make_params(coefficients={'targets_per_route': 2.0})
        with pytest.raises(ProjectionError, match='targets_per_route'):
            project(make_player(), params)


class TestGetModelParameters:

    def test_latest_version(self, app):
        with app.app_context():
            db.session.add_all([make_params(version=1), make_params(version=2, intercept=9.0)])
            db.session.commit()

            params = get_model_parameters('receiving_yards_linear')
            assert params.version == 2

    def test_default_name_from_config(self, app):
        with app.app_context():
            db.session.add(make_params())
            db.session.commit()

            assert get_model_parameters().name == app.config['DEFAULT_MODEL_NAME']

    def test_missing(self, app):
        with app.app_context():
            assert get_model_parameters('nope') is None
