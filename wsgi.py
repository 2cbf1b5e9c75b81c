"""
WSGI entry point for production deployment with Gunicorn.

Usage:
    gunicorn -c gunicorn_config.py wsgi:app

Gunicorn imports this module, so the ``__main__`` block below never runs
under it. Seed the database with ``flask --app wsgi seed-db`` before starting
the server (docker-entrypoint.sh does this).
"""

from propline import create_app

app = create_app()

if __name__ == "__main__":
    app.run()
