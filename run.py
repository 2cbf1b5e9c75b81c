import os
from propline import create_app

app = create_app()

if __name__ == '__main__':
    # Development server only. Anything placed here is skipped under Gunicorn,
    # so database seeding lives in `flask seed-db` instead.
    app.run(
        host=os.getenv('HOST', '127.0.0.1'),
        port=int(os.getenv('PORT', 5000)),
        debug=True,
    )
