"""Local development server.

Creates missing tables and seeds the tool registry before serving, so a fresh
checkout works without running migrations first.
"""

import os

from wsgi import app
from officetools.extensions import db
from officetools.services.tracking import seed_tools


if __name__ == '__main__':
    with app.app_context():
        db.create_all()
        created = seed_tools()
        app.logger.info('Seeded %d tools', created)

    host = os.environ.get('HOST', '127.0.0.1')
    port = int(os.environ.get('PORT', 5000))
    app.run(host=host, port=port)
