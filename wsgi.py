"""
WSGI Entry Point for the Office Tools Application

This module serves as the entry point for WSGI servers (like Gunicorn)
to run the Flask application in production environments.
"""

import os
import sys

# Load .env ONLY for local development. In production, environment
# variables must be provided by the platform.
if os.environ.get('FLASK_CONFIG', '').lower() != 'production':
    from dotenv import load_dotenv

    load_dotenv(override=False)

from officetools import create_app

config_name = (os.getenv('FLASK_CONFIG') or 'development').lower()

print(f'🚀 Initializing Flask application with config: {config_name}', file=sys.stderr)

if config_name == 'production':
    required_vars = {
        'SECRET_KEY': 'Required for session signing',
        'DATABASE_URL': 'Required for PostgreSQL connection',
    }

    missing_vars = [
        f"  ❌ {var_name}: {description}"
        for var_name, description in required_vars.items()
        if not os.getenv(var_name)
    ]

    if missing_vars:
        print(
            "\n❌ DEPLOYMENT FAILED: Missing required environment variables\n\n"
            + "\n".join(missing_vars) + "\n",
            file=sys.stderr,
        )
        raise RuntimeError('Missing required environment variables in production')

app = create_app(config_name)
print('✓ Flask application created successfully', file=sys.stderr)
