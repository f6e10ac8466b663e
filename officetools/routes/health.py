"""
Health check endpoints for monitoring the application and its database.
"""

from datetime import datetime

from flask import Blueprint, jsonify, current_app
from sqlalchemy import inspect, text

from officetools.extensions import db


health_bp = Blueprint('health', __name__)


@health_bp.route('/health')
def health_check():
    """
    Lightweight health check for load balancer probes.

    Does NOT check database connectivity to keep response time low.
    """
    return jsonify({
        'status': 'healthy',
        'timestamp': datetime.utcnow().isoformat(),
        'service': 'officetools',
    }), 200


@health_bp.route('/health/ready')
def readiness_check():
    """
    Readiness check including database connectivity and schema presence.

    Returns 503 when the database is unreachable or tables are missing.
    """
    checks = {
        'application': 'healthy',
        'database': 'unknown',
        'timestamp': datetime.utcnow().isoformat(),
    }

    status_code = 200

    try:
        db.session.execute(text('SELECT 1'))
        db.session.commit()
        checks['database'] = 'healthy'
    except Exception as exc:
        checks['database'] = 'unhealthy'
        checks['database_error'] = str(exc)
        status_code = 503
        current_app.logger.error('Database health check failed: %s', exc, exc_info=True)
        db.session.rollback()

    if checks['database'] == 'healthy':
        existing = set(inspect(db.engine).get_table_names())
        missing = sorted(set(db.metadata.tables.keys()) - existing)
        if missing:
            checks['missing_tables'] = missing
            status_code = 503

    checks['status'] = 'ready' if status_code == 200 else 'not_ready'
    return jsonify(checks), status_code
