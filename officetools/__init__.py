"""
Flask Application Factory

This module implements the application factory pattern for creating
Flask application instances with different configurations.
"""

import importlib
import os

from flask import Flask, jsonify
from sqlalchemy import inspect
from werkzeug.exceptions import HTTPException

from officetools.config import config
from officetools.domain.errors import ShareUnavailable, ToolInputError
from officetools.extensions import db, migrate, limiter


def _safe_log(app, level: str, message: str, *args, **kwargs) -> None:
    """Log without risking startup due to logger misconfiguration."""
    try:
        logger = getattr(app.logger, level)
        logger(message, *args, **kwargs)
    except Exception:
        import sys

        print(f"[{level.upper()}] {message % args if args else message}", file=sys.stderr)


def _check_schema(app) -> None:
    """Non-fatal startup check that every model table exists.

    Never creates or drops tables; run `flask db upgrade` for that.
    """
    if os.environ.get('SKIP_STARTUP_DB_TASKS') == '1' or app.config.get('TESTING'):
        return

    with app.app_context():
        try:
            importlib.import_module('officetools.models')
            existing = set(inspect(db.engine).get_table_names())
            required = set(db.metadata.tables.keys())
            missing = sorted(required - existing)
            if missing:
                _safe_log(
                    app,
                    'warning',
                    '⚠ Schema appears incomplete. Missing tables: %s. '
                    'App will continue, but features may fail until migrations run.',
                    ', '.join(missing),
                )
            else:
                _safe_log(app, 'info', '✓ All required tables present (%d)', len(required))
        except Exception as exc:
            _safe_log(app, 'warning', '⚠ Could not verify schema completeness (continuing): %s', exc, exc_info=True)


def create_app(config_name='default', overrides=None):
    """
    Application factory function

    Args:
        config_name (str | dict): Configuration name ('development', 'production',
            'testing'), or a mapping of overrides applied on top of TestingConfig
        overrides (dict): Optional config values applied last (used by tests)

    Returns:
        Flask: Configured Flask application instance
    """

    if isinstance(config_name, dict):
        overrides = {**config_name, **(overrides or {})}
        config_name = 'testing'
    config_name = (config_name or 'default').lower()

    app = Flask(__name__)

    # Instantiate the config object so @property values (like
    # ProductionConfig.SQLALCHEMY_DATABASE_URI) are evaluated.
    cfg = config.get(config_name) or config['default']
    cfg_obj = cfg() if isinstance(cfg, type) else cfg
    app.config.from_object(cfg_obj)
    if overrides:
        app.config.update(overrides)
    app.config['ENV_NAME'] = config_name

    if config_name == 'production':
        if not app.config.get('SECRET_KEY'):
            app.logger.error('Production requires SECRET_KEY to be set via environment variable')
            raise RuntimeError('Missing SECRET_KEY in production')

        db_uri = app.config.get('SQLALCHEMY_DATABASE_URI')
        if not db_uri:
            app.logger.error('Production requires DATABASE_URL (SQLALCHEMY_DATABASE_URI) to be set')
            raise RuntimeError('Missing DATABASE_URL in production')
        if db_uri.strip().startswith('sqlite:'):
            app.logger.error('Production requires PostgreSQL (DATABASE_URL must not be sqlite): %s', db_uri)
            raise RuntimeError('SQLite not allowed in production')
    elif not app.config.get('SECRET_KEY'):
        app.config['SECRET_KEY'] = os.urandom(32)
        app.logger.warning('SECRET_KEY was missing; generated an ephemeral key for this process.')

    os.makedirs(app.config['SHARED_UPLOAD_FOLDER'], exist_ok=True)

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    limiter.init_app(app)

    register_blueprints(app)
    register_error_handlers(app)
    register_cli_commands(app)
    register_request_hooks(app)
    register_shell_context(app)

    _check_schema(app)

    return app


def register_blueprints(app):
    """Register all application blueprints"""
    from officetools.routes.api import api_bp
    from officetools.routes.health import health_bp
    from officetools.blueprints.bmi_calculator import bmi_calculator_bp
    from officetools.blueprints.photo_cropper import photo_cropper_bp
    from officetools.blueprints.text_to_speech import text_to_speech_bp
    from officetools.blueprints.file_compressor import file_compressor_bp
    from officetools.blueprints.sharing import sharing_bp
    from officetools.blueprints.pdf_tools import pdf_tools_bp

    app.register_blueprint(health_bp)  # No prefix - accessible at /health
    app.register_blueprint(api_bp, url_prefix='/api')
    app.register_blueprint(sharing_bp, url_prefix='/api')
    app.register_blueprint(pdf_tools_bp, url_prefix='/api')
    app.register_blueprint(bmi_calculator_bp, url_prefix='/tools/bmi-calculator')
    app.register_blueprint(photo_cropper_bp, url_prefix='/tools/photo-cropper')
    app.register_blueprint(text_to_speech_bp, url_prefix='/tools/text-to-speech')
    app.register_blueprint(file_compressor_bp, url_prefix='/tools/file-compressor')


def register_error_handlers(app):
    """Every error leaves the API as JSON: {"error": message}."""

    @app.errorhandler(ToolInputError)
    def tool_input_error(error):
        return jsonify({'error': str(error)}), 400

    @app.errorhandler(ShareUnavailable)
    def share_unavailable(error):
        return jsonify({'error': error.message}), error.status_code

    @app.errorhandler(HTTPException)
    def http_error(error):
        return jsonify({'error': error.description or error.name}), error.code

    @app.errorhandler(Exception)
    def internal_error(error):
        db.session.rollback()
        app.logger.exception('Unhandled exception (500): %s', error)
        return jsonify({'error': 'Internal server error'}), 500


def register_cli_commands(app):
    """Register custom CLI commands"""
    from officetools.cli import COMMANDS

    for command in COMMANDS:
        app.cli.add_command(command)


def register_request_hooks(app):
    @app.teardown_request
    def _cleanup_sessions(exc):
        if exc is not None:
            try:
                db.session.rollback()
            except Exception as rollback_exc:
                app.logger.error('Rollback during teardown failed: %s', rollback_exc, exc_info=True)
        db.session.remove()


def register_shell_context(app):
    """Register shell context for flask shell command"""

    @app.shell_context_processor
    def make_shell_context():
        from officetools import models

        return {
            'db': db,
            'User': models.User,
            'Tool': models.Tool,
            'ToolUsage': models.ToolUsage,
            'Bookmark': models.Bookmark,
            'SharedFile': models.SharedFile,
            'SharedText': models.SharedText,
        }
