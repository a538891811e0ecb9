from flask import Flask
from flask_migrate import Migrate
from flask_sqlalchemy import SQLAlchemy
from dotenv import load_dotenv
import os
import logging

load_dotenv()

db = SQLAlchemy()
migrate = Migrate()

def create_app():
    # Validate required environment variables
    required_vars = ['DATABASE_URL', 'SECRET_KEY']
    for var in required_vars:
        if not os.getenv(var):
            raise ValueError(f"Required environment variable {var} is not set")
    
    app = Flask(__name__)
    app.config.from_object('config')
    
    # Configure logging
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    
    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    
    # Register blueprints
    from app.routes.main import main_bp
    from app.projects.calculator.routes import calculator_bp
    
    app.register_blueprint(main_bp)
    app.register_blueprint(calculator_bp, url_prefix='/calculator')
    
    # Register CLI commands
    from app.projects.calculator.commands import calculator_cli
    app.cli.add_command(calculator_cli)
    
    # Import models to ensure they're known to Flask-SQLAlchemy
    from app.models import LogEntry
    from app.projects.calculator.models import Calculation
    
    return app
