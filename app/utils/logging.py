"""
Logging utilities for tracking activity across the site.
"""

from flask import request
from app.models import LogEntry
from app import db


def log_project_activity(project_name, category, description):
    """
    Stage an activity entry on the current session.

    The entry is committed together with whatever change it describes, so
    callers are responsible for the commit.

    Args:
        project_name (str): The project identifier (e.g., 'calculator')
        category (str): Short activity label (e.g., 'Clear History')
        description (str): Human-readable description of what happened

    Returns:
        LogEntry: The staged (uncommitted) entry
    """
    log_entry = LogEntry(
        project=project_name,
        category=category,
        description=description
    )
    db.session.add(log_entry)
    return log_entry


def log_project_visit(project_name, project_display_name=None):
    """
    Log a visit to a project/page.
    
    Args:
        project_name (str): The project identifier (e.g., 'calculator')
        project_display_name (str, optional): Human-readable name for the description.
                                              Defaults to project_name if not provided.
    """
    display_name = project_display_name or project_name
    client = request.remote_addr or 'unknown address'

    log_project_activity(
        project_name,
        'Visit',
        f"Anonymous user ({client}) visited {display_name}"
    )
    db.session.commit()
