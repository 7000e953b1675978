from flask import Blueprint

# Templates and static files come from the app-level folders,
# not from a per-blueprint folder.
bp = Blueprint('main', __name__)

from caseportal.main import routes
