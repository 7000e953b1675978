from flask import Blueprint

bp = Blueprint('errors', __name__)

from caseportal.errors import handlers
