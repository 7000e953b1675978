from flask import Blueprint

bp = Blueprint('auth', __name__)

from caseportal.auth import routes, tokens
