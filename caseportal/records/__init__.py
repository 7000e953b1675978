from flask import Blueprint

bp = Blueprint('records', __name__)

from caseportal.records import routes
