from flask import Blueprint

bp = Blueprint('questions', __name__)

from caseportal.questions import routes
