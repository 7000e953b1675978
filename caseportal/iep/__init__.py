from flask import Blueprint

bp = Blueprint('iep', __name__)

from caseportal.iep import routes
