# FILE: caseportal/main/routes.py
from flask import jsonify, render_template

from caseportal.main import bp
from caseportal.models import ROLE_LABELS


@bp.route('/')
@bp.route('/index')
def index():
    # The page is static; the script logs in and loads each section over the API
    return render_template('index.html', role_labels=ROLE_LABELS)


@bp.route('/healthz')
def healthz():
    # Liveness only, no spreadsheet round trip
    return jsonify({'status': 'ok'})
