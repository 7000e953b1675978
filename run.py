# FILE: run.py

from caseportal import create_app, socketio
from caseportal import cli

app = create_app()
cli.register(app)


if __name__ == '__main__':
    # eventlet/gevent are used when installed, otherwise the Werkzeug dev server
    socketio.run(app, host='0.0.0.0', port=app.config['PORT'], allow_unsafe_werkzeug=True)
