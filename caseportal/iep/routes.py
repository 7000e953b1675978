# FILE: caseportal/iep/routes.py
from flask import current_app, jsonify
from flask_login import current_user, login_required

from caseportal.auth.decorators import policy_required
from caseportal.auth.forms import first_error
from caseportal.google_api import get_drive
from caseportal.iep import bp
from caseportal.iep.forms import IepUploadForm
from caseportal.models import IEP_FILES, new_record_id, today_str
from caseportal.services import get_store


@bp.route('', methods=['GET'])
@login_required
def list_iep_files():
    data = get_store(IEP_FILES).read_all()
    return jsonify({'data': data})


@bp.route('', methods=['POST'])
@login_required
@policy_required('iep.upload')
def upload_iep_file():
    """
    Multipart upload (field `file`, optional `comments`).
    The file goes to the IEP folder on Drive first, then its id and link are
    recorded in the iep_files table. Oversized bodies are rejected with 413
    before this view runs.
    """
    form = IepUploadForm()
    if not form.validate_on_submit():
        return jsonify({'status': 'error', 'message': first_error(form)}), 400

    upload = form.file.data
    current_app.logger.info(f"開始上傳: {upload.filename} ({current_user.username})")
    try:
        drive_file = get_drive().upload(upload.filename, upload.read(), upload.mimetype)

        new_record = {
            'id': new_record_id('iep'),
            'filename': drive_file.get('name', upload.filename),
            'drive_file_id': drive_file['id'],
            'uploaded_by': current_user.name,
            'role': current_user.role,
            'file_link': drive_file.get('webViewLink', ''),
            'upload_date': today_str(),
            'comments': form.comments.data or '',
        }
        get_store(IEP_FILES).append(new_record)
    except Exception as e:
        current_app.logger.error(f"上傳失敗 {upload.filename}: {e}", exc_info=True)
        return jsonify({'status': 'error', 'message': f'上傳失敗: {e}'}), 500

    current_app.logger.info(f"Uploaded {upload.filename} as Drive file {new_record['drive_file_id']}")
    return jsonify({'status': 'success', 'message': '上傳成功', 'data': new_record})
