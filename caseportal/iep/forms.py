# caseportal/iep/forms.py
from flask_wtf.file import FileField, FileRequired
from wtforms import StringField
from wtforms.validators import Optional

from caseportal.auth.forms import ApiForm


class IepUploadForm(ApiForm):
    file = FileField('IEP 檔案', validators=[FileRequired(message='未選擇檔案')])
    comments = StringField('備註', validators=[Optional()])
