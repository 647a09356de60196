# hoshizora/forms.py

from flask_wtf import FlaskForm
from wtforms import StringField, TextAreaField, BooleanField, SubmitField, PasswordField
from wtforms.validators import DataRequired, Length, Optional, Regexp

from hoshizora.messages import NAME_REQUIRED, SLUG_INVALID


class DeleteForm(FlaskForm):
    """Generic delete confirmation form (CSRF token only)."""
    submit = SubmitField('ลบ')


class LoginForm(FlaskForm):
    username = StringField('ชื่อผู้ใช้', validators=[DataRequired(), Length(max=64)])
    password = PasswordField('รหัสผ่าน', validators=[DataRequired()])
    remember = BooleanField('จดจำการเข้าสู่ระบบ')
    submit = SubmitField('เข้าสู่ระบบ')


class CategoryForm(FlaskForm):
    """
    Category add/edit form for the admin pages. A blank slug is derived from
    the name by the view; uniqueness is checked by the category service.
    """
    name = StringField('ชื่อหมวดหมู่', validators=[DataRequired(message=NAME_REQUIRED), Length(max=128)])
    slug = StringField('Slug', validators=[
        Optional(),
        Length(max=128),
        Regexp(r'^[a-z0-9-]+$', message=SLUG_INVALID),
    ])
    description = TextAreaField('คำอธิบาย', validators=[Length(max=500)])
    submit = SubmitField('บันทึก')
