# hoshizora/errors.py
"""
Domain errors raised by the service layer. The API blueprint renders them as
JSON ``{"error": ..., "code": ...}`` responses; the admin pages turn them into
form errors or flashed messages.
"""

from hoshizora.messages import SLUG_TAKEN as SLUG_TAKEN_MESSAGE


class BlogError(Exception):
    code = 'error'
    status_code = 400
    default_message = 'เกิดข้อผิดพลาด'

    def __init__(self, message=None, fields=None):
        self.message = message or self.default_message
        self.fields = fields or {}
        super().__init__(self.message)

    def to_dict(self):
        payload = {'error': self.message, 'code': self.code}
        if self.fields:
            payload['fields'] = self.fields
        return payload


class CategoryValidationError(BlogError):
    code = 'validation_error'
    status_code = 400
    default_message = 'ข้อมูลหมวดหมู่ไม่ถูกต้อง'


class CategoryNotFoundError(BlogError):
    code = 'not_found'
    status_code = 404
    default_message = 'ไม่พบหมวดหมู่'


class SlugConflictError(BlogError):
    code = 'slug_conflict'
    status_code = 409
    default_message = SLUG_TAKEN_MESSAGE


class CategoryInUseError(BlogError):
    code = 'category_in_use'
    status_code = 409
    default_message = 'ไม่สามารถลบหมวดหมู่ที่มีบทความอยู่ได้'
