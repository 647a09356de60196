# hoshizora/client/controller.py
"""
Client-side state for managing categories through the CRUD API.

The controller owns the category list, the add/edit form and the delete
confirmation. Remote failures never escape it; they end up in ``error``,
``form.field_errors``, ``delete.error`` or a notification.

Form states::

    Closed -> Open(adding | editing) -> Submitting -> Closed   (success)
                                     -> Submitting -> Open     (failure)

Delete states::

    Closed -> ConfirmOpen -> Deleting -> Closed                (success)
                                      -> ConfirmOpen           (failure)
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Optional

from hoshizora.client.api import ApiClient, ApiError
from hoshizora.errors import SLUG_TAKEN_MESSAGE, SlugConflictError
from hoshizora.messages import NAME_REQUIRED, SLUG_INVALID, SLUG_REQUIRED
from hoshizora.slugs import derive_slug, is_valid_slug

logger = logging.getLogger(__name__)

CATEGORIES_PATH = '/api/categories'

INVALID_RESPONSE = 'Invalid response from the categories API'

FETCH_ERROR = 'ไม่สามารถดึงข้อมูลหมวดหมู่ได้'
SLUG_TAKEN_FIELD_ERROR = 'Slug นี้ถูกใช้งานแล้ว กรุณาเลือก slug อื่น'
SAVE_ERROR = 'เกิดข้อผิดพลาดในการบันทึกหมวดหมู่'
DELETE_ERROR = 'เกิดข้อผิดพลาดในการลบหมวดหมู่'


@dataclass
class Category:
    id: str
    name: str
    slug: str
    description: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Any) -> "Category":
        if not isinstance(data, dict) or data.get('id') is None:
            raise ApiError(f'{INVALID_RESPONSE}: expected a category, got {data!r}')
        return cls(
            id=str(data['id']),
            name=data.get('name', ''),
            slug=data.get('slug', ''),
            description=data.get('description'),
        )


@dataclass
class CategoryFields:
    name: str = ''
    slug: str = ''

    def to_payload(self) -> dict[str, str]:
        return {'name': self.name, 'slug': self.slug}


@dataclass
class CategoryFormState:
    is_open: bool = False
    editing_target: Optional[Category] = None
    fields: CategoryFields = field(default_factory=CategoryFields)
    field_errors: dict[str, str] = field(default_factory=dict)
    submitting: bool = False

    @property
    def is_editing(self) -> bool:
        return self.editing_target is not None


@dataclass
class DeleteState:
    is_open: bool = False
    target_id: Optional[str] = None
    loading: bool = False
    error: Optional[str] = None


def is_slug_conflict(err: ApiError) -> bool:
    """
    True when a save failed because the slug is taken. The server's error code
    is authoritative; the message text is checked for servers that send none.
    """
    if err.code is not None:
        return err.code == SlugConflictError.code
    return SLUG_TAKEN_MESSAGE in (err.message or '')


def _log_notification(message: str) -> None:
    logger.warning(message)


class CategoryFormController:
    """Category list, form and delete-dialog state for one admin session."""

    derive_slug = staticmethod(derive_slug)

    def __init__(self, client: ApiClient, notify: Callable[[str], None] | None = None):
        self.client = client
        self.notify = notify or _log_notification

        self.categories: list[Category] = []
        self.loading = False
        self.error: Optional[str] = None

        self.form = CategoryFormState()
        self.delete = DeleteState()
        # Slug derived from the name at the last name change. While the slug
        # field still equals it, name edits keep regenerating the slug.
        self._auto_slug = ''

    # --- list ---

    def load_categories(self) -> None:
        self.loading = True
        self.error = None
        try:
            data = self.client.get(CATEGORIES_PATH)
            if data is None:
                data = []
            if not isinstance(data, list):
                raise ApiError(f'{INVALID_RESPONSE}: expected a list, got {data!r}')
            self.categories = [Category.from_dict(item) for item in data]
        except ApiError as err:
            logger.error(f"Error fetching categories: {err.message}")
            self.error = FETCH_ERROR
        finally:
            self.loading = False

    # --- form ---

    def on_field_change(self, field_name: str, value: str) -> None:
        fields = self.form.fields
        if field_name == 'name':
            follows_name = not fields.slug or fields.slug == self._auto_slug
            fields.name = value
            self._auto_slug = self.derive_slug(value)
            if follows_name:
                fields.slug = self._auto_slug
        elif field_name == 'slug':
            fields.slug = value
        else:
            raise ValueError(f'Unknown category field: {field_name}')

    def validate(self) -> bool:
        fields = self.form.fields
        errors: dict[str, str] = {}

        if not fields.name.strip():
            errors['name'] = NAME_REQUIRED

        if not fields.slug.strip():
            errors['slug'] = SLUG_REQUIRED
        elif not is_valid_slug(fields.slug):
            errors['slug'] = SLUG_INVALID

        self.form.field_errors = errors
        return not errors

    def _open_form(self, fields: CategoryFields, target: Optional[Category]) -> None:
        self.form = CategoryFormState(is_open=True, editing_target=target, fields=fields)
        self._auto_slug = self.derive_slug(fields.name)

    def open_add_form(self) -> None:
        self._open_form(CategoryFields(), None)

    def open_edit_form(self, category: Category) -> None:
        self._open_form(CategoryFields(name=category.name, slug=category.slug), category)

    def close_form(self) -> None:
        self.form = CategoryFormState()
        self._auto_slug = ''

    def submit(self) -> bool:
        """Save the form. Returns True when the category was stored."""
        if not self.validate():
            return False

        target = self.form.editing_target
        payload = self.form.fields.to_payload()
        try:
            self.form.submitting = True
            if self.form.is_editing:
                data = self.client.put(f'{CATEGORIES_PATH}/{target.id}', json=payload)
                updated = Category.from_dict(data)
                self.categories = [updated if cat.id == updated.id else cat for cat in self.categories]
            else:
                data = self.client.post(CATEGORIES_PATH, json=payload)
                self.categories = [*self.categories, Category.from_dict(data)]
            self.close_form()
            return True
        except ApiError as err:
            logger.error(f"Error saving category: {err.message}")
            if is_slug_conflict(err):
                self.form.field_errors = {**self.form.field_errors, 'slug': SLUG_TAKEN_FIELD_ERROR}
            else:
                self.notify(err.message or SAVE_ERROR)
            return False
        finally:
            self.form.submitting = False

    # --- delete ---

    def open_delete_modal(self, category_id: str) -> None:
        self.delete = DeleteState(is_open=True, target_id=category_id)

    def close_delete_modal(self) -> None:
        self.delete = DeleteState()

    def confirm_delete(self) -> bool:
        """Delete the targeted category. Returns True when it was removed."""
        target_id = self.delete.target_id
        if not target_id:
            return False

        try:
            self.delete.loading = True
            self.delete.error = None
            self.client.delete(f'{CATEGORIES_PATH}/{target_id}')
            self.categories = [cat for cat in self.categories if cat.id != target_id]
            self.close_delete_modal()
            return True
        except ApiError as err:
            logger.error(f"Error deleting category: {err.message}")
            self.delete.error = err.message or DELETE_ERROR
            return False
        finally:
            self.delete.loading = False
