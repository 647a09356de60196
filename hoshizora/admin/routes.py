# hoshizora/admin/routes.py

from flask import render_template, redirect, url_for, flash, current_app, abort
from sqlalchemy.exc import SQLAlchemyError

from hoshizora.decorators import admin_required
from hoshizora.errors import BlogError, CategoryInUseError, CategoryNotFoundError, SlugConflictError
from hoshizora.extensions import db
from hoshizora.forms import CategoryForm, DeleteForm
from hoshizora.services import categories as category_service
from hoshizora.slugs import derive_slug

from . import bp


def _load_category(category_id):
    try:
        return category_service.get_category(category_id)
    except CategoryNotFoundError:
        abort(404)


def _save_from_form(form, category=None):
    """
    Create or update a category from a validated form. Returns the category,
    or None after attaching the errors to the form.
    """
    name = form.name.data.strip()
    slug = (form.slug.data or '').strip() or derive_slug(name)
    description = form.description.data or ''
    try:
        if category is None:
            return category_service.create_category(name, slug, description)
        return category_service.update_category(category, name, slug, description)
    except SlugConflictError as e:
        form.slug.errors.append(e.message)
    except BlogError as e:
        for field_name, message in e.fields.items():
            getattr(form, field_name).errors.append(message)
        if not e.fields:
            flash(e.message, 'danger')
    return None


# --- Category management ---
@bp.route('/categories')
@admin_required
def list_categories():
    categories = category_service.list_categories()
    return render_template('admin/categories.html',
                           categories=categories,
                           form=CategoryForm(),
                           csrf_form=DeleteForm(),
                           title='จัดการหมวดหมู่')


@bp.route('/categories/add', methods=['GET', 'POST'])
@admin_required
def add_category():
    form = CategoryForm()
    if form.validate_on_submit():
        category = _save_from_form(form)
        if category is not None:
            flash(f'เพิ่มหมวดหมู่ "{category.name}" เรียบร้อยแล้ว', 'success')
            return redirect(url_for('admin.list_categories'))
    return render_template('admin/category_form.html', form=form, title='เพิ่มหมวดหมู่')


@bp.route('/categories/<uuid:category_id>/edit', methods=['GET', 'POST'])
@admin_required
def edit_category(category_id):
    category = _load_category(category_id)
    form = CategoryForm(obj=category)
    if form.validate_on_submit():
        saved = _save_from_form(form, category)
        if saved is not None:
            flash(f'แก้ไขหมวดหมู่ "{saved.name}" เรียบร้อยแล้ว', 'success')
            return redirect(url_for('admin.list_categories'))
    return render_template('admin/category_form.html', form=form, category=category, title='แก้ไขหมวดหมู่')


@bp.route('/categories/<uuid:category_id>/delete', methods=['POST'])
@admin_required
def delete_category(category_id):
    form = DeleteForm()
    if not form.validate_on_submit():
        flash('คำขอไม่ถูกต้อง', 'danger')
        return redirect(url_for('admin.list_categories'))

    category = _load_category(category_id)
    try:
        category_service.delete_category(category)
        flash('ลบหมวดหมู่เรียบร้อยแล้ว', 'success')
    except CategoryInUseError as e:
        flash(e.message, 'warning')
    except SQLAlchemyError as e:
        db.session.rollback()
        flash('เกิดข้อผิดพลาดในการลบหมวดหมู่', 'danger')
        current_app.logger.error(f"Error deleting category {category_id}: {e}", exc_info=True)
    return redirect(url_for('admin.list_categories'))
