# hoshizora/client/cli.py
"""
hoshizora-admin: manage blog categories from a terminal through the CRUD API.
"""

import logging
import sys

import click

from hoshizora.client.api import create_api_client
from hoshizora.client.controller import CategoryFormController


def _notify(message):
    click.secho(message, fg='red', err=True)


def _report_form_errors(controller):
    for field_name, message in controller.form.field_errors.items():
        click.secho(f'{field_name}: {message}', fg='red', err=True)


def _require_categories(controller):
    controller.load_categories()
    if controller.error:
        click.secho(controller.error, fg='red', err=True)
        sys.exit(1)


def _find_category(controller, category_id):
    for category in controller.categories:
        if category.id == category_id:
            return category
    click.secho(f'Category not found: {category_id}', fg='red', err=True)
    sys.exit(1)


def _submit(controller):
    if controller.submit():
        return
    _report_form_errors(controller)
    sys.exit(1)


@click.group()
@click.option('--base-url', envvar='HOSHIZORA_API_URL', default='http://localhost:5001',
              show_default=True, help='Blog base URL.')
@click.option('--token', envvar='HOSHIZORA_API_TOKEN', default=None, help='Admin API token.')
@click.option('-v', '--verbose', is_flag=True, help='Log API failures to stderr.')
@click.pass_context
def main(ctx, base_url, token, verbose):
    """Manage blog categories."""
    logging.basicConfig(level=logging.INFO if verbose else logging.CRITICAL,
                        format='%(levelname)s %(name)s: %(message)s')
    if ctx.obj is None:
        client = create_api_client(base_url, token=token)
        ctx.call_on_close(client.close)
        ctx.obj = CategoryFormController(client, notify=_notify)


@main.command('list')
@click.pass_obj
def list_categories(controller):
    """List all categories."""
    _require_categories(controller)
    if not controller.categories:
        click.echo('No categories.')
        return
    for category in controller.categories:
        click.echo(f'{category.id}  {category.slug:<30}  {category.name}')


@main.command('add')
@click.argument('name')
@click.option('--slug', default=None, help='Slug to use instead of the one derived from NAME.')
@click.pass_obj
def add_category(controller, name, slug):
    """Create a category called NAME."""
    controller.open_add_form()
    controller.on_field_change('name', name)
    if slug is not None:
        controller.on_field_change('slug', slug)
    _submit(controller)
    created = controller.categories[-1]
    click.echo(f'Created {created.name} ({created.slug}) id={created.id}')


@main.command('edit')
@click.argument('category_id')
@click.option('--name', default=None, help='New name. The slug follows it unless it was customised.')
@click.option('--slug', default=None, help='New slug.')
@click.pass_obj
def edit_category(controller, category_id, name, slug):
    """Rename a category or change its slug."""
    _require_categories(controller)
    controller.open_edit_form(_find_category(controller, category_id))
    if name is not None:
        controller.on_field_change('name', name)
    if slug is not None:
        controller.on_field_change('slug', slug)
    _submit(controller)
    updated = _find_category(controller, category_id)
    click.echo(f'Updated {updated.name} ({updated.slug})')


@main.command('delete')
@click.argument('category_id')
@click.option('--yes', is_flag=True, help='Do not ask for confirmation.')
@click.pass_obj
def delete_category(controller, category_id, yes):
    """Delete a category."""
    controller.open_delete_modal(category_id)
    if not yes and not click.confirm(f'Delete category {category_id}?'):
        controller.close_delete_modal()
        click.echo('Cancelled.')
        return
    if not controller.confirm_delete():
        click.secho(controller.delete.error, fg='red', err=True)
        sys.exit(1)
    click.echo(f'Deleted {category_id}')


if __name__ == '__main__':
    main()
