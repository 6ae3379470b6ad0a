import click
from flask import current_app

from .extensions import db


def register_commands(app):
    """Flask CLI commands for provisioning a fresh database."""

    @app.cli.command("create-admin")
    @click.option("--name", prompt=True)
    @click.option("--email", prompt=True)
    @click.option("--password", prompt=True, hide_input=True, confirmation_prompt=True)
    def create_admin(name, email, password):
        from .models.user import User

        if User.query.filter_by(email=email.strip().lower()).first():
            raise click.ClickException(f"A user with email {email} already exists")

        user = User(name=name, email=email, role="admin")
        user.set_password(password)
        db.session.add(user)
        db.session.commit()
        click.echo(f"Admin {user.email} created")

    @app.cli.command("seed-navbar")
    def seed_navbar_command():
        from .application.navbar import seed_navbar
        from .errors import ApiError

        try:
            navbar = seed_navbar()
        except ApiError as exc:
            raise click.ClickException(exc.message)
        click.echo(f"Navbar seeded with {len(navbar.menu_items)} menu items")

    @app.cli.command("seed-signup-popup")
    def seed_signup_popup_command():
        from .application.signup_popup import seed_popup
        from .errors import ApiError

        try:
            seed_popup()
        except ApiError as exc:
            raise click.ClickException(exc.message)
        click.echo("Signup popup seeded")

    @app.cli.command("seed-homepage")
    def seed_homepage_command():
        from .application.homepage_content import initialize_defaults

        sections = initialize_defaults()
        click.echo(f"{len(sections)} homepage sections initialized")

    @app.cli.command("seed-content")
    def seed_content_command():
        from .application.content import seed_default_content

        created = seed_default_content()
        click.echo(f"{len(created)} content pages created")
        current_app.logger.info("Seeded %d content pages", len(created))
