from typing import Any, Dict, List
from storefront.errors import ValidationError
from storefront.extensions import db
from storefront.models.menu import Menu
from storefront.utils.transaction import transactional


def list_menus() -> List[Menu]:
    return Menu.query.order_by(Menu.code.asc(), Menu.created_at.asc()).all()


def create_menu(*, data: Dict[str, Any], actor_id: str) -> Menu:
    if not data.get("name") or not data.get("slug"):
        raise ValidationError("Name and slug are required")

    menu = Menu(
        code=data.get("code"),
        name=data["name"],
        slug=data["slug"],
        status=data.get("status", True),
        post_by_id=actor_id,
    )

    with transactional():
        db.session.add(menu)

    return menu
