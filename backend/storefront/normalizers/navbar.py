from .common import timestamps


def normalize_navbar(navbar):
    menu_items = sorted(navbar.menu_items or [], key=lambda m: m.get("order") or 0)

    mega_menus = []
    for mega_menu in navbar.mega_menus or []:
        mega_menus.append({
            **mega_menu,
            "categories": sorted(
                mega_menu.get("categories") or [],
                key=lambda c: c.get("order") or 0,
            ),
        })

    return {
        "id": navbar.id,
        "logo": navbar.logo,
        "menuItems": menu_items,
        "megaMenus": mega_menus,
        "searchEnabled": navbar.search_enabled,
        "wishlistEnabled": navbar.wishlist_enabled,
        "cartEnabled": navbar.cart_enabled,
        "userEnabled": navbar.user_enabled,
        **timestamps(navbar),
    }
